"""List public groups use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.group.common import present_groups
from hub.application.usecase.views import GroupView
from hub.domain.service import GroupService, UserService
from hub.domain.value import (
    MAX_PAGE_SIZE,
    Pagination,
    UserId,
    page_offset,
    paginate,
    parse_id,
)


class ListGroupsRequest(BaseModel):
    """List groups request."""

    search: str | None = None
    field_of_study: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListGroupsResponse(BaseModel):
    """One page of public groups."""

    groups: list[GroupView]
    pagination: Pagination


class ListGroupsUseCase:
    """Use case for browsing active public groups."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        """Initialize list groups use case.

        Args:
            group_service: Group domain service
            user_service: User service for owner and member profiles
        """
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: ListGroupsRequest) -> ListGroupsResponse:
        """Execute list groups flow.

        Args:
            request: Filters and page

        Returns:
            Groups on the page with pagination metadata
        """
        with logfire.span(
            "list_groups.execute",
            search=request.search,
            page=request.page,
            limit=request.limit,
        ):
            groups, total = await self.group_service.list_public(
                search=request.search or None,
                field_of_study=request.field_of_study or None,
                limit=request.limit,
                offset=page_offset(request.page, request.limit),
            )
            actor_id = UserId(parse_id(request.user_id)) if request.user_id else None
            return ListGroupsResponse(
                groups=await present_groups(self.user_service, groups, actor_id),
                pagination=paginate(total, request.page, request.limit),
            )
