"""List discussions use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.views import DiscussionView, discussion_user_ids
from hub.domain.access import Capability, require_access
from hub.domain.service import DiscussionService, GroupService, UserService
from hub.domain.value import (
    MAX_PAGE_SIZE,
    DiscussionCategory,
    GroupId,
    Pagination,
    UserId,
    page_offset,
    paginate,
    parse_id,
)

ALL_CATEGORIES = "all"


class ListDiscussionsRequest(BaseModel):
    """List discussions request."""

    group_id: str
    user_id: str
    category: DiscussionCategory | None = None
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE)


class ListDiscussionsResponse(BaseModel):
    """One page of a group's discussions."""

    discussions: list[DiscussionView]
    pagination: Pagination


class ListDiscussionsUseCase:
    """Use case for browsing a group's discussions."""

    def __init__(
        self,
        group_service: GroupService,
        discussion_service: DiscussionService,
        user_service: UserService,
    ) -> None:
        """Initialize list discussions use case.

        Args:
            group_service: Group domain service
            discussion_service: Discussion domain service
            user_service: User service for author profiles
        """
        self.group_service = group_service
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: ListDiscussionsRequest) -> ListDiscussionsResponse:
        """Pinned discussions first, then the most recently active.

        Raises:
            NotAuthorizedError: If the caller is not a member
        """
        with logfire.span(
            "list_discussions.execute",
            group_id=request.group_id,
            category=request.category.value if request.category else None,
            page=request.page,
        ):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.CONTRIBUTE)

            discussions, total = await self.discussion_service.list_discussions(
                group.id,
                category=request.category,
                search=request.search or None,
                limit=request.limit,
                offset=page_offset(request.page, request.limit),
            )
            authors = await self.user_service.get_many(discussion_user_ids(discussions))
            return ListDiscussionsResponse(
                discussions=[
                    DiscussionView.from_discussion(discussion, authors)
                    for discussion in discussions
                ],
                pagination=paginate(total, request.page, request.limit),
            )
