"""List papers use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.views import PaperView
from hub.domain.access import Capability, require_access
from hub.domain.repository import PaperQuery, TagCount
from hub.domain.service import GroupService, PaperService, UserService
from hub.domain.value import (
    MAX_PAGE_SIZE,
    GroupId,
    Pagination,
    PaperCategory,
    UserId,
    page_offset,
    paginate,
    parse_id,
)


class ListPapersRequest(BaseModel):
    """List papers request."""

    group_id: str
    user_id: str
    category: PaperCategory | None = None
    search: str | None = None
    tags: list[str] = Field(default_factory=list)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=12, ge=1, le=MAX_PAGE_SIZE)


class ListPapersResponse(BaseModel):
    """One page of a group's papers with the group's popular tags."""

    papers: list[PaperView]
    pagination: Pagination
    popular_tags: list[TagCount]


class ListPapersUseCase:
    """Use case for browsing a group's library."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> None:
        """Initialize list papers use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            user_service: User service for uploader profiles
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.user_service = user_service

    async def execute(self, request: ListPapersRequest) -> ListPapersResponse:
        """Newest papers first, filtered by category, text and tags.

        Raises:
            NotAuthorizedError: If the caller is not a member
        """
        with logfire.span(
            "list_papers.execute",
            group_id=request.group_id,
            search=request.search,
            tags=request.tags,
            page=request.page,
        ):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.CONTRIBUTE)

            query = PaperQuery(
                group_id=group.id,
                category=request.category,
                search=request.search or None,
                tags=[tag.strip().lower() for tag in request.tags if tag.strip()],
            )
            papers, total = await self.paper_service.list_papers(
                query,
                limit=request.limit,
                offset=page_offset(request.page, request.limit),
            )
            popular_tags = await self.paper_service.popular_tags(group.id)
            uploaders = await self.user_service.get_many(
                [paper.uploaded_by for paper in papers]
            )
            return ListPapersResponse(
                papers=[PaperView.from_paper(paper, uploaders) for paper in papers],
                pagination=paginate(total, request.page, request.limit),
                popular_tags=popular_tags,
            )
