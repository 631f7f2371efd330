"""Get discussion use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.discussion.common import load_for_member
from hub.application.usecase.views import (
    DiscussionView,
    ReplyNode,
    discussion_user_ids,
    reply_forest,
)
from hub.domain.service import (
    DiscussionService,
    GroupService,
    ReplyService,
    UserService,
)
from hub.domain.thread import walk
from hub.domain.value import (
    MAX_PAGE_SIZE,
    Pagination,
    UserId,
    page_offset,
    paginate,
    parse_id,
)


class GetDiscussionRequest(BaseModel):
    """Get discussion request."""

    discussion_id: str
    user_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)


class GetDiscussionResponse(BaseModel):
    """A discussion with one page of threaded replies."""

    discussion: DiscussionView
    replies: list[ReplyNode]
    pagination: Pagination


class GetDiscussionUseCase:
    """Use case for reading a discussion and its replies."""

    def __init__(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
        user_service: UserService,
    ) -> None:
        """Initialize get discussion use case.

        Args:
            discussion_service: Discussion domain service
            reply_service: Reply domain service
            group_service: Group service for the membership check
            user_service: User service for author profiles
        """
        self.discussion_service = discussion_service
        self.reply_service = reply_service
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: GetDiscussionRequest) -> GetDiscussionResponse:
        """Execute get discussion flow.

        Replies are paged in creation order and threaded within the page.
        A reply whose parent is on another page is shown at the top level.

        Raises:
            NotFoundError: If the discussion does not exist
            NotAuthorizedError: If the caller is not a member
        """
        with logfire.span(
            "get_discussion.execute",
            discussion_id=request.discussion_id,
            page=request.page,
        ):
            discussion, _ = await load_for_member(
                self.discussion_service,
                self.group_service,
                request.discussion_id,
                UserId(parse_id(request.user_id)),
            )

            forest, total = await self.reply_service.thread_page(
                discussion.id,
                limit=request.limit,
                offset=page_offset(request.page, request.limit),
            )
            author_ids = discussion_user_ids([discussion])
            author_ids.extend(node.item.author_id for node, _ in walk(forest))
            authors = await self.user_service.get_many(author_ids)

            return GetDiscussionResponse(
                discussion=DiscussionView.from_discussion(discussion, authors),
                replies=reply_forest(forest, authors),
                pagination=paginate(total, request.page, request.limit),
            )
