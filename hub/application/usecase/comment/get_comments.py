"""Get comments use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.paper.common import load_paper
from hub.application.usecase.views import CommentNode, comment_forest
from hub.domain.access import Capability, require_access
from hub.domain.service import CommentService, GroupService, PaperService, UserService
from hub.domain.thread import walk
from hub.domain.value import UserId, parse_id


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    paper_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """A paper's comments as a forest."""

    paper_id: str
    comments: list[CommentNode]
    total: int


class GetCommentsUseCase:
    """Use case for reading the threaded comments on a paper."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            comment_service: Comment domain service
            user_service: User service for author profiles
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments are nested under their parents. A comment whose parent was
        deleted is shown at the top level. ``total`` counts every comment,
        nested ones included.

        Raises:
            NotFoundError: If the paper does not exist
            NotAuthorizedError: If the caller may not view the paper
        """
        with logfire.span("get_comments.execute", paper_id=request.paper_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            actor_id = UserId(parse_id(request.user_id)) if request.user_id else None
            require_access(actor_id, paper, Capability.VIEW_PAPER, group=group)

            forest, total = await self.comment_service.thread_for_paper(paper.id)
            authors = await self.user_service.get_many(
                [node.item.author_id for node, _ in walk(forest)]
            )
            return GetCommentsResponse(
                paper_id=str(paper.id),
                comments=comment_forest(forest, authors, actor_id),
                total=total,
            )
