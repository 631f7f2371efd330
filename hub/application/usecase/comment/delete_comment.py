"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.paper.common import load_paper
from hub.domain.access import Capability, require_access
from hub.domain.service import CommentService, GroupService, PaperService
from hub.domain.value import CommentId, UserId, parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    paper_id: str
    comment_id: str
    user_id: str


class DeleteCommentUseCase:
    """Use case for removing a single comment."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            comment_service: Comment domain service
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Delete the comment. Replies to it are kept.

        Raises:
            NotFoundError: If the comment is not on this paper
            NotAuthorizedError: If the caller is neither the author nor the
                group owner
        """
        with logfire.span("delete_comment.execute", comment_id=request.comment_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            comment = await self.comment_service.get_comment(
                paper, CommentId(parse_id(request.comment_id))
            )
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, comment, Capability.DELETE_ITEM, group=group)

            await self.comment_service.delete_comment(comment)
