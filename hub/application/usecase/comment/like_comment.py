"""Toggle comment like use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.paper.common import load_paper
from hub.domain.access import Capability, require_access
from hub.domain.service import CommentService, GroupService, PaperService
from hub.domain.value import CommentId, UserId, parse_id


class LikeCommentRequest(BaseModel):
    """Toggle like request."""

    paper_id: str
    comment_id: str
    user_id: str


class LikeCommentResponse(BaseModel):
    """Like state after the toggle."""

    comment_id: str
    liked: bool
    like_count: int


class LikeCommentUseCase:
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
    ) -> None:
        """Initialize like comment use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            comment_service: Comment domain service
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Flip the caller's like.

        Raises:
            NotFoundError: If the comment is not on this paper
            NotAuthorizedError: If the caller is not a member of the group
        """
        with logfire.span("like_comment.execute", comment_id=request.comment_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.CONTRIBUTE)

            comment = await self.comment_service.get_comment(
                paper, CommentId(parse_id(request.comment_id))
            )
            updated = await self.comment_service.toggle_like(comment, actor_id)
            return LikeCommentResponse(
                comment_id=str(updated.id),
                liked=actor_id in updated.likes,
                like_count=updated.like_count,
            )
