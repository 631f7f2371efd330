"""Edit comment use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.paper.common import load_paper
from hub.application.usecase.views import CommentNode
from hub.domain.access import Capability, require_access
from hub.domain.service import CommentService, GroupService, PaperService, UserService
from hub.domain.value import CommentId, UserId, parse_id


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    paper_id: str
    comment_id: str
    user_id: str
    content: str = Field(max_length=1000)


class EditCommentUseCase:
    """Use case for an author editing their comment."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize edit comment use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            comment_service: Comment domain service
            user_service: User service for the author profile
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: EditCommentRequest) -> CommentNode:
        """Replace the content and mark the comment edited.

        Raises:
            NotFoundError: If the comment is not on this paper
            NotAuthorizedError: If the caller did not write the comment
        """
        with logfire.span("edit_comment.execute", comment_id=request.comment_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            comment = await self.comment_service.get_comment(
                paper, CommentId(parse_id(request.comment_id))
            )
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, comment, Capability.EDIT_ITEM, group=group)

            edited = await self.comment_service.edit_comment(comment, request.content)
            authors = await self.user_service.get_many([edited.author_id])
            return CommentNode.from_comment(edited, authors, actor_id)
