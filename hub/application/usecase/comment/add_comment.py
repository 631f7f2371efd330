"""Add comment use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.paper.common import load_paper
from hub.application.usecase.views import CommentNode
from hub.domain.access import Capability, require_access
from hub.domain.service import CommentService, GroupService, PaperService, UserService
from hub.domain.value import CommentId, UserId, parse_id


class AddCommentRequest(BaseModel):
    """Add comment request."""

    paper_id: str
    user_id: str  # Author, from the authenticated user
    content: str = Field(max_length=1000)
    parent_id: str | None = None  # Parent comment ID for replies


class AddCommentUseCase:
    """Use case for commenting on a paper or replying to a comment."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

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

    async def execute(self, request: AddCommentRequest) -> CommentNode:
        """Execute add comment flow.

        Raises:
            NotAuthorizedError: If the caller is not a member of the group
            ValidationError: If the content is blank
            BusinessRuleViolationError: If the parent is not a comment on
                this paper
        """
        with logfire.span(
            "add_comment.execute",
            paper_id=request.paper_id,
            is_reply=request.parent_id is not None,
        ):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            author_id = UserId(parse_id(request.user_id))
            require_access(author_id, group, Capability.CONTRIBUTE)

            parent_id = (
                CommentId(parse_id(request.parent_id)) if request.parent_id else None
            )
            comment = await self.comment_service.add_comment(
                paper, author_id, request.content, parent_id=parent_id
            )
            authors = await self.user_service.get_many([author_id])
            return CommentNode.from_comment(comment, authors, author_id)
