"""Paper comment domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from hub.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from hub.domain.model import Paper, PaperComment
from hub.domain.repository import CommentRepository
from hub.domain.thread import ThreadNode, build_forest
from hub.domain.value import CommentId, PaperId, UserId

from .base import Service


def _clean_content(content: str) -> str:
    content = content.strip()
    if not content:
        raise ValidationError("Comment content is required")
    return content


class CommentService(Service):
    """Domain service for comments on papers."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_comment(self, paper: Paper, comment_id: CommentId) -> PaperComment:
        """Get a comment that belongs to ``paper``.

        Raises:
            NotFoundError: If the comment does not exist on this paper
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.paper_id != paper.id:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def thread_for_paper(
        self, paper_id: PaperId
    ) -> tuple[list[ThreadNode[PaperComment]], int]:
        """All comments on a paper, nested under their parents.

        Returns:
            The comment forest and the number of comments in it
        """
        with logfire.span("comment_service.thread_for_paper", paper_id=str(paper_id)):
            comments = await self.comment_repository.find_by_paper(paper_id)
            forest = build_forest(comments)
            logfire.info(
                "Comment thread built",
                paper_id=str(paper_id),
                total=len(comments),
                roots=len(forest),
            )
            return forest, len(comments)

    async def add_comment(
        self,
        paper: Paper,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> PaperComment:
        """Comment on a paper, or reply to one of its comments.

        Raises:
            ValidationError: If the content is blank or too long
            BusinessRuleViolationError: If the parent is not a comment on
                this paper
        """
        with logfire.span(
            "comment_service.add_comment",
            paper_id=str(paper.id),
            author_id=str(author_id),
            is_reply=parent_id is not None,
        ):
            content = _clean_content(content)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.paper_id != paper.id:
                    logfire.warn("Parent comment not on paper", parent_id=str(parent_id))
                    raise BusinessRuleViolationError("Parent comment not found")

            try:
                comment = PaperComment(
                    id=CommentId(uuid4()),
                    paper_id=paper.id,
                    author_id=author_id,
                    content=content,
                    parent_id=parent_id,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment added", comment_id=str(saved.id))
            return saved

    async def edit_comment(self, comment: PaperComment, content: str) -> PaperComment:
        """Replace a comment's content. Authorship is checked by the caller."""
        with logfire.span("comment_service.edit_comment", comment_id=str(comment.id)):
            try:
                edited = comment.edit(_clean_content(content))
                edited = PaperComment.model_validate(
                    edited.model_dump(exclude={"like_count"})
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(edited)
            logfire.info("Comment edited", comment_id=str(comment.id))
            return saved

    async def delete_comment(self, comment: PaperComment) -> None:
        """Delete one comment. Its replies stay and move to the top level."""
        with logfire.span("comment_service.delete_comment", comment_id=str(comment.id)):
            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=str(comment.id))

    async def toggle_like(self, comment: PaperComment, user_id: UserId) -> PaperComment:
        """Add the user's like, or remove it if already present."""
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=str(comment.id),
            user_id=str(user_id),
        ):
            saved = await self.comment_repository.save(comment.toggle_like(user_id))
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment.id),
                liked=user_id in saved.likes,
            )
            return saved

    async def delete_for_paper(self, paper_id: PaperId) -> None:
        """Remove every comment on a paper."""
        with logfire.span("comment_service.delete_for_paper", paper_id=str(paper_id)):
            await self.comment_repository.delete_by_paper(paper_id)
