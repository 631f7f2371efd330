"""In-memory comment repository for testing."""

from typing import Optional

from hub.domain.model import PaperComment
from hub.domain.repository import CommentRepository
from hub.domain.value import CommentId, PaperId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, PaperComment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[PaperComment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_paper(self, paper_id: PaperId) -> list[PaperComment]:
        """All comments on a paper, oldest first."""
        comments = [c for c in self._comments.values() if c.paper_id == paper_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: PaperComment) -> PaperComment:
        """Save a comment (create or update)."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete one comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_paper(self, paper_id: PaperId) -> None:
        """Delete every comment on a paper."""
        self._comments = {
            cid: c for cid, c in self._comments.items() if c.paper_id != paper_id
        }
