"""Paper comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model import PaperComment
from hub.domain.value import CommentId, PaperId


class CommentRepository(ABC):
    """Repository for PaperComment entity.

    Comments are stored flat; threading is rebuilt by the caller.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[PaperComment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_paper(self, paper_id: PaperId) -> list[PaperComment]:
        """Find all comments on a paper, oldest first.

        Args:
            paper_id: The paper ID

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: PaperComment) -> PaperComment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete one comment. Replies to it are left in place.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_paper(self, paper_id: PaperId) -> None:
        """Delete every comment on a paper.

        Args:
            paper_id: The paper ID
        """
        pass
