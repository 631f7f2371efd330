"""Discussion and reply repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model import Discussion, Reply
from hub.domain.value import DiscussionCategory, DiscussionId, GroupId, ReplyId


class DiscussionRepository(ABC):
    """Repository for Discussion entity."""

    @abstractmethod
    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID.

        Args:
            discussion_id: The discussion's unique identifier

        Returns:
            The discussion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_group(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Discussion]:
        """List a group's discussions, pinned first, then by last activity.

        Args:
            group_id: Group ID
            category: Only this category
            search: Case-insensitive substring of title or content
            limit: Maximum number of discussions to return
            offset: Number of discussions to skip

        Returns:
            List of discussions
        """
        pass

    @abstractmethod
    async def count_by_group(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count discussions matching the same filters as find_by_group."""
        pass

    @abstractmethod
    async def save(self, discussion: Discussion) -> Discussion:
        """Save a discussion (create or update).

        Args:
            discussion: The discussion to save

        Returns:
            The saved discussion
        """
        pass


class ReplyRepository(ABC):
    """Repository for Reply entity."""

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID.

        Args:
            reply_id: The reply's unique identifier

        Returns:
            The reply if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_discussion(
        self, discussion_id: DiscussionId, limit: int = 20, offset: int = 0
    ) -> list[Reply]:
        """One page of a discussion's replies, oldest first.

        Args:
            discussion_id: Discussion ID
            limit: Maximum number of replies to return
            offset: Number of replies to skip

        Returns:
            List of replies in creation order
        """
        pass

    @abstractmethod
    async def count_by_discussion(self, discussion_id: DiscussionId) -> int:
        """Count all replies in a discussion."""
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update).

        Args:
            reply: The reply to save

        Returns:
            The saved reply
        """
        pass
