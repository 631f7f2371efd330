"""In-memory discussion and reply repositories for testing."""

from typing import Optional

from hub.domain.model import Discussion, Reply
from hub.domain.repository import DiscussionRepository, ReplyRepository
from hub.domain.value import DiscussionCategory, DiscussionId, GroupId, ReplyId


class InMemoryDiscussionRepository(DiscussionRepository):
    """In-memory implementation of DiscussionRepository for testing."""

    def __init__(self) -> None:
        self._discussions: dict[DiscussionId, Discussion] = {}

    def _matching(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory],
        search: Optional[str],
    ) -> list[Discussion]:
        matches = []
        for discussion in self._discussions.values():
            if discussion.group_id != group_id:
                continue
            if category is not None and discussion.category != category:
                continue
            if search:
                needle = search.lower()
                if (
                    needle not in discussion.title.lower()
                    and needle not in discussion.content.lower()
                ):
                    continue
            matches.append(discussion)
        return matches

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        return self._discussions.get(discussion_id)

    async def find_by_group(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Discussion]:
        """List a group's discussions, pinned first, then by last activity."""
        matches = self._matching(group_id, category, search)
        matches.sort(key=lambda d: (d.is_pinned, d.last_activity), reverse=True)
        return matches[offset : offset + limit]

    async def count_by_group(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count discussions matching the filters."""
        return len(self._matching(group_id, category, search))

    async def save(self, discussion: Discussion) -> Discussion:
        """Save a discussion (create or update)."""
        self._discussions[discussion.id] = discussion
        return discussion


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: dict[ReplyId, Reply] = {}

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        return self._replies.get(reply_id)

    async def find_by_discussion(
        self, discussion_id: DiscussionId, limit: int = 20, offset: int = 0
    ) -> list[Reply]:
        """One page of replies, oldest first."""
        replies = [r for r in self._replies.values() if r.discussion_id == discussion_id]
        replies.sort(key=lambda r: r.created_at)
        return replies[offset : offset + limit]

    async def count_by_discussion(self, discussion_id: DiscussionId) -> int:
        """Count all replies in a discussion."""
        return sum(1 for r in self._replies.values() if r.discussion_id == discussion_id)

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        self._replies[reply.id] = reply
        return reply
