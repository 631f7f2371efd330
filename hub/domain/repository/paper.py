"""Paper repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import Field

from hub.domain.model import Paper
from hub.domain.value import GroupId, PaperCategory, PaperId
from hub.domain.value.common import ValueObject


class PaperQuery(ValueObject):
    """Filters for listing a group's papers."""

    group_id: GroupId
    category: Optional[PaperCategory] = None
    search: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class TagCount(ValueObject):
    """How many papers in a group carry a tag."""

    tag: str
    count: int


class PaperRepository(ABC):
    """Repository for Paper entity (metadata and ratings, not the file)."""

    @abstractmethod
    async def find_by_id(self, paper_id: PaperId) -> Optional[Paper]:
        """Find a paper by ID.

        Args:
            paper_id: The paper's unique identifier

        Returns:
            The paper if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_group(
        self, query: PaperQuery, limit: int = 12, offset: int = 0
    ) -> list[Paper]:
        """List a group's papers, newest first.

        Search matches every word of ``query.search`` against title or
        description. Tags match when the paper has any of ``query.tags``.

        Args:
            query: Group and filters
            limit: Maximum number of papers to return
            offset: Number of papers to skip

        Returns:
            List of papers
        """
        pass

    @abstractmethod
    async def count_by_group(self, query: PaperQuery) -> int:
        """Count papers matching the same filters as find_by_group."""
        pass

    @abstractmethod
    async def popular_tags(self, group_id: GroupId, limit: int = 10) -> list[TagCount]:
        """Most used tags in a group, most frequent first.

        Args:
            group_id: Group ID
            limit: Maximum number of tags

        Returns:
            Tags with their paper counts
        """
        pass

    @abstractmethod
    async def save(self, paper: Paper) -> Paper:
        """Save a paper (create or update).

        Args:
            paper: The paper to save

        Returns:
            The saved paper
        """
        pass

    @abstractmethod
    async def delete(self, paper_id: PaperId) -> None:
        """Delete a paper and its ratings.

        Args:
            paper_id: The paper ID to delete
        """
        pass

    @abstractmethod
    async def increment_view_count(self, paper_id: PaperId) -> None:
        """Atomically add one to the view counter."""
        pass

    @abstractmethod
    async def increment_download_count(self, paper_id: PaperId) -> None:
        """Atomically add one to the download counter."""
        pass
