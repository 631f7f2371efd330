"""In-memory paper repository for testing."""

from collections import Counter
from typing import Optional

from hub.domain.model import Paper
from hub.domain.repository import PaperQuery, PaperRepository, TagCount
from hub.domain.value import GroupId, PaperId


class InMemoryPaperRepository(PaperRepository):
    """In-memory implementation of PaperRepository for testing."""

    def __init__(self) -> None:
        self._papers: dict[PaperId, Paper] = {}

    def _matches(self, paper: Paper, query: PaperQuery) -> bool:
        if paper.group_id != query.group_id:
            return False
        if query.category is not None and paper.category != query.category:
            return False
        if query.search:
            text = f"{paper.title} {paper.description or ''}".lower()
            if not all(word.lower() in text for word in query.search.split()):
                return False
        if query.tags and not set(query.tags) & set(paper.tags):
            return False
        return True

    async def find_by_id(self, paper_id: PaperId) -> Optional[Paper]:
        """Find a paper by ID."""
        return self._papers.get(paper_id)

    async def find_by_group(
        self, query: PaperQuery, limit: int = 12, offset: int = 0
    ) -> list[Paper]:
        """List a group's papers, newest first."""
        papers = [p for p in self._papers.values() if self._matches(p, query)]
        papers.sort(key=lambda p: p.created_at, reverse=True)
        return papers[offset : offset + limit]

    async def count_by_group(self, query: PaperQuery) -> int:
        """Count papers matching the filters."""
        return sum(1 for p in self._papers.values() if self._matches(p, query))

    async def popular_tags(self, group_id: GroupId, limit: int = 10) -> list[TagCount]:
        """Most used tags in a group."""
        counts = Counter(
            tag for p in self._papers.values() if p.group_id == group_id for tag in p.tags
        )
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [TagCount(tag=tag, count=count) for tag, count in ranked[:limit]]

    async def save(self, paper: Paper) -> Paper:
        """Save a paper (create or update)."""
        self._papers[paper.id] = paper
        return paper

    async def delete(self, paper_id: PaperId) -> None:
        """Delete a paper."""
        self._papers.pop(paper_id, None)

    async def increment_view_count(self, paper_id: PaperId) -> None:
        """Add one to the view counter."""
        paper = self._papers.get(paper_id)
        if paper:
            self._papers[paper_id] = paper.model_copy(
                update={"view_count": paper.view_count + 1}
            )

    async def increment_download_count(self, paper_id: PaperId) -> None:
        """Add one to the download counter."""
        paper = self._papers.get(paper_id)
        if paper:
            self._papers[paper_id] = paper.model_copy(
                update={"download_count": paper.download_count + 1}
            )
