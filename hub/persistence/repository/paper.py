"""PostgreSQL implementation of Paper repository."""

from typing import Any, Optional

from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Paper
from hub.domain.repository import PaperQuery, PaperRepository, TagCount
from hub.domain.value import GroupId, PaperId
from hub.persistence.mappers import paper_to_dict, ratings_to_rows, row_to_paper
from hub.persistence.tables import paper_ratings_table, papers_table


class PostgresPaperRepository(PaperRepository):
    """PostgreSQL implementation of PaperRepository.

    Ratings live in ``paper_ratings`` and are loaded with their paper.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, rows: list[Any]) -> list[Paper]:
        """Attach ratings to paper rows with one extra query."""
        if not rows:
            return []
        paper_ids = [row["id"] for row in rows]
        stmt = (
            select(paper_ratings_table)
            .where(paper_ratings_table.c.paper_id.in_(paper_ids))
            .order_by(paper_ratings_table.c.created_at)
        )
        result = await self.session.execute(stmt)

        ratings: dict[Any, list[dict]] = {paper_id: [] for paper_id in paper_ids}
        for rating in result.mappings().all():
            ratings[rating["paper_id"]].append(dict(rating))

        return [row_to_paper(dict(row), ratings[row["id"]]) for row in rows]

    def _filters(self, query: PaperQuery):
        filters = [papers_table.c.group_id == query.group_id]
        if query.category is not None:
            filters.append(papers_table.c.category == query.category.value)
        if query.search:
            # Every word must appear in the title or the description
            filters.append(
                and_(
                    *(
                        or_(
                            papers_table.c.title.ilike(f"%{word}%"),
                            papers_table.c.description.ilike(f"%{word}%"),
                        )
                        for word in query.search.split()
                    )
                )
            )
        if query.tags:
            filters.append(papers_table.c.tags.overlap(query.tags))
        return filters

    async def find_by_id(self, paper_id: PaperId) -> Optional[Paper]:
        """Find a paper by ID, with its ratings."""
        stmt = select(papers_table).where(papers_table.c.id == paper_id)
        result = await self.session.execute(stmt)
        papers = await self._hydrate(result.mappings().all())
        return papers[0] if papers else None

    async def find_by_group(
        self, query: PaperQuery, limit: int = 12, offset: int = 0
    ) -> list[Paper]:
        """List a group's papers, newest first."""
        stmt = (
            select(papers_table)
            .where(*self._filters(query))
            .order_by(papers_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def count_by_group(self, query: PaperQuery) -> int:
        """Count papers matching the filters."""
        stmt = select(func.count()).select_from(papers_table).where(*self._filters(query))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def popular_tags(self, group_id: GroupId, limit: int = 10) -> list[TagCount]:
        """Most used tags in a group."""
        tag = func.unnest(papers_table.c.tags).label("tag")
        tagged = (
            select(tag).where(papers_table.c.group_id == group_id).subquery("tagged")
        )
        stmt = (
            select(tagged.c.tag, func.count().label("count"))
            .group_by(tagged.c.tag)
            .order_by(func.count().desc(), tagged.c.tag)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [TagCount(tag=row.tag, count=row.count) for row in result.all()]

    async def save(self, paper: Paper) -> Paper:
        """Save a paper and replace its ratings."""
        paper_dict = paper_to_dict(paper)

        exists = await self.session.execute(
            select(papers_table.c.id).where(papers_table.c.id == paper.id)
        )
        if exists.first():
            await self.session.execute(
                update(papers_table)
                .where(papers_table.c.id == paper.id)
                .values(**paper_dict)
            )
        else:
            await self.session.execute(insert(papers_table).values(**paper_dict))

        await self.session.execute(
            delete(paper_ratings_table).where(paper_ratings_table.c.paper_id == paper.id)
        )
        rating_rows = ratings_to_rows(paper)
        if rating_rows:
            await self.session.execute(insert(paper_ratings_table), rating_rows)

        await self.session.flush()
        return paper

    async def delete(self, paper_id: PaperId) -> None:
        """Delete a paper. Ratings go with it (ON DELETE CASCADE)."""
        await self.session.execute(
            delete(papers_table).where(papers_table.c.id == paper_id)
        )
        await self.session.flush()

    async def increment_view_count(self, paper_id: PaperId) -> None:
        """Add one to the view counter in place."""
        await self.session.execute(
            update(papers_table)
            .where(papers_table.c.id == paper_id)
            .values(view_count=papers_table.c.view_count + 1)
        )
        await self.session.flush()

    async def increment_download_count(self, paper_id: PaperId) -> None:
        """Add one to the download counter in place."""
        await self.session.execute(
            update(papers_table)
            .where(papers_table.c.id == paper_id)
            .values(download_count=papers_table.c.download_count + 1)
        )
        await self.session.flush()
