"""PostgreSQL implementation of PaperComment repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import PaperComment
from hub.domain.repository import CommentRepository
from hub.domain.value import CommentId, PaperId
from hub.persistence.mappers import comment_to_dict, row_to_comment
from hub.persistence.tables import paper_comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[PaperComment]:
        """Find a comment by ID."""
        stmt = select(paper_comments_table).where(
            paper_comments_table.c.id == comment_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_paper(self, paper_id: PaperId) -> list[PaperComment]:
        """All comments on a paper, oldest first."""
        stmt = (
            select(paper_comments_table)
            .where(paper_comments_table.c.paper_id == paper_id)
            .order_by(paper_comments_table.c.created_at, paper_comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: PaperComment) -> PaperComment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        existing = await self.find_by_id(comment.id)
        if existing:
            stmt = (
                update(paper_comments_table)
                .where(paper_comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(paper_comments_table).values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete one comment. Its replies stay and surface at the top level."""
        await self.session.execute(
            delete(paper_comments_table).where(paper_comments_table.c.id == comment_id)
        )
        await self.session.flush()

    async def delete_by_paper(self, paper_id: PaperId) -> None:
        """Delete every comment on a paper."""
        await self.session.execute(
            delete(paper_comments_table).where(
                paper_comments_table.c.paper_id == paper_id
            )
        )
        await self.session.flush()
