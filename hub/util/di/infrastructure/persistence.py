"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hub.config import Settings
from hub.domain.error import DomainError
from hub.domain.repository import (
    CommentRepository,
    DiscussionRepository,
    GroupRepository,
    InvitationRepository,
    PaperRepository,
    ReplyRepository,
    UserRepository,
)
from hub.persistence.database import create_engine, create_session_factory
from hub.persistence.repository import (
    PostgresCommentRepository,
    PostgresDiscussionRepository,
    PostgresGroupRepository,
    PostgresInvitationRepository,
    PostgresPaperRepository,
    PostgresReplyRepository,
    PostgresUserRepository,
)
from hub.util.di.base import ProviderBase
from hub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine, disposing its pool when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request when it succeeds or
        ends with a domain error (writes made before a rule was rejected, such
        as expiring a stale invitation, are kept). Any other exception rolls
        the session back.

        Errors translated by a route-level handler never reach this scope, so
        a transaction already broken by a failed flush is rolled back here
        instead of committed.
        """
        async with session_factory() as session:
            try:
                yield session
            except DomainError as e:
                await session.commit()
                logfire.info("Session committed after domain error", error=str(e))
                raise
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
            else:
                transaction = session.get_transaction()
                if transaction is not None and not transaction.is_active:
                    logfire.warn("Session rollback after failed flush")
                    await session.rollback()
                    return
                await session.commit()
                logfire.info("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_group_repository(self, session: AsyncSession) -> GroupRepository:
        """Provide Group repository."""
        return PostgresGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_paper_repository(self, session: AsyncSession) -> PaperRepository:
        """Provide Paper repository."""
        return PostgresPaperRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_discussion_repository(self, session: AsyncSession) -> DiscussionRepository:
        """Provide Discussion repository."""
        return PostgresDiscussionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, session: AsyncSession) -> ReplyRepository:
        """Provide Reply repository."""
        return PostgresReplyRepository(session)
