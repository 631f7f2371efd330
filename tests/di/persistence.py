"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hub.domain.repository import (
    CommentRepository,
    DiscussionRepository,
    GroupRepository,
    InvitationRepository,
    PaperRepository,
    ReplyRepository,
    UserRepository,
)
from hub.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDiscussionRepository,
    InMemoryGroupRepository,
    InMemoryInvitationRepository,
    InMemoryPaperRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
)
from hub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across the requests of one API test.
    Every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_group_repository(self) -> GroupRepository:
        """Provide in-memory group repository."""
        return InMemoryGroupRepository()

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()

    @provide(scope=Scope.APP)
    def get_paper_repository(self) -> PaperRepository:
        """Provide in-memory paper repository."""
        return InMemoryPaperRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_discussion_repository(self) -> DiscussionRepository:
        """Provide in-memory discussion repository."""
        return InMemoryDiscussionRepository()

    @provide(scope=Scope.APP)
    def get_reply_repository(self) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository()
