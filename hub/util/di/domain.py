"""Domain layer DI providers."""

from dishka import Scope, provide

from hub.adapter.email import EmailSender
from hub.adapter.storage import FileStorage
from hub.config import AuthSettings, RateLimitSettings, Settings, UploadSettings
from hub.domain.repository import (
    AttemptStore,
    CommentRepository,
    DiscussionRepository,
    GroupRepository,
    InvitationRepository,
    PaperRepository,
    ReplyRepository,
    UserRepository,
)
from hub.domain.service import (
    AuthService,
    CommentService,
    DiscussionService,
    GroupService,
    InvitationService,
    JWTService,
    PaperService,
    RateLimitService,
    ReplyService,
    UserService,
)
from hub.persistence.attempt_store import InMemoryAttemptStore
from hub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The rate limiter is the exception: its attempt log must outlive requests.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_attempt_store(self) -> AttemptStore:
        """Provide the process-wide attempt log."""
        return InMemoryAttemptStore()

    @provide(scope=Scope.APP)
    def get_rate_limit_service(
        self, attempt_store: AttemptStore, settings: RateLimitSettings
    ) -> RateLimitService:
        """Provide rate limit domain service."""
        return RateLimitService(attempt_store=attempt_store, settings=settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, jwt_service: JWTService, user_service: UserService
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(jwt_service=jwt_service, user_service=user_service)

    @provide
    def get_group_service(self, group_repository: GroupRepository) -> GroupService:
        """Provide group domain service."""
        return GroupService(group_repository=group_repository)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        email_sender: EmailSender,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            email_sender=email_sender,
            settings=settings,
        )

    @provide
    def get_paper_service(
        self,
        paper_repository: PaperRepository,
        file_storage: FileStorage,
        upload_settings: UploadSettings,
    ) -> PaperService:
        """Provide paper domain service."""
        return PaperService(
            paper_repository=paper_repository,
            file_storage=file_storage,
            upload_settings=upload_settings,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_discussion_service(
        self, discussion_repository: DiscussionRepository
    ) -> DiscussionService:
        """Provide discussion domain service."""
        return DiscussionService(discussion_repository=discussion_repository)

    @provide
    def get_reply_service(self, reply_repository: ReplyRepository) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(reply_repository=reply_repository)
