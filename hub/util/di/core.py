"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hub.config import (
    AuthSettings,
    EmailSettings,
    RateLimitSettings,
    Settings,
    UploadSettings,
)
from hub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.auth.rate_limit

    @provide(scope=Scope.APP)
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        """Provide upload settings."""
        return settings.uploads

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide email settings."""
        return settings.email
