"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from remark.config import CommentSettings, Settings
from remark.domain.value import MutationWindow
from remark.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_mutation_window(self, comment_settings: CommentSettings) -> MutationWindow:
        """Provide edit/delete/restore time limits."""
        return comment_settings.mutation_window()
