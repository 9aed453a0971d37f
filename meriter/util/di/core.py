"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from meriter.config import EventSettings, LedgerSettings, Settings, VotingSettings
from meriter.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_ledger_settings(self, settings: Settings) -> LedgerSettings:
        return settings.ledger

    @provide(scope=Scope.APP)
    def provide_event_settings(self, settings: Settings) -> EventSettings:
        return settings.events
