"""Event delivery infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import httpx

from meriter.adapter.events import WebhookEventPublisher
from meriter.config import EventSettings
from meriter.domain.service import EventPublisher
from meriter.util.di.base import ProviderBase
from meriter.util.observability import instrument_httpx


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider posting to a webhook."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: EventSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide a shared HTTP client, closed with the container."""
        instrument_httpx()
        async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_event_publisher(
        self, client: httpx.AsyncClient, settings: EventSettings
    ) -> EventPublisher:
        """Provide webhook event publisher.

        Without a configured webhook URL, events are only logged.
        """
        return WebhookEventPublisher(client=client, settings=settings)
