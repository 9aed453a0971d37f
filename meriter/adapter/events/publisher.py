"""Domain event publishers.

The webhook publisher posts events as JSON to a configured endpoint.
The in-memory publisher records them for tests.
"""

import httpx
import logfire

from meriter.adapter.error import EventDeliveryError
from meriter.config import EventSettings
from meriter.domain.model.event import DomainEvent
from meriter.domain.service.event_publisher import EventPublisher


class WebhookEventPublisher(EventPublisher):
    """Publishes domain events to an HTTP webhook."""

    def __init__(self, client: httpx.AsyncClient, settings: EventSettings) -> None:
        """Initialize webhook publisher.

        Args:
            client: Shared async HTTP client
            settings: Event delivery configuration
        """
        self.client = client
        self.settings = settings

    async def publish(self, event: DomainEvent) -> None:
        """POST the event as JSON.

        Without a configured webhook the event is only logged.

        Raises:
            EventDeliveryError: On transport errors or non-2xx responses
        """
        if not self.settings.webhook_url:
            logfire.info(
                "No event webhook configured, event logged only",
                event_type=event.event_type,
            )
            return

        with logfire.span("webhook_event_publisher.publish", event_type=event.event_type):
            try:
                response = await self.client.post(
                    self.settings.webhook_url,
                    json=event.model_dump(mode="json"),
                    timeout=self.settings.timeout_seconds,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise EventDeliveryError(
                    f"Event webhook returned {e.response.status_code} for {event.event_type}"
                ) from e
            except httpx.HTTPError as e:
                raise EventDeliveryError(
                    f"Event webhook unreachable for {event.event_type}: {e}"
                ) from e

            logfire.info(
                "Event delivered",
                event_type=event.event_type,
                status_code=response.status_code,
            )


class InMemoryEventPublisher(EventPublisher):
    """Records published events in memory for testing."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)
