"""Event publishing port."""

from abc import ABC, abstractmethod

from meriter.domain.model.event import DomainEvent


class EventPublisher(ABC):
    """Sink for domain events.

    Delivery is best-effort: callers publish after committing and log
    failures instead of rolling back.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish a domain event.

        Args:
            event: Vote-cast or withdrawal event

        Raises:
            EventDeliveryError: If the sink rejected or could not receive the event
        """
        pass
