"""Event publishing adapters."""

from .publisher import InMemoryEventPublisher, WebhookEventPublisher

__all__ = [
    "InMemoryEventPublisher",
    "WebhookEventPublisher",
]
