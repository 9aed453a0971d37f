"""Unit tests for the webhook event publisher."""

import json
from unittest.mock import AsyncMock
from uuid import uuid4

import httpx
import pytest

from meriter.adapter.error import EventDeliveryError
from meriter.adapter.events import WebhookEventPublisher
from meriter.config import EventSettings
from meriter.domain.model.event import VoteCastEvent
from meriter.domain.value import (
    CommunityId,
    TargetType,
    UserId,
    VoteDirection,
    VoteId,
)

WEBHOOK_URL = "https://hooks.example.org/meriter"


def make_event() -> VoteCastEvent:
    return VoteCastEvent(
        vote_ids=[VoteId(uuid4())],
        target_type=TargetType.PUBLICATION,
        target_id=uuid4(),
        voter_id=UserId(uuid4()),
        beneficiary_id=UserId(uuid4()),
        community_id=CommunityId(uuid4()),
        amount_quota=3,
        amount_wallet=0,
        direction=VoteDirection.UP,
    )


class TestWebhookEventPublisher:
    """Tests for publish method."""

    @pytest.mark.asyncio
    async def test_posts_event_as_json(self):
        """Should POST the serialized event to the webhook."""
        received = []

        def handler(request: httpx.Request) -> httpx.Response:
            received.append(request)
            return httpx.Response(202)

        event = make_event()
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            publisher = WebhookEventPublisher(client, EventSettings(webhook_url=WEBHOOK_URL))
            await publisher.publish(event)

        [request] = received
        assert str(request.url) == WEBHOOK_URL
        body = json.loads(request.content)
        assert body["event_type"] == "vote.cast"
        assert body["target_type"] == "publication"
        assert body["vote_ids"] == [str(event.vote_ids[0])]

    @pytest.mark.asyncio
    async def test_error_status_raises_delivery_error(self):
        """Should wrap non-2xx responses."""
        transport = httpx.MockTransport(lambda request: httpx.Response(503))

        async with httpx.AsyncClient(transport=transport) as client:
            publisher = WebhookEventPublisher(client, EventSettings(webhook_url=WEBHOOK_URL))

            with pytest.raises(EventDeliveryError, match="returned 503"):
                await publisher.publish(make_event())

    @pytest.mark.asyncio
    async def test_transport_error_raises_delivery_error(self):
        """Should wrap connection failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            publisher = WebhookEventPublisher(client, EventSettings(webhook_url=WEBHOOK_URL))

            with pytest.raises(EventDeliveryError, match="unreachable"):
                await publisher.publish(make_event())

    @pytest.mark.asyncio
    async def test_without_webhook_nothing_is_sent(self):
        """Should only log when no webhook is configured."""
        client = AsyncMock(spec=httpx.AsyncClient)
        publisher = WebhookEventPublisher(client, EventSettings())

        await publisher.publish(make_event())

        client.post.assert_not_called()
