"""Unit tests for the Vote entity."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from meriter.domain.model.vote import Vote
from meriter.domain.value import (
    CommunityId,
    TargetType,
    UserId,
    VoteDirection,
    VoteId,
    VoteSource,
)


def make_vote(**overrides) -> Vote:
    fields = {
        "id": VoteId(uuid4()),
        "target_type": TargetType.PUBLICATION,
        "target_id": uuid4(),
        "user_id": UserId(uuid4()),
        "community_id": CommunityId(uuid4()),
        "source_type": VoteSource.QUOTA,
        "amount_quota": 3,
    }
    fields.update(overrides)
    return Vote(**fields)


class TestVote:
    def test_quota_vote(self):
        vote = make_vote()

        assert vote.amount == 3
        assert vote.signed_amount == 3

    def test_wallet_downvote_is_negative(self):
        vote = make_vote(
            source_type=VoteSource.WALLET,
            amount_quota=0,
            amount_wallet=4,
            direction=VoteDirection.DOWN,
        )

        assert vote.signed_amount == -4

    def test_mixed_sources_rejected(self):
        with pytest.raises(ValidationError, match="only a positive quota amount"):
            make_vote(amount_wallet=2)

    def test_source_must_match_amount(self):
        with pytest.raises(ValidationError, match="only a positive wallet amount"):
            make_vote(source_type=VoteSource.WALLET)

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError):
            make_vote(amount_quota=0)

    def test_vote_is_immutable(self):
        vote = make_vote()

        with pytest.raises(ValidationError):
            vote.amount_quota = 10
