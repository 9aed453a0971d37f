"""Domain events emitted by the ledger.

Events are published after the unit of work commits and are consumed
externally (notifications, feed invalidation).
"""

from datetime import datetime
from typing import Literal, Optional, Union
from uuid import UUID

from pydantic import Field

from meriter.domain.model.common import DomainModel, utc_now
from meriter.domain.value import (
    CommunityId,
    TargetType,
    TransactionId,
    UserId,
    VoteDirection,
    VoteId,
)


class VoteCastEvent(DomainModel):
    """A vote (one or two records) was persisted."""

    event_type: Literal["vote.cast"] = "vote.cast"
    vote_ids: list[VoteId]
    target_type: TargetType
    target_id: UUID
    voter_id: UserId
    beneficiary_id: UserId
    community_id: CommunityId
    amount_quota: int
    amount_wallet: int
    direction: VoteDirection
    occurred_at: datetime = Field(default_factory=utc_now)

    @property
    def total_amount(self) -> int:
        return self.amount_quota + self.amount_wallet


class WithdrawalEvent(DomainModel):
    """Accrued vote value was withdrawn by its beneficiary."""

    event_type: Literal["withdrawal.completed"] = "withdrawal.completed"
    target_type: TargetType
    target_id: UUID
    beneficiary_id: UserId
    source_community_id: CommunityId
    credited_community_id: Optional[CommunityId]
    amount: int
    transaction_id: Optional[TransactionId] = None
    occurred_at: datetime = Field(default_factory=utc_now)


DomainEvent = Union[VoteCastEvent, WithdrawalEvent]
