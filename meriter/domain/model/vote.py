"""Vote entity.

Votes spend value from exactly one source. A user action that spends both
quota and wallet is stored as two Vote records, quota-sourced first.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from meriter.domain.model.common import DomainModel, utc_now
from meriter.domain.value import (
    CommunityId,
    TargetType,
    UserId,
    VoteDirection,
    VoteId,
    VoteSource,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Exactly one of amount_quota / amount_wallet is positive and it
      matches source_type
    - Append-only, no uniqueness per (user, target)
    - Polymorphic reference to the target (publication, vote or comment)
    """

    id: VoteId
    target_type: TargetType
    target_id: UUID
    user_id: UserId
    community_id: CommunityId
    source_type: VoteSource
    amount_quota: int = Field(default=0, ge=0)
    amount_wallet: int = Field(default=0, ge=0)
    direction: VoteDirection = VoteDirection.UP
    comment: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_single_source(self) -> "Vote":
        """Validate that the spent amount matches the source type."""
        if self.source_type == VoteSource.QUOTA:
            if self.amount_quota <= 0 or self.amount_wallet != 0:
                raise ValueError("Quota votes must spend only a positive quota amount")
        elif self.amount_wallet <= 0 or self.amount_quota != 0:
            raise ValueError("Wallet votes must spend only a positive wallet amount")
        return self

    @property
    def amount(self) -> int:
        """Magnitude spent by this vote."""
        return self.amount_quota + self.amount_wallet

    @property
    def signed_amount(self) -> int:
        """Amount with the sign of the vote direction."""
        return self.amount if self.direction == VoteDirection.UP else -self.amount
