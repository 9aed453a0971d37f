"""Wallet and transaction entities.

Transactions are the source of truth for a wallet. Wallet.balance is a
cached sum that only changes by applying a transaction.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from meriter.domain.model.common import DomainModel, utc_now
from meriter.domain.value import (
    CommunityId,
    CurrencyNames,
    ReferenceType,
    TransactionId,
    TransactionSource,
    TransactionType,
    UserId,
    WalletId,
)


class Transaction(DomainModel):
    """Audit record of a single balance change."""

    id: TransactionId
    wallet_id: WalletId
    type: TransactionType
    amount: int = Field(gt=0)
    source_type: TransactionSource = TransactionSource.PERSONAL
    reference_type: ReferenceType
    reference_id: Optional[UUID] = None
    description: str = ""
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def signed_amount(self) -> int:
        """Positive for credits, negative for debits."""
        return self.amount if self.type == TransactionType.CREDIT else -self.amount


class Wallet(DomainModel):
    """Per (user, community) merit balance."""

    id: WalletId
    user_id: UserId
    community_id: CommunityId
    balance: int = Field(default=0, ge=0)
    currency: CurrencyNames = Field(default_factory=CurrencyNames)
    last_updated: datetime = Field(default_factory=utc_now)

    def apply(self, transaction: Transaction) -> "Wallet":
        """Return the wallet with the transaction's delta applied."""
        if transaction.wallet_id != self.id:
            raise ValueError("Transaction belongs to a different wallet")
        return self.model_copy(
            update={
                "balance": self.balance + transaction.signed_amount,
                "last_updated": transaction.created_at,
            }
        )
