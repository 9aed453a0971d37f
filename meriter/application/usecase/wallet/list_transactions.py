"""List wallet transactions use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import WalletService
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionType,
    UserId,
)


class ListTransactionsRequest(BaseModel):
    """List transactions request."""

    user_id: str
    community_id: str
    limit: Optional[int] = Field(default=None, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class TransactionItem(BaseModel):
    """A single transaction in the history."""

    id: str
    type: TransactionType
    amount: int
    reference_type: ReferenceType
    reference_id: Optional[str]
    description: str
    created_at: datetime


class ListTransactionsResponse(BaseModel):
    """List transactions response."""

    transactions: list[TransactionItem]


class ListTransactionsUseCase(BaseUseCase):
    """Use case for paging through a wallet's audit trail."""

    def __init__(self, wallet_service: WalletService) -> None:
        """Initialize list transactions use case.

        Args:
            wallet_service: Wallet domain service
        """
        self.wallet_service = wallet_service

    async def execute(self, request: ListTransactionsRequest) -> ListTransactionsResponse:
        transactions = await self.wallet_service.list_transactions(
            UserId(UUID(request.user_id)),
            CommunityId(UUID(request.community_id)),
            limit=request.limit,
            offset=request.offset,
        )
        return ListTransactionsResponse(
            transactions=[
                TransactionItem(
                    id=str(t.id),
                    type=t.type,
                    amount=t.amount,
                    reference_type=t.reference_type,
                    reference_id=str(t.reference_id) if t.reference_id else None,
                    description=t.description,
                    created_at=t.created_at,
                )
                for t in transactions
            ]
        )
