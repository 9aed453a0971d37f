"""Grant welcome merits use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import WalletService
from meriter.domain.value import CommunityId, UserId


class GrantWelcomeMeritsRequest(BaseModel):
    """Grant welcome merits request."""

    user_id: str  # Newly joined member
    community_id: str


class GrantWelcomeMeritsResponse(BaseModel):
    """Grant welcome merits response."""

    granted: bool
    amount: int
    transaction_id: Optional[str] = None


class GrantWelcomeMeritsUseCase(BaseUseCase):
    """Use case for the one-time welcome credit after joining a community.

    Safe to call on every join: a wallet that already received its
    welcome merits is left untouched.
    """

    def __init__(self, wallet_service: WalletService) -> None:
        """Initialize grant welcome merits use case.

        Args:
            wallet_service: Wallet domain service
        """
        self.wallet_service = wallet_service

    async def execute(
        self, request: GrantWelcomeMeritsRequest
    ) -> GrantWelcomeMeritsResponse:
        """Execute welcome merits flow.

        Args:
            request: Grant welcome merits request

        Returns:
            Whether a credit was made, and its amount

        Raises:
            NotFoundError: If the community does not exist
        """
        transaction = await self.wallet_service.credit_welcome_merits_if_needed(
            UserId(UUID(request.user_id)), CommunityId(UUID(request.community_id))
        )
        if transaction is None:
            return GrantWelcomeMeritsResponse(granted=False, amount=0)

        return GrantWelcomeMeritsResponse(
            granted=True,
            amount=transaction.amount,
            transaction_id=str(transaction.id),
        )
