"""Verify wallet balance use case."""

from uuid import UUID

from pydantic import BaseModel

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import WalletService
from meriter.domain.value import CommunityId, UserId


class VerifyWalletBalanceRequest(BaseModel):
    """Verify wallet balance request."""

    user_id: str
    community_id: str


class VerifyWalletBalanceResponse(BaseModel):
    """Verify wallet balance response."""

    consistent: bool
    balance: int


class VerifyWalletBalanceUseCase(BaseUseCase):
    """Use case for reconciling a cached balance with its transaction history."""

    def __init__(self, wallet_service: WalletService) -> None:
        """Initialize verify wallet balance use case.

        Args:
            wallet_service: Wallet domain service
        """
        self.wallet_service = wallet_service

    async def execute(
        self, request: VerifyWalletBalanceRequest
    ) -> VerifyWalletBalanceResponse:
        user_id = UserId(UUID(request.user_id))
        community_id = CommunityId(UUID(request.community_id))

        consistent = await self.wallet_service.verify_balance(user_id, community_id)
        balance = await self.wallet_service.get_balance(user_id, community_id)
        return VerifyWalletBalanceResponse(consistent=consistent, balance=balance)
