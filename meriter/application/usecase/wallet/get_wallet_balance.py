"""Get wallet balance use case."""

from uuid import UUID

from pydantic import BaseModel

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import WalletService
from meriter.domain.value import CommunityId, UserId


class GetWalletBalanceRequest(BaseModel):
    """Get wallet balance request."""

    user_id: str
    community_id: str


class GetWalletBalanceResponse(BaseModel):
    """Get wallet balance response."""

    balance: int


class GetWalletBalanceUseCase(BaseUseCase):
    """Use case for reading a wallet balance (0 before the first transaction)."""

    def __init__(self, wallet_service: WalletService) -> None:
        """Initialize get wallet balance use case.

        Args:
            wallet_service: Wallet domain service
        """
        self.wallet_service = wallet_service

    async def execute(self, request: GetWalletBalanceRequest) -> GetWalletBalanceResponse:
        balance = await self.wallet_service.get_balance(
            UserId(UUID(request.user_id)), CommunityId(UUID(request.community_id))
        )
        return GetWalletBalanceResponse(balance=balance)
