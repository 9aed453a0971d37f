"""Withdraw use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import WithdrawalService
from meriter.domain.value import TargetType, UserId


class WithdrawRequest(BaseModel):
    """Withdraw request."""

    requester_id: str  # User ID supplied by the authenticated caller
    target_type: TargetType = TargetType.PUBLICATION
    target_id: str  # UUID string
    amount: Optional[int] = Field(default=None, gt=0)  # None withdraws everything


class WithdrawResponse(BaseModel):
    """Withdraw response."""

    amount: int
    credited_community_id: Optional[str]
    transaction_id: Optional[str]
    remaining: int
    skipped: int = 0


class WithdrawUseCase(BaseUseCase):
    """Use case for withdrawing accrued merits from a target."""

    def __init__(self, withdrawal_service: WithdrawalService) -> None:
        """Initialize withdraw use case.

        Args:
            withdrawal_service: Withdrawal domain service
        """
        self.withdrawal_service = withdrawal_service

    async def execute(self, request: WithdrawRequest) -> WithdrawResponse:
        """Execute withdrawal flow.

        Args:
            request: Withdraw request

        Returns:
            Withdrawn amount and the credited community

        Raises:
            NotAuthorizedError: If the requester is not the beneficiary
            NothingToWithdrawError: If nothing is left to withdraw
            InsufficientWithdrawableError: If the amount exceeds what is left
        """
        result = await self.withdrawal_service.withdraw(
            target_type=request.target_type,
            target_id=UUID(request.target_id),
            requester_id=UserId(UUID(request.requester_id)),
            amount=request.amount,
        )

        return WithdrawResponse(
            amount=result.amount,
            credited_community_id=(
                str(result.credited_community_id) if result.credited_community_id else None
            ),
            transaction_id=str(result.transaction.id) if result.transaction else None,
            remaining=result.remaining,
            skipped=result.skipped,
        )
