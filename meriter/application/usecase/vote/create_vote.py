"""Create vote use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import VoteService
from meriter.domain.value import CommunityId, TargetType, UserId, VoteDirection


class CreateVoteRequest(BaseModel):
    """Create vote request."""

    voter_id: str  # User ID supplied by the authenticated caller
    target_type: TargetType
    target_id: str  # UUID string
    amount_quota: int = 0
    amount_wallet: int = 0
    direction: VoteDirection = VoteDirection.UP
    comment: Optional[str] = Field(default=None, max_length=5000)
    community_id: Optional[str] = None


class CreateVoteResponse(BaseModel):
    """Create vote response."""

    vote_ids: list[str]
    target_type: TargetType
    target_id: str
    community_id: str
    amount_quota: int
    amount_wallet: int
    direction: VoteDirection
    created_at: datetime


class CreateVoteUseCase(BaseUseCase):
    """Use case for casting a vote on a publication, vote or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize create vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CreateVoteRequest) -> CreateVoteResponse:
        """Execute vote flow.

        Args:
            request: Create vote request

        Returns:
            Persisted vote records and the amounts spent

        Raises:
            ValidationError: If amounts or comment are invalid
            NotFoundError: If the target or community does not exist
            PolicyRejectedError: If community policy forbids the spend
            InsufficientQuotaError: If quota is insufficient
            InsufficientWalletBalanceError: If the wallet balance is insufficient
        """
        votes = await self.vote_service.create_vote(
            voter_id=UserId(UUID(request.voter_id)),
            target_type=request.target_type,
            target_id=UUID(request.target_id),
            amount_quota=request.amount_quota,
            amount_wallet=request.amount_wallet,
            direction=request.direction,
            comment=request.comment,
            community_id=(
                CommunityId(UUID(request.community_id)) if request.community_id else None
            ),
        )

        first = votes[0]
        return CreateVoteResponse(
            vote_ids=[str(v.id) for v in votes],
            target_type=first.target_type,
            target_id=str(first.target_id),
            community_id=str(first.community_id),
            amount_quota=sum(v.amount_quota for v in votes),
            amount_wallet=sum(v.amount_wallet for v in votes),
            direction=first.direction,
            created_at=first.created_at,
        )
