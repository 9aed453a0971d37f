"""Target score use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import Score, ScoreService
from meriter.domain.value import ReplySort, TargetType, VoteDirection


class ScoreItem(BaseModel):
    """Aggregated vote amounts."""

    upvotes: int
    downvotes: int
    score: int
    vote_count: int

    @classmethod
    def from_score(cls, score: Score) -> "ScoreItem":
        return cls(
            upvotes=score.upvotes,
            downvotes=score.downvotes,
            score=score.score,
            vote_count=score.vote_count,
        )


class GetTargetScoreRequest(BaseModel):
    """Get target score request."""

    target_type: TargetType
    target_id: str


class GetTargetScoreUseCase(BaseUseCase):
    """Use case for reading the display score of a target."""

    def __init__(self, score_service: ScoreService) -> None:
        """Initialize get target score use case.

        Args:
            score_service: Score domain service
        """
        self.score_service = score_service

    async def execute(self, request: GetTargetScoreRequest) -> ScoreItem:
        score = await self.score_service.get_score(
            request.target_type, UUID(request.target_id)
        )
        return ScoreItem.from_score(score)


class ListRepliesRequest(BaseModel):
    """List replies request."""

    target_type: TargetType = TargetType.VOTE
    target_id: str
    sort: ReplySort = ReplySort.CREATED_AT
    descending: bool = True


class ReplyItem(BaseModel):
    """A vote cast on the target, with its own tree score."""

    vote_id: str
    user_id: str
    amount_quota: int
    amount_wallet: int
    direction: VoteDirection
    comment: Optional[str]
    created_at: datetime
    score: ScoreItem


class ListRepliesResponse(BaseModel):
    """List replies response."""

    replies: list[ReplyItem]


class ListRepliesUseCase(BaseUseCase):
    """Use case for listing the votes cast on a target (vote replies)."""

    def __init__(self, score_service: ScoreService) -> None:
        """Initialize list replies use case.

        Args:
            score_service: Score domain service
        """
        self.score_service = score_service

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        replies = await self.score_service.list_replies(
            request.target_type,
            UUID(request.target_id),
            sort=request.sort,
            descending=request.descending,
        )
        return ListRepliesResponse(
            replies=[
                ReplyItem(
                    vote_id=str(r.vote.id),
                    user_id=str(r.vote.user_id),
                    amount_quota=r.vote.amount_quota,
                    amount_wallet=r.vote.amount_wallet,
                    direction=r.vote.direction,
                    comment=r.vote.comment,
                    created_at=r.vote.created_at,
                    score=ScoreItem.from_score(r.score),
                )
                for r in replies
            ]
        )
