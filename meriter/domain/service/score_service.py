"""Score aggregation.

Display scores are derived from vote records on demand. A vote target's
score includes the votes cast on it, and on those, recursively.
"""

from typing import List
from uuid import UUID

import logfire
from pydantic import computed_field

from meriter.domain.model.vote import Vote
from meriter.domain.repository import VoteRepository
from meriter.domain.value import ReplySort, TargetType, VoteDirection, VoteId
from meriter.domain.value.common import ValueObject

from .base import Service


class Score(ValueObject):
    """Aggregated vote amounts on a target."""

    upvotes: int = 0
    downvotes: int = 0
    vote_count: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes

    def merge(self, other: "Score") -> "Score":
        return Score(
            upvotes=self.upvotes + other.upvotes,
            downvotes=self.downvotes + other.downvotes,
            vote_count=self.vote_count + other.vote_count,
        )

    @classmethod
    def of(cls, votes: List[Vote]) -> "Score":
        """Score of a flat list of votes."""
        return cls(
            upvotes=sum(v.amount for v in votes if v.direction == VoteDirection.UP),
            downvotes=sum(v.amount for v in votes if v.direction == VoteDirection.DOWN),
            vote_count=len(votes),
        )


class Reply(ValueObject):
    """A vote on a target together with its own tree score."""

    vote: Vote
    score: Score


class ScoreService(Service):
    """Domain service for vote score aggregation."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize score service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def get_score(self, target_type: TargetType, target_id: UUID) -> Score:
        """Display score of a target.

        Publications and comments sum their direct votes. Votes also sum
        the votes cast on their replies, recursively.
        """
        with logfire.span(
            "score_service.get_score",
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            if target_type == TargetType.VOTE:
                return await self._nested_score(VoteId(target_id))
            votes = await self.vote_repository.find_by_target(target_type, target_id)
            return Score.of(votes)

    async def get_direct_net(self, target_type: TargetType, target_id: UUID) -> int:
        """Net value of the votes cast directly on a target."""
        votes = await self.vote_repository.find_by_target(target_type, target_id)
        return Score.of(votes).score

    async def list_replies(
        self,
        target_type: TargetType,
        target_id: UUID,
        sort: ReplySort = ReplySort.CREATED_AT,
        descending: bool = True,
    ) -> List[Reply]:
        """List votes cast on a target with their tree scores.

        Every reply's score is materialized, so this costs one lookup per
        vote in the subtree.
        """
        with logfire.span(
            "score_service.list_replies",
            target_type=target_type.value,
            target_id=str(target_id),
            sort=sort.value,
        ):
            votes = await self.vote_repository.find_by_target(target_type, target_id)
            replies = [
                Reply(vote=vote, score=await self.get_score(TargetType.VOTE, vote.id))
                for vote in votes
            ]
            if sort == ReplySort.SCORE:
                replies.sort(
                    key=lambda r: (r.score.score, r.vote.created_at), reverse=descending
                )
            else:
                replies.sort(key=lambda r: r.vote.created_at, reverse=descending)
            return replies

    async def _nested_score(self, vote_id: VoteId) -> Score:
        """Score of everything cast on a vote, recursively."""
        votes = await self.vote_repository.find_by_target(TargetType.VOTE, vote_id)
        score = Score.of(votes)
        for vote in votes:
            score = score.merge(await self._nested_score(vote.id))
        return score
