"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from meriter.domain.model.vote import Vote
from meriter.domain.repository.vote import VoteRepository
from meriter.domain.value import CommunityId, TargetType, UserId, VoteId, VoteSource

from .base import InMemoryRepository


class InMemoryVoteRepository(InMemoryRepository, VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_by_target(self, target_type: TargetType, target_id: UUID) -> list[Vote]:
        """Find all votes on a target in insertion order."""
        return [
            v
            for v in self._votes
            if v.target_type == target_type and v.target_id == target_id
        ]

    async def sum_quota_used(
        self, user_id: UserId, community_id: CommunityId, since: datetime
    ) -> int:
        """Sum quota spent by a user in a community since a point in time."""
        return sum(
            v.amount_quota
            for v in self._votes
            if v.user_id == user_id
            and v.community_id == community_id
            and v.source_type == VoteSource.QUOTA
            and v.created_at >= since
        )

    async def save(self, vote: Vote) -> Vote:
        """Save a vote."""
        self._votes.append(vote)
        return vote
