"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from meriter.domain.model.vote import Vote
from meriter.domain.value import CommunityId, TargetType, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are append-only: there is no update or delete.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(
        self, target_type: TargetType, target_id: UUID
    ) -> List[Vote]:
        """Find all votes cast on a target, oldest first.

        Args:
            target_type: Type of the target
            target_id: ID of the target

        Returns:
            List of votes on the target
        """
        pass

    @abstractmethod
    async def sum_quota_used(
        self, user_id: UserId, community_id: CommunityId, since: datetime
    ) -> int:
        """Sum quota spent by a user in a community since a point in time.

        Args:
            user_id: The voter
            community_id: The community
            since: Inclusive window start

        Returns:
            Total amount_quota of quota-sourced votes in the window
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote
        """
        pass
