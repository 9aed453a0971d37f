"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from meriter.domain.model import Vote
from meriter.domain.repository import VoteRepository
from meriter.domain.value import CommunityId, TargetType, UserId, VoteId, VoteSource
from meriter.persistence.mappers import row_to_vote, vote_to_dict
from meriter.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_target(
        self, target_type: TargetType, target_id: UUID
    ) -> List[Vote]:
        """Find all votes cast on a target, oldest first."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.target_type == target_type.value,
                    votes_table.c.target_id == target_id,
                )
            )
            .order_by(votes_table.c.created_at, votes_table.c.source_type)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def sum_quota_used(
        self, user_id: UserId, community_id: CommunityId, since: datetime
    ) -> int:
        """Sum quota spent by a user in a community since a point in time."""
        stmt = select(func.coalesce(func.sum(votes_table.c.amount_quota), 0)).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.community_id == community_id,
                votes_table.c.source_type == VoteSource.QUOTA.value,
                votes_table.c.created_at >= since,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def save(self, vote: Vote) -> Vote:
        """Save a new vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote
