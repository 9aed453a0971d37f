"""PostgreSQL implementations of Community and Membership repositories."""

from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from meriter.domain.model import Community, Membership
from meriter.domain.repository import CommunityRepository, MembershipRepository
from meriter.domain.value import CommunityId, CommunityTypeTag, UserId
from meriter.persistence.mappers import (
    community_to_dict,
    membership_to_dict,
    row_to_community,
    row_to_membership,
)
from meriter.persistence.tables import communities_table, memberships_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community(row._asdict()) if row else None

    async def find_by_type_tag(self, type_tag: CommunityTypeTag) -> List[Community]:
        """Find communities of an archetype, oldest first."""
        stmt = (
            select(communities_table)
            .where(communities_table.c.type_tag == type_tag.value)
            .order_by(communities_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_community(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Community]:
        """List every community."""
        stmt = select(communities_table).order_by(communities_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_community(row._asdict()) for row in result.fetchall()]

    async def save(self, community: Community) -> Community:
        """Create or update a community."""
        values = community_to_dict(community)
        stmt = pg_insert(communities_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[communities_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return community


class PostgresMembershipRepository(MembershipRepository):
    """PostgreSQL implementation of MembershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Membership]:
        """Find a user's membership in a community."""
        stmt = select(memberships_table).where(
            and_(
                memberships_table.c.user_id == user_id,
                memberships_table.c.community_id == community_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_membership(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Membership]:
        """List all memberships of a user."""
        stmt = select(memberships_table).where(memberships_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_membership(row._asdict()) for row in result.fetchall()]

    async def save(self, membership: Membership) -> Membership:
        """Create or update a membership."""
        stmt = pg_insert(memberships_table).values(**membership_to_dict(membership))
        stmt = stmt.on_conflict_do_update(
            constraint="pk_memberships",
            set_={"role": stmt.excluded.role},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return membership
