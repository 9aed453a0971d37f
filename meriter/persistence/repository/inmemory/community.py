"""In-memory community and membership repositories for testing."""

from typing import Optional

from meriter.domain.model.community import Community
from meriter.domain.model.membership import Membership
from meriter.domain.repository.community import (
    CommunityRepository,
    MembershipRepository,
)
from meriter.domain.value import CommunityId, CommunityTypeTag, UserId

from .base import InMemoryRepository


class InMemoryCommunityRepository(InMemoryRepository, CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._communities: dict[CommunityId, Community] = {}

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        return self._communities.get(community_id)

    async def find_by_type_tag(self, type_tag: CommunityTypeTag) -> list[Community]:
        """Find communities of an archetype in insertion order."""
        return [c for c in self._communities.values() if c.type_tag == type_tag]

    async def find_all(self) -> list[Community]:
        return list(self._communities.values())

    async def save(self, community: Community) -> Community:
        self._communities[community.id] = community
        return community


class InMemoryMembershipRepository(InMemoryRepository, MembershipRepository):
    """In-memory implementation of MembershipRepository for testing."""

    def __init__(self) -> None:
        self._memberships: dict[tuple[UserId, CommunityId], Membership] = {}

    async def find(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Membership]:
        return self._memberships.get((user_id, community_id))

    async def find_by_user(self, user_id: UserId) -> list[Membership]:
        return [m for m in self._memberships.values() if m.user_id == user_id]

    async def save(self, membership: Membership) -> Membership:
        self._memberships[(membership.user_id, membership.community_id)] = membership
        return membership
