"""Community domain service.

Read-only policy lookups used by the vote orchestrator and the
withdrawal engine: community rules, member roles and team overlap.
"""

from typing import List, Optional

import logfire

from meriter.domain.error import NotFoundError
from meriter.domain.model.community import Community
from meriter.domain.repository import CommunityRepository, MembershipRepository
from meriter.domain.value import CommunityId, CommunityRole, CommunityTypeTag, UserId

from .base import Service


class CommunityService(Service):
    """Domain service for community policy lookups."""

    def __init__(
        self,
        community_repository: CommunityRepository,
        membership_repository: MembershipRepository,
    ) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
            membership_repository: Membership repository
        """
        self.community_repository = community_repository
        self.membership_repository = membership_repository

    async def get_community(self, community_id: CommunityId) -> Community:
        """Get a community by ID.

        Raises:
            NotFoundError: If the community does not exist
        """
        community = await self.community_repository.find_by_id(community_id)
        if not community:
            logfire.info("Community not found", community_id=str(community_id))
            raise NotFoundError("Community", str(community_id))
        return community

    async def find_by_type_tag(self, type_tag: CommunityTypeTag) -> Optional[Community]:
        """Find the oldest community of an archetype.

        Special archetypes are singular on a platform; if several exist
        the first created one wins.
        """
        communities = await self.community_repository.find_by_type_tag(type_tag)
        if len(communities) > 1:
            logfire.warn(
                "Multiple communities share a singular archetype",
                type_tag=type_tag.value,
                count=len(communities),
            )
        return communities[0] if communities else None

    async def list_communities(self) -> List[Community]:
        return await self.community_repository.find_all()

    async def get_role(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[CommunityRole]:
        """Get a user's role in a community, None if not a member."""
        membership = await self.membership_repository.find(user_id, community_id)
        return membership.role if membership else None

    async def shared_team_community_ids(
        self, user_id: UserId, other_user_id: UserId
    ) -> List[CommunityId]:
        """Team communities both users belong to.

        Args:
            user_id: First user (usually the voter)
            other_user_id: Second user (usually the beneficiary)

        Returns:
            IDs of shared communities tagged as teams, empty for the same user
        """
        if user_id == other_user_id:
            return []

        mine = {m.community_id for m in await self.membership_repository.find_by_user(user_id)}
        theirs = {
            m.community_id
            for m in await self.membership_repository.find_by_user(other_user_id)
        }

        shared: List[CommunityId] = []
        for community_id in sorted(mine & theirs, key=str):
            community = await self.community_repository.find_by_id(community_id)
            if community and community.type_tag == CommunityTypeTag.TEAM:
                shared.append(community_id)
        return shared
