"""Community and membership repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from meriter.domain.model.community import Community
from meriter.domain.model.membership import Membership
from meriter.domain.value import CommunityId, CommunityTypeTag, UserId


class CommunityRepository(ABC):
    """Repository for Community entity."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID.

        Args:
            community_id: The community's unique identifier

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_type_tag(self, type_tag: CommunityTypeTag) -> List[Community]:
        """Find communities of an archetype, oldest first.

        Args:
            type_tag: Community archetype

        Returns:
            List of matching communities
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Community]:
        """List every community.

        Returns:
            List of all communities
        """
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Create or update a community.

        Args:
            community: The community to persist

        Returns:
            The persisted community
        """
        pass


class MembershipRepository(ABC):
    """Repository for Membership entity."""

    @abstractmethod
    async def find(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Membership]:
        """Find a user's membership in a community.

        Args:
            user_id: The member
            community_id: The community

        Returns:
            The membership if the user belongs to the community
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Membership]:
        """List all memberships of a user.

        Args:
            user_id: The member

        Returns:
            List of memberships
        """
        pass

    @abstractmethod
    async def save(self, membership: Membership) -> Membership:
        """Create or update a membership.

        Args:
            membership: The membership to persist

        Returns:
            The persisted membership
        """
        pass
