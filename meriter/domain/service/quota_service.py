"""Quota ledger.

Quota is never stored as a counter. Usage is the sum of quota-sourced
votes since the community's reset marker, so resetting only moves the
marker and history stays intact.
"""

from datetime import datetime, time

import logfire

from meriter.domain.model.common import utc_now
from meriter.domain.model.community import Community
from meriter.domain.repository import CommunityRepository, UnitOfWork, VoteRepository
from meriter.domain.value import CommunityId, CommunityTypeTag, UserId
from meriter.domain.value.common import ValueObject

from .base import Service
from .community_service import CommunityService


class QuotaStatus(ValueObject):
    """A user's quota in a community for the current window."""

    daily_quota: int
    used: int
    remaining: int


def daily_quota_for(community: Community) -> int:
    """Daily quota granted by a community.

    Future Vision grants none by policy, as does any community with quota
    disabled.
    """
    if community.type_tag == CommunityTypeTag.FUTURE_VISION:
        return 0
    if not community.merit_rules.quota_enabled:
        return 0
    return community.settings.daily_emission


def window_start(community: Community, now: datetime) -> datetime:
    """Start of the current quota window.

    The reset marker if one exists, otherwise midnight UTC of today.
    """
    if community.last_quota_reset_at is not None:
        return community.last_quota_reset_at
    return datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)


class QuotaService(Service):
    """Domain service for the daily quota ledger."""

    def __init__(
        self,
        community_service: CommunityService,
        community_repository: CommunityRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize quota service.

        Args:
            community_service: Community lookups
            community_repository: Community repository (reset marker writes)
            vote_repository: Vote repository (usage sums)
            unit_of_work: Transaction boundary
        """
        self.community_service = community_service
        self.community_repository = community_repository
        self.vote_repository = vote_repository
        self.unit_of_work = unit_of_work

    async def get_remaining(
        self, user_id: UserId, community_id: CommunityId
    ) -> QuotaStatus:
        """Compute a user's quota for the current window.

        Args:
            user_id: The user
            community_id: The community

        Returns:
            Daily quota, amount used in the window and amount remaining

        Raises:
            NotFoundError: If the community does not exist
        """
        with logfire.span(
            "quota_service.get_remaining",
            user_id=str(user_id),
            community_id=str(community_id),
        ):
            community = await self.community_service.get_community(community_id)
            daily_quota = daily_quota_for(community)
            since = window_start(community, utc_now())
            used = await self.vote_repository.sum_quota_used(user_id, community_id, since)
            return QuotaStatus(
                daily_quota=daily_quota,
                used=used,
                remaining=max(0, daily_quota - used),
            )

    async def reset(self, community_id: CommunityId) -> datetime:
        """Start a new quota window for a community.

        Moves the reset marker to now. No vote or transaction is deleted.

        Args:
            community_id: The community

        Returns:
            The new window start

        Raises:
            NotFoundError: If the community does not exist
        """
        with logfire.span("quota_service.reset", community_id=str(community_id)):
            async with self.unit_of_work.transaction():
                community = await self.community_service.get_community(community_id)
                reset_at = utc_now()
                await self.community_repository.save(
                    community.model_copy(update={"last_quota_reset_at": reset_at})
                )
            logfire.info(
                "Quota window reset",
                community_id=str(community_id),
                reset_at=reset_at.isoformat(),
            )
            return reset_at

    async def reset_all(self) -> int:
        """Reset the quota window of every community.

        Returns:
            Number of communities reset
        """
        with logfire.span("quota_service.reset_all"):
            communities = await self.community_service.list_communities()
            for community in communities:
                await self.reset(community.id)
            logfire.info("All quota windows reset", count=len(communities))
            return len(communities)
