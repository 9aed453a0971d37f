"""Community aggregate.

The ledger only reads communities, except for the quota reset marker.
Voting and merit rules are policy data consumed by the currency evaluator.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field

from meriter.domain.model.common import DomainModel, utc_now
from meriter.domain.value import (
    CommunityId,
    CommunityRole,
    CommunityTypeTag,
    CurrencyNames,
    ProjectVoting,
    SocialCurrency,
)

ALL_ROLES = [
    CommunityRole.SUPERADMIN,
    CommunityRole.LEAD,
    CommunityRole.PARTICIPANT,
    CommunityRole.VIEWER,
]
MEMBER_ROLES = [
    CommunityRole.SUPERADMIN,
    CommunityRole.LEAD,
    CommunityRole.PARTICIPANT,
]


class CommunitySettings(DomainModel):
    """Emission and display settings."""

    daily_emission: int = Field(default=10, ge=0)
    currency_names: CurrencyNames = Field(default_factory=CurrencyNames)


class VotingRules(DomainModel):
    """Who may vote and with which currency."""

    allowed_roles: list[CommunityRole] = Field(default_factory=lambda: list(ALL_ROLES))
    can_vote_for_own_posts: bool = False
    self_vote_currency: SocialCurrency = SocialCurrency.WALLET_ONLY
    teammate_vote_currency: SocialCurrency = SocialCurrency.ANY
    participants_cannot_vote_for_lead: bool = False
    project_voting: ProjectVoting = ProjectVoting.WALLET_ONLY
    spends_merits: bool = True
    awards_merits: bool = True


class MeritRules(DomainModel):
    """Daily quota distribution."""

    quota_enabled: bool = True
    quota_recipients: list[CommunityRole] = Field(
        default_factory=lambda: list(ALL_ROLES)
    )


def default_rules(type_tag: CommunityTypeTag) -> tuple[VotingRules, MeritRules]:
    """Default voting and merit rules for a community archetype."""
    if type_tag == CommunityTypeTag.FUTURE_VISION:
        return (
            VotingRules(can_vote_for_own_posts=True, awards_merits=False),
            MeritRules(quota_enabled=False),
        )
    if type_tag in (CommunityTypeTag.TEAM, CommunityTypeTag.SUPPORT):
        return (
            VotingRules(allowed_roles=list(MEMBER_ROLES)),
            MeritRules(quota_recipients=list(MEMBER_ROLES)),
        )
    return VotingRules(), MeritRules()


class Community(DomainModel):
    """Community aggregate root."""

    id: CommunityId
    name: str = Field(min_length=1, max_length=200)
    type_tag: CommunityTypeTag = CommunityTypeTag.CUSTOM
    settings: CommunitySettings = Field(default_factory=CommunitySettings)
    voting_rules: VotingRules = Field(default_factory=VotingRules)
    merit_rules: MeritRules = Field(default_factory=MeritRules)
    last_quota_reset_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        name: str,
        type_tag: CommunityTypeTag = CommunityTypeTag.CUSTOM,
        daily_emission: int = 10,
        community_id: Optional[CommunityId] = None,
    ) -> "Community":
        """Create a community with the archetype's default rules."""
        voting_rules, merit_rules = default_rules(type_tag)
        return cls(
            id=community_id or CommunityId(uuid4()),
            name=name,
            type_tag=type_tag,
            settings=CommunitySettings(daily_emission=daily_emission),
            voting_rules=voting_rules,
            merit_rules=merit_rules,
        )

    @property
    def is_special(self) -> bool:
        """Whether this is one of the currency-exclusive archetypes."""
        return self.type_tag in (
            CommunityTypeTag.MARATHON_OF_GOOD,
            CommunityTypeTag.FUTURE_VISION,
        )
