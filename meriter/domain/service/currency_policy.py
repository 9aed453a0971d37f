"""Currency mode evaluation.

Pure decision function: given everything known about a vote, decide which
of quota and wallet may be spent. No I/O and no state; callers gather the
context (roles, team overlap) beforehand.

Archetype behaviour lives in ARCHETYPE_POLICIES. For an ordinary
community the community rules then narrow both currencies. A special
archetype only goes through the membership, self-vote and lead rules.
The first reason recorded for a currency is the one reported.
"""

from typing import Optional
from uuid import UUID

from meriter.domain.model.community import Community
from meriter.domain.value import (
    CommunityId,
    CommunityRole,
    CommunityTypeTag,
    PostType,
    ProjectVoting,
    SocialCurrency,
    TargetType,
    UserId,
    VoteDirection,
    VoteSource,
)
from meriter.domain.value.common import ValueObject


class ArchetypePolicy(ValueObject):
    """Currencies an archetype permits before community rules apply."""

    quota: bool = True
    wallet: bool = True
    reason: Optional[str] = None


ARCHETYPE_POLICIES: dict[CommunityTypeTag, ArchetypePolicy] = {
    CommunityTypeTag.MARATHON_OF_GOOD: ArchetypePolicy(
        wallet=False,
        reason="Marathon of Good only allows quota voting on posts and comments",
    ),
    CommunityTypeTag.FUTURE_VISION: ArchetypePolicy(
        quota=False,
        reason="Future Vision only allows wallet voting on posts and comments",
    ),
}
DEFAULT_ARCHETYPE_POLICY = ArchetypePolicy()


class VoteContext(ValueObject):
    """Everything the evaluator needs to know about a vote."""

    voter_id: UserId
    beneficiary_id: UserId
    community: Community
    target_type: TargetType
    target_id: Optional[UUID] = None
    post_type: Optional[PostType] = None
    is_project: bool = False
    direction: VoteDirection = VoteDirection.UP
    voter_role: Optional[CommunityRole] = None
    beneficiary_role: Optional[CommunityRole] = None
    shared_team_community_ids: list[CommunityId] = []

    @property
    def is_self_vote(self) -> bool:
        return self.voter_id == self.beneficiary_id


class CurrencyModeResult(ValueObject):
    """Verdict of the evaluator."""

    allowed_quota: bool
    allowed_wallet: bool
    required_currency: Optional[VoteSource] = None
    reason: Optional[str] = None
    quota_reason: Optional[str] = None
    wallet_reason: Optional[str] = None

    @property
    def rejected(self) -> bool:
        """Whether no currency at all may be spent."""
        return not self.allowed_quota and not self.allowed_wallet


class _Verdict:
    """Accumulates restrictions, keeping the first reason per currency."""

    def __init__(self) -> None:
        self.quota_reason: Optional[str] = None
        self.wallet_reason: Optional[str] = None
        self.first_reason: Optional[str] = None

    def forbid_quota(self, reason: str) -> None:
        self.quota_reason = self.quota_reason or reason
        self.first_reason = self.first_reason or reason

    def forbid_wallet(self, reason: str) -> None:
        self.wallet_reason = self.wallet_reason or reason
        self.first_reason = self.first_reason or reason

    def forbid_both(self, reason: str) -> None:
        self.forbid_quota(reason)
        self.forbid_wallet(reason)

    def restrict(self, currency: SocialCurrency, subject: str) -> None:
        if currency == SocialCurrency.QUOTA_ONLY:
            self.forbid_wallet(f"{subject} can only use quota")
        elif currency == SocialCurrency.WALLET_ONLY:
            self.forbid_quota(f"{subject} can only use wallet merits")
        elif currency == SocialCurrency.FORBIDDEN:
            self.forbid_both(f"{subject} are not allowed in this community")

    def result(self) -> CurrencyModeResult:
        allowed_quota = self.quota_reason is None
        allowed_wallet = self.wallet_reason is None

        required: Optional[VoteSource] = None
        reason: Optional[str] = None
        if allowed_quota and not allowed_wallet:
            required, reason = VoteSource.QUOTA, self.wallet_reason
        elif allowed_wallet and not allowed_quota:
            required, reason = VoteSource.WALLET, self.quota_reason
        elif not allowed_quota and not allowed_wallet:
            reason = self.first_reason

        return CurrencyModeResult(
            allowed_quota=allowed_quota,
            allowed_wallet=allowed_wallet,
            required_currency=required,
            reason=reason,
            quota_reason=self.quota_reason,
            wallet_reason=self.wallet_reason,
        )


def evaluate(context: VoteContext) -> CurrencyModeResult:
    """Decide which currencies a vote may spend.

    Args:
        context: Vote context

    Returns:
        Permitted currencies, the mandatory one if only one remains, and
        the human-readable reason for every restriction
    """
    verdict = _Verdict()
    community = context.community
    voting_rules = community.voting_rules
    merit_rules = community.merit_rules
    role = context.voter_role

    special = community.type_tag in ARCHETYPE_POLICIES
    archetype = ARCHETYPE_POLICIES.get(community.type_tag, DEFAULT_ARCHETYPE_POLICY)
    if not archetype.quota:
        verdict.forbid_quota(archetype.reason or "Quota voting is not allowed")
    if not archetype.wallet:
        verdict.forbid_wallet(archetype.reason or "Wallet voting is not allowed")

    if role is None:
        verdict.forbid_both("Only community members can vote")
    elif role not in voting_rules.allowed_roles:
        verdict.forbid_both(f"Members with role {role.value} cannot vote in this community")

    if context.is_self_vote:
        if not voting_rules.can_vote_for_own_posts:
            verdict.forbid_both("You cannot vote for your own content")
        else:
            verdict.restrict(voting_rules.self_vote_currency, "Votes for yourself")
    elif context.shared_team_community_ids:
        verdict.restrict(voting_rules.teammate_vote_currency, "Votes for teammates")

    if (
        voting_rules.participants_cannot_vote_for_lead
        and role == CommunityRole.PARTICIPANT
        and context.beneficiary_role == CommunityRole.LEAD
    ):
        verdict.forbid_both("Participants cannot vote for leads in this community")

    # The archetype fixes the currency; project, direction and role
    # narrowing do not apply on top of it.
    if special:
        return verdict.result()

    if context.is_project:
        if voting_rules.project_voting == ProjectVoting.DISABLED:
            verdict.forbid_both("Voting on projects is disabled in this community")
        elif voting_rules.project_voting == ProjectVoting.WALLET_ONLY:
            verdict.forbid_quota("Projects can only receive wallet votes")

    if context.direction == VoteDirection.DOWN:
        verdict.forbid_quota("Downvotes can only be made with wallet merits")

    if role == CommunityRole.VIEWER:
        verdict.forbid_wallet("Viewers can only vote with quota")

    if not merit_rules.quota_enabled:
        verdict.forbid_quota("Quota voting is disabled in this community")
    elif role is not None and role not in merit_rules.quota_recipients:
        verdict.forbid_quota("Your role does not receive a daily quota in this community")

    if not voting_rules.spends_merits:
        verdict.forbid_wallet("Wallet voting is disabled in this community")

    return verdict.result()
