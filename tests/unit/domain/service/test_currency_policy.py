"""Unit tests for the currency mode evaluator."""

from uuid import uuid4

from meriter.domain.model.community import Community, MeritRules, VotingRules
from meriter.domain.service import VoteContext, evaluate
from meriter.domain.value import (
    CommunityId,
    CommunityRole,
    CommunityTypeTag,
    ProjectVoting,
    SocialCurrency,
    TargetType,
    UserId,
    VoteDirection,
    VoteSource,
)


def make_context(
    community: Community,
    voter_role: CommunityRole | None = CommunityRole.PARTICIPANT,
    self_vote: bool = False,
    **overrides,
) -> VoteContext:
    voter_id = UserId(uuid4())
    fields = {
        "voter_id": voter_id,
        "beneficiary_id": voter_id if self_vote else UserId(uuid4()),
        "community": community,
        "target_type": TargetType.PUBLICATION,
        "target_id": uuid4(),
        "voter_role": voter_role,
        "beneficiary_role": CommunityRole.PARTICIPANT,
    }
    fields.update(overrides)
    return VoteContext(**fields)


class TestArchetypes:
    """Special communities restrict currencies before any rule applies."""

    def test_custom_community_allows_both(self):
        result = evaluate(make_context(Community.create("Makers")))

        assert result.allowed_quota
        assert result.allowed_wallet
        assert result.required_currency is None
        assert result.reason is None

    def test_marathon_of_good_requires_quota(self):
        community = Community.create("MoG", CommunityTypeTag.MARATHON_OF_GOOD)

        result = evaluate(make_context(community))

        assert result.allowed_quota
        assert not result.allowed_wallet
        assert result.required_currency == VoteSource.QUOTA
        assert result.reason == "Marathon of Good only allows quota voting on posts and comments"

    def test_future_vision_requires_wallet(self):
        community = Community.create("FV", CommunityTypeTag.FUTURE_VISION)

        result = evaluate(make_context(community))

        assert not result.allowed_quota
        assert result.allowed_wallet
        assert result.required_currency == VoteSource.WALLET
        assert result.reason == "Future Vision only allows wallet voting on posts and comments"

    def test_future_vision_allows_self_votes_with_wallet(self):
        community = Community.create("FV", CommunityTypeTag.FUTURE_VISION)

        result = evaluate(make_context(community, self_vote=True))

        assert result.allowed_wallet
        assert not result.allowed_quota


class TestMembership:
    def test_non_member_is_rejected(self):
        result = evaluate(make_context(Community.create("Makers"), voter_role=None))

        assert result.rejected
        assert result.reason == "Only community members can vote"

    def test_role_outside_allowed_roles_is_rejected(self):
        community = Community.create("Team", CommunityTypeTag.TEAM)

        result = evaluate(make_context(community, voter_role=CommunityRole.VIEWER))

        assert result.rejected
        assert "viewer" in result.reason


class TestSelfAndTeammateVotes:
    def test_self_vote_forbidden_by_default(self):
        result = evaluate(make_context(Community.create("Makers"), self_vote=True))

        assert result.rejected
        assert result.reason == "You cannot vote for your own content"

    def test_self_vote_currency_restricts_when_allowed(self):
        community = Community.create("Makers").model_copy(
            update={
                "voting_rules": VotingRules(
                    can_vote_for_own_posts=True,
                    self_vote_currency=SocialCurrency.QUOTA_ONLY,
                )
            }
        )

        result = evaluate(make_context(community, self_vote=True))

        assert result.required_currency == VoteSource.QUOTA
        assert result.wallet_reason == "Votes for yourself can only use quota"

    def test_teammate_currency_applies_with_shared_team(self):
        community = Community.create("Makers").model_copy(
            update={
                "voting_rules": VotingRules(teammate_vote_currency=SocialCurrency.FORBIDDEN)
            }
        )

        result = evaluate(
            make_context(community, shared_team_community_ids=[CommunityId(uuid4())])
        )

        assert result.rejected
        assert result.reason == "Votes for teammates are not allowed in this community"

    def test_participant_cannot_vote_for_lead_when_configured(self):
        community = Community.create("Makers").model_copy(
            update={"voting_rules": VotingRules(participants_cannot_vote_for_lead=True)}
        )

        result = evaluate(make_context(community, beneficiary_role=CommunityRole.LEAD))

        assert result.rejected
        assert result.reason == "Participants cannot vote for leads in this community"


class TestProjectsAndDirection:
    def test_projects_accept_wallet_only_by_default(self):
        result = evaluate(make_context(Community.create("Makers"), is_project=True))

        assert result.required_currency == VoteSource.WALLET
        assert result.quota_reason == "Projects can only receive wallet votes"

    def test_project_voting_disabled(self):
        community = Community.create("Makers").model_copy(
            update={"voting_rules": VotingRules(project_voting=ProjectVoting.DISABLED)}
        )

        result = evaluate(make_context(community, is_project=True))

        assert result.rejected

    def test_downvote_forbids_quota(self):
        result = evaluate(
            make_context(Community.create("Makers"), direction=VoteDirection.DOWN)
        )

        assert not result.allowed_quota
        assert result.allowed_wallet
        assert result.reason == "Downvotes can only be made with wallet merits"


class TestSpecialCommunitiesIgnoreNarrowing:
    """Project, direction and viewer rules do not apply on top of an archetype."""

    def test_downvote_in_marathon_of_good_uses_quota(self):
        community = Community.create("MoG", CommunityTypeTag.MARATHON_OF_GOOD)

        result = evaluate(make_context(community, direction=VoteDirection.DOWN))

        assert result.allowed_quota
        assert not result.allowed_wallet
        assert result.required_currency == VoteSource.QUOTA
        assert result.quota_reason is None

    def test_project_in_marathon_of_good_uses_quota(self):
        community = Community.create("MoG", CommunityTypeTag.MARATHON_OF_GOOD)

        result = evaluate(make_context(community, is_project=True))

        assert result.required_currency == VoteSource.QUOTA
        assert result.reason == "Marathon of Good only allows quota voting on posts and comments"

    def test_viewer_in_future_vision_uses_wallet(self):
        community = Community.create("FV", CommunityTypeTag.FUTURE_VISION)

        result = evaluate(make_context(community, voter_role=CommunityRole.VIEWER))

        assert result.allowed_wallet
        assert result.required_currency == VoteSource.WALLET
        assert result.wallet_reason is None

    def test_membership_still_applies_in_marathon_of_good(self):
        community = Community.create("MoG", CommunityTypeTag.MARATHON_OF_GOOD)

        result = evaluate(make_context(community, voter_role=None))

        assert result.rejected
        assert result.quota_reason == "Only community members can vote"

    def test_self_vote_still_forbidden_in_marathon_of_good(self):
        community = Community.create("MoG", CommunityTypeTag.MARATHON_OF_GOOD)

        result = evaluate(make_context(community, self_vote=True))

        assert result.rejected
        assert result.quota_reason == "You cannot vote for your own content"


class TestRoleAndMeritRules:
    def test_viewer_votes_with_quota_only(self):
        result = evaluate(
            make_context(Community.create("Makers"), voter_role=CommunityRole.VIEWER)
        )

        assert result.required_currency == VoteSource.QUOTA
        assert result.reason == "Viewers can only vote with quota"

    def test_role_without_quota_must_use_wallet(self):
        community = Community.create("Makers").model_copy(
            update={"merit_rules": MeritRules(quota_recipients=[CommunityRole.LEAD])}
        )

        result = evaluate(make_context(community))

        assert result.required_currency == VoteSource.WALLET

    def test_wallet_disabled_when_community_does_not_spend_merits(self):
        community = Community.create("Makers").model_copy(
            update={"voting_rules": VotingRules(spends_merits=False)}
        )

        result = evaluate(make_context(community))

        assert result.required_currency == VoteSource.QUOTA
        assert result.wallet_reason == "Wallet voting is disabled in this community"
