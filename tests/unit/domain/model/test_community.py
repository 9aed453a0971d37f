"""Unit tests for community archetype defaults."""

from meriter.domain.model.community import Community
from meriter.domain.value import CommunityRole, CommunityTypeTag


class TestCommunityCreate:
    def test_future_vision_defaults(self):
        community = Community.create("Vision", CommunityTypeTag.FUTURE_VISION)

        assert community.is_special
        assert community.voting_rules.can_vote_for_own_posts
        assert not community.voting_rules.awards_merits
        assert not community.merit_rules.quota_enabled

    def test_team_excludes_viewers(self):
        community = Community.create("Crew", CommunityTypeTag.TEAM)

        assert CommunityRole.VIEWER not in community.voting_rules.allowed_roles
        assert CommunityRole.VIEWER not in community.merit_rules.quota_recipients
        assert not community.is_special

    def test_custom_defaults(self):
        community = Community.create("Makers", daily_emission=25)

        assert community.settings.daily_emission == 25
        assert community.settings.currency_names.plural == "merits"
        assert not community.voting_rules.can_vote_for_own_posts
        assert community.last_quota_reset_at is None
