"""Unit tests for QuotaService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from meriter.domain.error import NotFoundError
from meriter.domain.model.common import utc_now
from meriter.domain.model.vote import Vote
from meriter.domain.repository import CommunityRepository, VoteRepository
from meriter.domain.service import QuotaService, VoteService
from meriter.domain.value import (
    CommunityId,
    CommunityTypeTag,
    TargetType,
    VoteId,
    VoteSource,
)
from tests.conftest import add_member, seed_community, seed_publication
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetRemaining:
    """Tests for get_remaining method."""

    @pytest.mark.asyncio
    async def test_quota_vote_reduces_remaining(self, unit_env):
        """Spending 3 of a daily emission of 10 leaves 7."""
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        vote_service = await unit_env.get(VoteService)

        community = await seed_community(unit_env, daily_emission=10)
        voter_id = await add_member(unit_env, community)
        author_id = await add_member(unit_env, community)
        publication = await seed_publication(unit_env, community, author_id)

        # Act
        await vote_service.create_vote(
            voter_id,
            TargetType.PUBLICATION,
            publication.id,
            amount_quota=3,
            comment="Great work",
        )
        status = await quota_service.get_remaining(voter_id, community.id)

        # Assert
        assert status.daily_quota == 10
        assert status.used == 3
        assert status.remaining == 7

    @pytest.mark.asyncio
    async def test_fresh_member_has_full_quota(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        community = await seed_community(unit_env, daily_emission=25)
        user_id = await add_member(unit_env, community)

        # Act
        status = await quota_service.get_remaining(user_id, community.id)

        # Assert
        assert status.remaining == 25
        assert status.used == 0

    @pytest.mark.asyncio
    async def test_future_vision_grants_no_quota(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        community = await seed_community(
            unit_env, CommunityTypeTag.FUTURE_VISION, daily_emission=10
        )
        user_id = await add_member(unit_env, community)

        # Act
        status = await quota_service.get_remaining(user_id, community.id)

        # Assert
        assert status.daily_quota == 0
        assert status.remaining == 0

    @pytest.mark.asyncio
    async def test_votes_before_window_are_ignored(self, unit_env):
        """Only quota spent since the reset marker counts."""
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        vote_repo = await unit_env.get(VoteRepository)
        community = await seed_community(
            unit_env, last_quota_reset_at=utc_now() - timedelta(hours=1)
        )
        user_id = await add_member(unit_env, community)

        for created_at, amount in [
            (utc_now() - timedelta(hours=3), 6),
            (utc_now() - timedelta(minutes=5), 2),
        ]:
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    target_type=TargetType.PUBLICATION,
                    target_id=uuid4(),
                    user_id=user_id,
                    community_id=community.id,
                    source_type=VoteSource.QUOTA,
                    amount_quota=amount,
                    created_at=created_at,
                )
            )

        # Act
        status = await quota_service.get_remaining(user_id, community.id)

        # Assert
        assert status.used == 2
        assert status.remaining == 8

    @pytest.mark.asyncio
    async def test_unknown_community_raises_not_found(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Community not found"):
            await quota_service.get_remaining(uuid4(), CommunityId(uuid4()))


class TestReset:
    """Tests for reset and reset_all methods."""

    @pytest.mark.asyncio
    async def test_reset_restores_full_quota_without_deleting_votes(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        community = await seed_community(unit_env, daily_emission=10)
        voter_id = await add_member(unit_env, community)
        author_id = await add_member(unit_env, community)
        publication = await seed_publication(unit_env, community, author_id)
        await vote_service.create_vote(
            voter_id,
            TargetType.PUBLICATION,
            publication.id,
            amount_quota=4,
            comment="Nice",
        )

        # Act
        await quota_service.reset(community.id)
        status = await quota_service.get_remaining(voter_id, community.id)

        # Assert
        assert status.remaining == 10
        assert len(await vote_repo.find_by_target(TargetType.PUBLICATION, publication.id)) == 1

    @pytest.mark.asyncio
    async def test_reset_is_idempotent(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)

        # Act
        await quota_service.reset(community.id)
        await quota_service.reset(community.id)
        status = await quota_service.get_remaining(user_id, community.id)

        # Assert
        assert status.remaining == status.daily_quota == 10

    @pytest.mark.asyncio
    async def test_reset_moves_marker(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        community_repo = await unit_env.get(CommunityRepository)
        community = await seed_community(unit_env)

        # Act
        reset_at = await quota_service.reset(community.id)

        # Assert
        stored = await community_repo.find_by_id(community.id)
        assert stored.last_quota_reset_at == reset_at

    @pytest.mark.asyncio
    async def test_reset_all_counts_communities(self, unit_env):
        # Arrange
        quota_service = await unit_env.get(QuotaService)
        await seed_community(unit_env, name="One")
        await seed_community(unit_env, name="Two")

        # Act
        count = await quota_service.reset_all()

        # Assert
        assert count == 2
