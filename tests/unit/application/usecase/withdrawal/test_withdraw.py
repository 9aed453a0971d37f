"""Unit tests for WithdrawUseCase."""

import pytest
from pydantic import ValidationError as RequestValidationError

from meriter.application.usecase.withdrawal import WithdrawUseCase
from meriter.application.usecase.withdrawal.withdraw import WithdrawRequest
from meriter.domain.service import VoteService
from meriter.domain.value import CommunityTypeTag, TargetType
from tests.conftest import add_member, seed_community, seed_publication
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestWithdrawUseCase:
    """Tests for WithdrawUseCase."""

    @pytest.mark.asyncio
    async def test_marathon_withdrawal_response(self, unit_env):
        # Arrange
        use_case = await unit_env.get(WithdrawUseCase)
        vote_service = await unit_env.get(VoteService)
        marathon = await seed_community(unit_env, CommunityTypeTag.MARATHON_OF_GOOD)
        vision = await seed_community(unit_env, CommunityTypeTag.FUTURE_VISION)
        author_id = await add_member(unit_env, marathon)
        voter_id = await add_member(unit_env, marathon)
        publication = await seed_publication(unit_env, marathon, author_id)
        await vote_service.create_vote(
            voter_id,
            TargetType.PUBLICATION,
            publication.id,
            amount_quota=5,
            comment="Inspiring",
        )

        # Act
        response = await use_case.execute(
            WithdrawRequest(requester_id=str(author_id), target_id=str(publication.id))
        )

        # Assert
        assert response.amount == 5
        assert response.credited_community_id == str(vision.id)
        assert response.transaction_id is not None
        assert response.remaining == 0

    def test_request_rejects_non_positive_amount(self):
        with pytest.raises(RequestValidationError):
            WithdrawRequest(requester_id="x", target_id="y", amount=0)
