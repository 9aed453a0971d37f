"""Integration tests for PostgresUnitOfWork."""

import pytest
import pytest_asyncio

from meriter.domain.repository import UnitOfWork, WalletRepository
from meriter.domain.service import WalletService
from meriter.domain.value import ReferenceType
from tests.conftest import add_member, seed_community
from tests.harness import create_env_fixture, create_schema, requires_postgres

pytestmark = requires_postgres

# Integration test fixture - real PostgreSQL, recorded events
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def ledger_schema(integration_env):
    await create_schema(integration_env)


class TestPostgresUnitOfWork:
    @pytest.mark.asyncio
    async def test_error_rolls_back_nested_writes(self, integration_env):
        # Arrange
        unit_of_work = await integration_env.get(UnitOfWork)
        wallet_service = await integration_env.get(WalletService)
        wallet_repo = await integration_env.get(WalletRepository)
        async with unit_of_work.transaction():
            community = await seed_community(integration_env)
            user_id = await add_member(integration_env, community)

        # Act
        with pytest.raises(RuntimeError, match="after credit"):
            async with unit_of_work.transaction():
                await wallet_service.credit(
                    user_id, community.id, 15, ReferenceType.WELCOME_MERITS
                )
                raise RuntimeError("after credit")

        # Assert
        assert await wallet_repo.find_by_user_and_community(user_id, community.id) is None
        assert await wallet_service.list_transactions(user_id, community.id) == []

    @pytest.mark.asyncio
    async def test_outermost_transaction_commits(self, integration_env):
        # Arrange
        unit_of_work = await integration_env.get(UnitOfWork)
        wallet_service = await integration_env.get(WalletService)
        async with unit_of_work.transaction():
            community = await seed_community(integration_env)
            user_id = await add_member(integration_env, community)

        # Act
        async with unit_of_work.transaction():
            await wallet_service.credit(
                user_id, community.id, 15, ReferenceType.WELCOME_MERITS
            )
        with pytest.raises(RuntimeError):
            async with unit_of_work.transaction():
                raise RuntimeError("later failure")

        # Assert
        assert await wallet_service.get_balance(user_id, community.id) == 15

    @pytest.mark.asyncio
    async def test_lock_outside_transaction_is_rejected(self, integration_env):
        # Arrange
        unit_of_work = await integration_env.get(UnitOfWork)
        community = await seed_community(integration_env)
        user_id = await add_member(integration_env, community)

        # Act & Assert
        with pytest.raises(RuntimeError, match="inside a transaction"):
            await unit_of_work.lock_account(user_id, community.id)
