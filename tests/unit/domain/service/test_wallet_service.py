"""Unit tests for WalletService."""

import asyncio
from uuid import uuid4

import pytest

from meriter.domain.error import (
    InsufficientWalletBalanceError,
    NotFoundError,
    ValidationError,
)
from meriter.domain.repository import TransactionRepository, WalletRepository
from meriter.domain.service import WalletService
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionType,
    UserId,
)
from tests.conftest import add_member, fund_wallet, seed_community
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreditAndDebit:
    """Tests for credit and debit methods."""

    @pytest.mark.asyncio
    async def test_credit_creates_wallet_and_records_transaction(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)

        # Act
        transaction = await wallet_service.credit(
            user_id, community.id, 40, ReferenceType.WELCOME_MERITS
        )

        # Assert
        assert transaction.type == TransactionType.CREDIT
        assert transaction.amount == 40
        assert await wallet_service.get_balance(user_id, community.id) == 40
        wallet = await wallet_service.get_wallet(user_id, community.id)
        assert wallet.id == transaction.wallet_id
        assert wallet.currency == community.settings.currency_names

    @pytest.mark.asyncio
    async def test_new_wallet_is_saved_before_its_first_transaction(
        self, unit_env, monkeypatch
    ):
        """transactions.wallet_id references wallets.id, so order matters."""
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        wallet_repo = await unit_env.get(WalletRepository)
        transaction_repo = await unit_env.get(TransactionRepository)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)

        writes = []
        save_wallet, save_transaction = wallet_repo.save, transaction_repo.save

        async def recording_wallet_save(wallet):
            writes.append(("wallet", wallet.id))
            return await save_wallet(wallet)

        async def recording_transaction_save(transaction):
            writes.append(("transaction", transaction.wallet_id))
            return await save_transaction(transaction)

        monkeypatch.setattr(wallet_repo, "save", recording_wallet_save)
        monkeypatch.setattr(transaction_repo, "save", recording_transaction_save)

        # Act
        transaction = await wallet_service.credit(
            user_id, community.id, 5, ReferenceType.WELCOME_MERITS
        )

        # Assert
        assert writes == [
            ("wallet", transaction.wallet_id),
            ("transaction", transaction.wallet_id),
        ]

    @pytest.mark.asyncio
    async def test_debit_reduces_balance(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)
        await fund_wallet(unit_env, user_id, community.id, 100)

        # Act
        transaction = await wallet_service.debit(
            user_id, community.id, 30, ReferenceType.PUBLICATION_VOTE, reference_id=uuid4()
        )

        # Assert
        assert transaction.signed_amount == -30
        assert await wallet_service.get_balance(user_id, community.id) == 70

    @pytest.mark.asyncio
    async def test_overdraft_is_rejected_and_balance_unchanged(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)
        await fund_wallet(unit_env, user_id, community.id, 100)

        # Act & Assert
        with pytest.raises(InsufficientWalletBalanceError) as exc_info:
            await wallet_service.debit(
                user_id, community.id, 150, ReferenceType.PUBLICATION_VOTE
            )

        assert exc_info.value.available == 100
        assert exc_info.value.requested == 150
        assert await wallet_service.get_balance(user_id, community.id) == 100
        assert len(await wallet_service.list_transactions(user_id, community.id)) == 1

    @pytest.mark.asyncio
    async def test_debit_of_missing_wallet_is_rejected(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        wallet_repo = await unit_env.get(WalletRepository)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)

        # Act & Assert
        with pytest.raises(InsufficientWalletBalanceError):
            await wallet_service.debit(user_id, community.id, 1, ReferenceType.VOTE_VOTE)

        assert await wallet_repo.find_by_user(user_id) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5])
    async def test_non_positive_amount_is_rejected(self, unit_env, amount):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="must be positive"):
            await wallet_service.credit(
                UserId(uuid4()), community.id, amount, ReferenceType.WELCOME_MERITS
            )

    @pytest.mark.asyncio
    async def test_credit_to_unknown_community_raises_not_found(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await wallet_service.credit(
                UserId(uuid4()), CommunityId(uuid4()), 5, ReferenceType.WELCOME_MERITS
            )

    @pytest.mark.asyncio
    async def test_concurrent_debits_never_overdraw(self, unit_env):
        """Two debits of 60 against 100: exactly one succeeds."""
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)
        await fund_wallet(unit_env, user_id, community.id, 100)

        # Act
        results = await asyncio.gather(
            wallet_service.debit(user_id, community.id, 60, ReferenceType.PUBLICATION_VOTE),
            wallet_service.debit(user_id, community.id, 60, ReferenceType.PUBLICATION_VOTE),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], InsufficientWalletBalanceError)
        assert await wallet_service.get_balance(user_id, community.id) == 40


class TestHistory:
    """Tests for transaction history and reconciliation."""

    @pytest.mark.asyncio
    async def test_list_transactions_newest_first_with_paging(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)
        for amount in (10, 20, 30):
            await fund_wallet(unit_env, user_id, community.id, amount)

        # Act
        first_page = await wallet_service.list_transactions(
            user_id, community.id, limit=2
        )
        second_page = await wallet_service.list_transactions(
            user_id, community.id, limit=2, offset=2
        )

        # Assert
        assert [t.amount for t in first_page] == [30, 20]
        assert [t.amount for t in second_page] == [10]

    @pytest.mark.asyncio
    async def test_list_transactions_without_wallet_is_empty(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)

        # Act
        transactions = await wallet_service.list_transactions(UserId(uuid4()), community.id)

        # Assert
        assert transactions == []

    @pytest.mark.asyncio
    async def test_balance_reconciles_with_history(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)
        await fund_wallet(unit_env, user_id, community.id, 50)
        await wallet_service.debit(user_id, community.id, 15, ReferenceType.COMMENT_VOTE)

        # Act & Assert
        assert await wallet_service.verify_balance(user_id, community.id)

    @pytest.mark.asyncio
    async def test_tampered_balance_does_not_reconcile(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        wallet_repo = await unit_env.get(WalletRepository)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)
        await fund_wallet(unit_env, user_id, community.id, 50)

        wallet = await wallet_repo.find_by_user_and_community(user_id, community.id)
        await wallet_repo.save(wallet.model_copy(update={"balance": 75}))

        # Act & Assert
        assert not await wallet_service.verify_balance(user_id, community.id)


class TestWelcomeMerits:
    """Tests for credit_welcome_merits_if_needed."""

    @pytest.mark.asyncio
    async def test_welcome_merits_granted_once(self, unit_env):
        # Arrange
        wallet_service = await unit_env.get(WalletService)
        community = await seed_community(unit_env)
        user_id = await add_member(unit_env, community)

        # Act
        first = await wallet_service.credit_welcome_merits_if_needed(user_id, community.id)
        second = await wallet_service.credit_welcome_merits_if_needed(user_id, community.id)

        # Assert
        assert first is not None
        assert first.reference_type == ReferenceType.WELCOME_MERITS
        assert second is None
        assert await wallet_service.get_balance(user_id, community.id) == 100
