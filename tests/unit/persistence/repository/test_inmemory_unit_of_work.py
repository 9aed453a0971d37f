"""Unit tests for the in-memory unit of work."""

from uuid import uuid4

import pytest

from meriter.domain.model.common import utc_now
from meriter.domain.model.wallet import Transaction, Wallet
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionId,
    TransactionType,
    UserId,
    WalletId,
)
from meriter.persistence.repository.inmemory import (
    InMemoryTransactionRepository,
    InMemoryUnitOfWork,
    InMemoryWalletRepository,
)


def make_wallet(balance: int = 0) -> Wallet:
    return Wallet(
        id=WalletId(uuid4()),
        user_id=UserId(uuid4()),
        community_id=CommunityId(uuid4()),
        balance=balance,
    )


class TestInMemoryUnitOfWork:
    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        # Arrange
        wallets = InMemoryWalletRepository()
        uow = InMemoryUnitOfWork(wallets)
        wallet = make_wallet(10)

        # Act
        async with uow.transaction():
            await wallets.save(wallet)

        # Assert
        assert await wallets.find_by_user_and_community(
            wallet.user_id, wallet.community_id
        ) == wallet

    @pytest.mark.asyncio
    async def test_exception_restores_every_repository(self):
        # Arrange
        wallets = InMemoryWalletRepository()
        transactions = InMemoryTransactionRepository()
        uow = InMemoryUnitOfWork(wallets, transactions)
        wallet = make_wallet()

        # Act
        with pytest.raises(RuntimeError):
            async with uow.transaction():
                await wallets.save(wallet)
                await transactions.save(
                    Transaction(
                        id=TransactionId(uuid4()),
                        wallet_id=wallet.id,
                        type=TransactionType.CREDIT,
                        amount=5,
                        reference_type=ReferenceType.WELCOME_MERITS,
                        created_at=utc_now(),
                    )
                )
                raise RuntimeError("boom")

        # Assert
        assert await wallets.find_by_user(wallet.user_id) == []
        assert await transactions.sum_signed_by_wallet(wallet.id) == 0

    @pytest.mark.asyncio
    async def test_nested_transaction_joins_outer(self):
        # Arrange
        wallets = InMemoryWalletRepository()
        uow = InMemoryUnitOfWork(wallets)
        wallet = make_wallet(3)

        # Act - the inner block must not deadlock, and the outer failure undoes it
        with pytest.raises(RuntimeError):
            async with uow.transaction():
                async with uow.transaction():
                    await wallets.save(wallet)
                raise RuntimeError("outer failure")

        # Assert
        assert await wallets.find_by_user(wallet.user_id) == []

    @pytest.mark.asyncio
    async def test_lock_account_outside_transaction_is_an_error(self):
        # Arrange
        uow = InMemoryUnitOfWork()

        # Act & Assert
        with pytest.raises(RuntimeError, match="inside a transaction"):
            await uow.lock_account(UserId(uuid4()), CommunityId(uuid4()))
