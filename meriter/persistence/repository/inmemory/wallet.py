"""In-memory wallet and transaction repositories for testing."""

from typing import Collection, Optional
from uuid import UUID

from meriter.domain.model.wallet import Transaction, Wallet
from meriter.domain.repository.wallet import TransactionRepository, WalletRepository
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionType,
    UserId,
    WalletId,
)

from .base import InMemoryRepository


class InMemoryWalletRepository(InMemoryRepository, WalletRepository):
    """In-memory implementation of WalletRepository for testing."""

    def __init__(self) -> None:
        self._wallets: dict[tuple[UserId, CommunityId], Wallet] = {}

    async def find_by_user_and_community(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Wallet]:
        return self._wallets.get((user_id, community_id))

    async def find_by_user(self, user_id: UserId) -> list[Wallet]:
        return [w for (owner, _), w in self._wallets.items() if owner == user_id]

    async def save(self, wallet: Wallet) -> Wallet:
        """Create or update a wallet."""
        self._wallets[(wallet.user_id, wallet.community_id)] = wallet
        return wallet


class InMemoryTransactionRepository(InMemoryRepository, TransactionRepository):
    """In-memory implementation of TransactionRepository for testing."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []

    async def save(self, transaction: Transaction) -> Transaction:
        self._transactions.append(transaction)
        return transaction

    async def find_by_wallet(
        self, wallet_id: WalletId, limit: int = 50, offset: int = 0
    ) -> list[Transaction]:
        """List a wallet's transactions, newest first."""
        # Reversed insertion order keeps same-instant transactions stable
        newest_first = [t for t in reversed(self._transactions) if t.wallet_id == wallet_id]
        return newest_first[offset : offset + limit]

    async def sum_signed_by_wallet(self, wallet_id: WalletId) -> int:
        return sum(t.signed_amount for t in self._transactions if t.wallet_id == wallet_id)

    async def sum_by_reference(
        self,
        reference_id: UUID,
        reference_types: Collection[ReferenceType],
        transaction_type: TransactionType,
    ) -> int:
        return sum(
            t.amount
            for t in self._transactions
            if t.reference_id == reference_id
            and t.reference_type in reference_types
            and t.type == transaction_type
        )

    async def exists_for_wallet(
        self, wallet_id: WalletId, reference_type: ReferenceType
    ) -> bool:
        return any(
            t.wallet_id == wallet_id and t.reference_type == reference_type
            for t in self._transactions
        )
