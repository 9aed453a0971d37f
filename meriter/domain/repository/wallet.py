"""Wallet and transaction repository interfaces."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional
from uuid import UUID

from meriter.domain.model.wallet import Transaction, Wallet
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionType,
    UserId,
    WalletId,
)


class WalletRepository(ABC):
    """Repository for Wallet entity.

    One wallet exists per (user, community).
    """

    @abstractmethod
    async def find_by_user_and_community(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Wallet]:
        """Find the wallet of a user in a community.

        Args:
            user_id: The owner
            community_id: The community

        Returns:
            The wallet if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Wallet]:
        """Find all wallets of a user.

        Args:
            user_id: The owner

        Returns:
            List of the user's wallets
        """
        pass

    @abstractmethod
    async def save(self, wallet: Wallet) -> Wallet:
        """Create or update a wallet.

        Only the wallet service calls this, after appending the
        transaction that explains the new balance.

        Args:
            wallet: The wallet to persist

        Returns:
            The persisted wallet
        """
        pass


class TransactionRepository(ABC):
    """Repository for Transaction entity (append-only audit trail)."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        """Append a transaction.

        Args:
            transaction: The transaction to append

        Returns:
            The saved transaction
        """
        pass

    @abstractmethod
    async def find_by_wallet(
        self, wallet_id: WalletId, limit: int = 50, offset: int = 0
    ) -> List[Transaction]:
        """List a wallet's transactions, newest first.

        Args:
            wallet_id: The wallet
            limit: Maximum number of transactions
            offset: Number of transactions to skip

        Returns:
            List of transactions
        """
        pass

    @abstractmethod
    async def sum_signed_by_wallet(self, wallet_id: WalletId) -> int:
        """Sum signed amounts of all of a wallet's transactions.

        Args:
            wallet_id: The wallet

        Returns:
            Credits minus debits
        """
        pass

    @abstractmethod
    async def sum_by_reference(
        self,
        reference_id: UUID,
        reference_types: Collection[ReferenceType],
        transaction_type: TransactionType,
    ) -> int:
        """Sum amounts of transactions pointing at a reference.

        Args:
            reference_id: ID the transactions refer to
            reference_types: Reference types to include
            transaction_type: Credit or debit

        Returns:
            Total amount
        """
        pass

    @abstractmethod
    async def exists_for_wallet(
        self, wallet_id: WalletId, reference_type: ReferenceType
    ) -> bool:
        """Check whether a wallet has a transaction of a reference type.

        Args:
            wallet_id: The wallet
            reference_type: Reference type to look for

        Returns:
            True if at least one such transaction exists
        """
        pass
