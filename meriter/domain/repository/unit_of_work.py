"""Unit of work interface.

Wraps the multi-write sequences of the ledger (quota check, wallet debit,
vote insert) in one atomic unit and linearizes mutations per account.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from meriter.domain.value import CommunityId, UserId


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction.

        The outermost transaction commits on success and rolls back on
        any exception. Nested calls join the outer transaction.

        Returns:
            Async context manager delimiting the transaction
        """
        pass

    @abstractmethod
    async def lock_account(self, user_id: UserId, community_id: CommunityId) -> None:
        """Serialize mutations of a (user, community) account.

        Must be called inside a transaction. The lock is held until the
        outermost transaction ends.

        Args:
            user_id: Account owner
            community_id: Account community
        """
        pass
