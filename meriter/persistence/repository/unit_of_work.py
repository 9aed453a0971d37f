"""PostgreSQL unit of work.

Commits the request session at the end of the outermost transaction and
serializes account mutations with transaction-scoped advisory locks.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from hashlib import blake2b

import logfire
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from meriter.domain.repository import UnitOfWork
from meriter.domain.value import CommunityId, UserId


def advisory_lock_key(user_id: UserId, community_id: CommunityId) -> int:
    """Stable signed 64-bit key for a (user, community) account."""
    digest = blake2b(f"{user_id}:{community_id}".encode(), digest_size=8).digest()
    return int.from_bytes(digest, "big", signed=True)


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work over a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work.

        Args:
            session: Request-scoped SQLAlchemy async session
        """
        self.session = session
        self._depth = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            yield
            await self.session.commit()
        except BaseException as e:
            logfire.warn("Transaction rollback", error=str(e), error_type=type(e).__name__)
            await self.session.rollback()
            raise
        finally:
            self._depth = 0

    async def lock_account(self, user_id: UserId, community_id: CommunityId) -> None:
        """Take a pg_advisory_xact_lock, released on commit or rollback."""
        if not self._depth:
            raise RuntimeError("lock_account must be called inside a transaction")
        await self.session.execute(
            text("SELECT pg_advisory_xact_lock(:key)"),
            {"key": advisory_lock_key(user_id, community_id)},
        )
