"""In-memory unit of work for testing.

A single lock held by the outermost transaction linearizes every write,
which is stricter than per-account locking but keeps the same guarantees.
Rollback restores snapshots of all participating repositories.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from contextvars import ContextVar

from meriter.domain.repository import UnitOfWork
from meriter.domain.value import CommunityId, UserId

from .base import InMemoryRepository

# IDs of the units of work with an open transaction in the current task
_active: ContextVar[frozenset[int]] = ContextVar(
    "inmemory_unit_of_work_active", default=frozenset()
)


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over a set of in-memory repositories."""

    def __init__(self, *repositories: InMemoryRepository) -> None:
        self._repositories = repositories
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        active = _active.get()
        if id(self) in active:
            yield
            return

        async with self._lock:
            snapshots = [repo.snapshot() for repo in self._repositories]
            token = _active.set(active | {id(self)})
            try:
                yield
            except BaseException:
                for repo, state in zip(self._repositories, snapshots):
                    repo.restore(state)
                raise
            finally:
                _active.reset(token)

    async def lock_account(self, user_id: UserId, community_id: CommunityId) -> None:
        """No-op: the transaction lock already serializes all writers."""
        if id(self) not in _active.get():
            raise RuntimeError("lock_account must be called inside a transaction")
