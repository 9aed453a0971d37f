"""In-memory repository implementations for testing."""

from .base import InMemoryRepository
from .community import InMemoryCommunityRepository, InMemoryMembershipRepository
from .publication import InMemoryCommentRepository, InMemoryPublicationRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository
from .wallet import InMemoryTransactionRepository, InMemoryWalletRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryCommunityRepository",
    "InMemoryMembershipRepository",
    "InMemoryPublicationRepository",
    "InMemoryCommentRepository",
    "InMemoryVoteRepository",
    "InMemoryWalletRepository",
    "InMemoryTransactionRepository",
    "InMemoryUnitOfWork",
]
