"""PostgreSQL repository implementations."""

from meriter.persistence.repository.community import (
    PostgresCommunityRepository,
    PostgresMembershipRepository,
)
from meriter.persistence.repository.publication import (
    PostgresCommentRepository,
    PostgresPublicationRepository,
)
from meriter.persistence.repository.unit_of_work import PostgresUnitOfWork
from meriter.persistence.repository.vote import PostgresVoteRepository
from meriter.persistence.repository.wallet import (
    PostgresTransactionRepository,
    PostgresWalletRepository,
)

__all__ = [
    "PostgresCommunityRepository",
    "PostgresMembershipRepository",
    "PostgresPublicationRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresWalletRepository",
    "PostgresTransactionRepository",
    "PostgresUnitOfWork",
]
