"""Repository interfaces for the Meriter ledger domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from meriter.domain.repository.community import (
    CommunityRepository,
    MembershipRepository,
)
from meriter.domain.repository.publication import (
    CommentRepository,
    PublicationRepository,
)
from meriter.domain.repository.unit_of_work import UnitOfWork
from meriter.domain.repository.vote import VoteRepository
from meriter.domain.repository.wallet import TransactionRepository, WalletRepository

__all__ = [
    "CommunityRepository",
    "MembershipRepository",
    "PublicationRepository",
    "CommentRepository",
    "VoteRepository",
    "WalletRepository",
    "TransactionRepository",
    "UnitOfWork",
]
