"""Domain model entities for the Meriter ledger."""

from meriter.domain.model.community import (
    Community,
    CommunitySettings,
    MeritRules,
    VotingRules,
)
from meriter.domain.model.event import DomainEvent, VoteCastEvent, WithdrawalEvent
from meriter.domain.model.membership import Membership
from meriter.domain.model.publication import Comment, Publication, PublicationMetrics
from meriter.domain.model.vote import Vote
from meriter.domain.model.wallet import Transaction, Wallet

__all__ = [
    "Community",
    "CommunitySettings",
    "VotingRules",
    "MeritRules",
    "Membership",
    "Publication",
    "PublicationMetrics",
    "Comment",
    "Vote",
    "Wallet",
    "Transaction",
    "DomainEvent",
    "VoteCastEvent",
    "WithdrawalEvent",
]
