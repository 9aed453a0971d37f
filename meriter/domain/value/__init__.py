"""Domain value objects for the Meriter ledger."""

from meriter.domain.value.identifiers import (
    CommentId,
    CommunityId,
    PublicationId,
    TransactionId,
    UserId,
    VoteId,
    WalletId,
)
from meriter.domain.value.types import (
    CommunityRole,
    CommunityTypeTag,
    CurrencyNames,
    PostType,
    ProjectVoting,
    ReferenceType,
    ReplySort,
    SocialCurrency,
    TargetType,
    TransactionSource,
    TransactionType,
    VoteDirection,
    VoteSource,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommunityId",
    "PublicationId",
    "CommentId",
    "VoteId",
    "WalletId",
    "TransactionId",
    # Types
    "TargetType",
    "VoteDirection",
    "VoteSource",
    "TransactionType",
    "TransactionSource",
    "ReferenceType",
    "CommunityTypeTag",
    "CommunityRole",
    "PostType",
    "SocialCurrency",
    "ProjectVoting",
    "ReplySort",
    "CurrencyNames",
]
