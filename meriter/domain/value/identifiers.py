"""Strongly typed identifiers for Meriter ledger entities.

Using NewType for strong typing prevents mixing up a wallet ID with a
community ID when both are plain UUIDs on the wire.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
CommunityId = NewType("CommunityId", UUID)
PublicationId = NewType("PublicationId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)

# Ledger identifiers
WalletId = NewType("WalletId", UUID)
TransactionId = NewType("TransactionId", UUID)
