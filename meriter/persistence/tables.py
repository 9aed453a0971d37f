"""SQLAlchemy table definitions for the Meriter ledger.

Core tables mapped manually to immutable domain models (see mappers.py).
Schema management is handled outside this package.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("type_tag", String(50), nullable=False, server_default="custom"),
    Column("settings", JSONB, nullable=False),  # daily_emission, currency_names
    Column("voting_rules", JSONB, nullable=False),
    Column("merit_rules", JSONB, nullable=False),
    Column("last_quota_reset_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_communities_type_tag", communities_table.c.type_tag)

# ============================================================================
# MEMBERSHIPS TABLE
# ============================================================================
memberships_table = Table(
    "memberships",
    metadata,
    Column("user_id", UUID, nullable=False),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("role", String(20), nullable=False, server_default="participant"),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "community_id", name="pk_memberships"),
)

Index("idx_memberships_community", memberships_table.c.community_id)

# ============================================================================
# PUBLICATIONS TABLE (owned by the content service, read here)
# ============================================================================
publications_table = Table(
    "publications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=False),
    Column("beneficiary_id", UUID, nullable=True),
    Column("post_type", String(20), nullable=False, server_default="basic"),
    Column("is_project", Boolean, nullable=False, server_default="false"),
    Column("content", Text, nullable=False, server_default=""),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_publications_community", publications_table.c.community_id)

# ============================================================================
# COMMENTS TABLE (polymorphic parent: publication, vote or comment)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("target_type", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "target_type IN ('publication', 'vote', 'comment')",
        name="check_comment_target_type",
    ),
)

Index("idx_comments_target", comments_table.c.target_type, comments_table.c.target_id)

# ============================================================================
# VOTES TABLE (append-only, no uniqueness per user/target)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("target_type", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("source_type", String(10), nullable=False),
    Column("amount_quota", Integer, nullable=False, server_default="0"),
    Column("amount_wallet", Integer, nullable=False, server_default="0"),
    Column("direction", String(4), nullable=False, server_default="up"),
    Column("comment", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(source_type = 'quota' AND amount_quota > 0 AND amount_wallet = 0) OR "
        "(source_type = 'wallet' AND amount_wallet > 0 AND amount_quota = 0)",
        name="check_vote_single_source",
    ),
    CheckConstraint("direction IN ('up', 'down')", name="check_vote_direction"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
Index(
    "idx_votes_quota_window",
    votes_table.c.user_id,
    votes_table.c.community_id,
    votes_table.c.created_at,
)

# ============================================================================
# WALLETS TABLE (balance is a cache of the transactions sum)
# ============================================================================
wallets_table = Table(
    "wallets",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("balance", Integer, nullable=False, server_default="0"),
    Column("currency", JSONB, nullable=False),
    Column(
        "last_updated", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "community_id", name="uq_wallet_owner"),
    CheckConstraint("balance >= 0", name="check_wallet_balance_non_negative"),
)

# ============================================================================
# TRANSACTIONS TABLE (append-only audit trail)
# ============================================================================
transactions_table = Table(
    "transactions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "wallet_id",
        UUID,
        ForeignKey("wallets.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("type", String(10), nullable=False),
    Column("amount", Integer, nullable=False),
    Column("source_type", String(20), nullable=False, server_default="personal"),
    Column("reference_type", String(50), nullable=False),
    Column("reference_id", UUID, nullable=True),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("amount > 0", name="check_transaction_amount_positive"),
    CheckConstraint("type IN ('credit', 'debit')", name="check_transaction_type"),
)

Index("idx_transactions_wallet", transactions_table.c.wallet_id)
Index(
    "idx_transactions_reference",
    transactions_table.c.reference_id,
    transactions_table.c.reference_type,
)
