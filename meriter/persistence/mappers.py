"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from meriter.domain.model import (
    Comment,
    Community,
    CommunitySettings,
    Membership,
    MeritRules,
    Publication,
    PublicationMetrics,
    Transaction,
    Vote,
    VotingRules,
    Wallet,
)
from meriter.domain.value import CurrencyNames


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model.

    Args:
        row: Database row as dict

    Returns:
        Community domain model
    """
    return Community(
        id=_uuid(row["id"]),
        name=row["name"],
        type_tag=row["type_tag"],
        settings=CommunitySettings.model_validate(row["settings"]),
        voting_rules=VotingRules.model_validate(row["voting_rules"]),
        merit_rules=MeritRules.model_validate(row["merit_rules"]),
        last_quota_reset_at=row.get("last_quota_reset_at"),
        created_at=row["created_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict.

    JSONB columns get JSON-safe values, everything else native types.
    """
    data = community.model_dump(exclude={"settings", "voting_rules", "merit_rules"})
    data["type_tag"] = community.type_tag.value
    data["settings"] = community.settings.model_dump(mode="json")
    data["voting_rules"] = community.voting_rules.model_dump(mode="json")
    data["merit_rules"] = community.merit_rules.model_dump(mode="json")
    return data


def row_to_membership(row: Dict[str, Any]) -> Membership:
    return Membership(
        user_id=_uuid(row["user_id"]),
        community_id=_uuid(row["community_id"]),
        role=row["role"],
        joined_at=row["joined_at"],
    )


def membership_to_dict(membership: Membership) -> Dict[str, Any]:
    return membership.model_dump(mode="python") | {"role": membership.role.value}


def row_to_publication(row: Dict[str, Any]) -> Publication:
    """Convert database row to Publication domain model."""
    return Publication(
        id=_uuid(row["id"]),
        community_id=_uuid(row["community_id"]),
        author_id=_uuid(row["author_id"]),
        beneficiary_id=row.get("beneficiary_id"),
        post_type=row["post_type"],
        is_project=row["is_project"],
        content=row["content"],
        metrics=PublicationMetrics(
            upvotes=row["upvotes"],
            downvotes=row["downvotes"],
            comment_count=row["comment_count"],
        ),
        created_at=row["created_at"],
    )


def publication_to_dict(publication: Publication) -> Dict[str, Any]:
    data = publication.model_dump(exclude={"metrics"})
    data["post_type"] = publication.post_type.value
    data.update(publication.metrics.model_dump())
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    return Comment(
        id=_uuid(row["id"]),
        target_type=row["target_type"],
        target_id=_uuid(row["target_id"]),
        author_id=_uuid(row["author_id"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump() | {"target_type": comment.target_type.value}


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=_uuid(row["id"]),
        target_type=row["target_type"],
        target_id=_uuid(row["target_id"]),
        user_id=_uuid(row["user_id"]),
        community_id=_uuid(row["community_id"]),
        source_type=row["source_type"],
        amount_quota=row["amount_quota"],
        amount_wallet=row["amount_wallet"],
        direction=row["direction"],
        comment=row.get("comment"),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["target_type"] = vote.target_type.value
    data["source_type"] = vote.source_type.value
    data["direction"] = vote.direction.value
    return data


def row_to_wallet(row: Dict[str, Any]) -> Wallet:
    return Wallet(
        id=_uuid(row["id"]),
        user_id=_uuid(row["user_id"]),
        community_id=_uuid(row["community_id"]),
        balance=row["balance"],
        currency=CurrencyNames.model_validate(row["currency"]),
        last_updated=row["last_updated"],
    )


def wallet_to_dict(wallet: Wallet) -> Dict[str, Any]:
    data = wallet.model_dump(exclude={"currency"})
    data["currency"] = wallet.currency.model_dump(mode="json")
    return data


def row_to_transaction(row: Dict[str, Any]) -> Transaction:
    return Transaction(
        id=_uuid(row["id"]),
        wallet_id=_uuid(row["wallet_id"]),
        type=row["type"],
        amount=row["amount"],
        source_type=row["source_type"],
        reference_type=row["reference_type"],
        reference_id=row.get("reference_id"),
        description=row["description"],
        created_at=row["created_at"],
    )


def transaction_to_dict(transaction: Transaction) -> Dict[str, Any]:
    data = transaction.model_dump()
    data["type"] = transaction.type.value
    data["source_type"] = transaction.source_type.value
    data["reference_type"] = transaction.reference_type.value
    return data
