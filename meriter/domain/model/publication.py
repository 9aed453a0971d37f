"""Publication and comment entities.

Both are read-only collaborators of the ledger: they are looked up to
resolve who benefits from a vote and which community it belongs to.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from meriter.domain.model.common import DomainModel, utc_now
from meriter.domain.value import (
    CommentId,
    CommunityId,
    PostType,
    PublicationId,
    TargetType,
    UserId,
)


class PublicationMetrics(DomainModel):
    """Denormalized vote counters shown on a publication."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


class Publication(DomainModel):
    """Publication posted in a community."""

    id: PublicationId
    community_id: CommunityId
    author_id: UserId
    beneficiary_id: Optional[UserId] = None
    post_type: PostType = PostType.BASIC
    is_project: bool = False
    content: str = ""
    metrics: PublicationMetrics = Field(default_factory=PublicationMetrics)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def effective_beneficiary_id(self) -> UserId:
        """Explicit beneficiary if set, else the author."""
        return self.beneficiary_id or self.author_id


class Comment(DomainModel):
    """Comment attached to a publication, a vote or another comment.

    Comments have no beneficiary field; the author always benefits.
    """

    id: CommentId
    target_type: TargetType
    target_id: UUID
    author_id: UserId
    content: str = ""
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def effective_beneficiary_id(self) -> UserId:
        return self.author_id
