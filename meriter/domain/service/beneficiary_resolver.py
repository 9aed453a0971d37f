"""Beneficiary resolution for vote targets.

Maps a (target type, target id) pair to who benefits from value placed on
it and which community it belongs to. Comments carry no community, so
their community is found by walking the reply chain up to its root.
"""

from typing import Optional
from uuid import UUID

import logfire

from meriter.domain.error import NotFoundError, ValidationError
from meriter.domain.repository import (
    CommentRepository,
    PublicationRepository,
    VoteRepository,
)
from meriter.domain.value import (
    CommentId,
    CommunityId,
    PostType,
    PublicationId,
    TargetType,
    UserId,
    VoteId,
)
from meriter.domain.value.common import ValueObject

from .base import Service

# Reply chains deeper than this are treated as corrupt
MAX_THREAD_DEPTH = 256


class ResolvedTarget(ValueObject):
    """A vote target with its effective beneficiary and community."""

    target_type: TargetType
    target_id: UUID
    beneficiary_id: UserId
    community_id: CommunityId
    post_type: Optional[PostType] = None
    is_project: bool = False


class BeneficiaryResolver(Service):
    """Resolves effective beneficiaries and communities of vote targets."""

    def __init__(
        self,
        publication_repository: PublicationRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize beneficiary resolver.

        Args:
            publication_repository: Publication lookup
            comment_repository: Comment lookup
            vote_repository: Vote lookup (for vote-on-vote targets)
        """
        self.publication_repository = publication_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository

    async def resolve(self, target_type: TargetType, target_id: UUID) -> ResolvedTarget:
        """Resolve a vote target.

        Args:
            target_type: Type of the target
            target_id: ID of the target

        Returns:
            Resolved target

        Raises:
            NotFoundError: If the target, or any link of a comment's chain, is missing
            ValidationError: If a comment chain loops back on itself
        """
        with logfire.span(
            "beneficiary_resolver.resolve",
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            if target_type == TargetType.PUBLICATION:
                publication = await self.publication_repository.find_by_id(
                    PublicationId(target_id)
                )
                if not publication:
                    raise NotFoundError("Publication", str(target_id))
                return ResolvedTarget(
                    target_type=target_type,
                    target_id=target_id,
                    beneficiary_id=publication.effective_beneficiary_id,
                    community_id=publication.community_id,
                    post_type=publication.post_type,
                    is_project=publication.is_project
                    or publication.post_type == PostType.PROJECT,
                )

            if target_type == TargetType.VOTE:
                vote = await self.vote_repository.find_by_id(VoteId(target_id))
                if not vote:
                    raise NotFoundError("Vote", str(target_id))
                return ResolvedTarget(
                    target_type=target_type,
                    target_id=target_id,
                    beneficiary_id=vote.user_id,
                    community_id=vote.community_id,
                )

            comment = await self.comment_repository.find_by_id(CommentId(target_id))
            if not comment:
                raise NotFoundError("Comment", str(target_id))
            community_id = await self.resolve_comment_community(comment.id)
            return ResolvedTarget(
                target_type=target_type,
                target_id=target_id,
                beneficiary_id=comment.effective_beneficiary_id,
                community_id=community_id,
            )

    async def resolve_comment_community(self, comment_id: CommentId) -> CommunityId:
        """Walk a comment's reply chain up to its root publication or vote.

        Raises:
            NotFoundError: If a comment in the chain or the root is missing
            ValidationError: If the chain is cyclic or unreasonably deep
        """
        visited: set[UUID] = set()
        parent_type, parent_id = TargetType.COMMENT, UUID(str(comment_id))

        while parent_type == TargetType.COMMENT:
            if parent_id in visited or len(visited) >= MAX_THREAD_DEPTH:
                logfire.warn("Broken comment chain", comment_id=str(comment_id))
                raise ValidationError(f"Comment chain of {comment_id} does not terminate")
            visited.add(parent_id)

            comment = await self.comment_repository.find_by_id(CommentId(parent_id))
            if not comment:
                raise NotFoundError("Comment", str(parent_id))
            parent_type, parent_id = comment.target_type, comment.target_id

        if parent_type == TargetType.PUBLICATION:
            publication = await self.publication_repository.find_by_id(
                PublicationId(parent_id)
            )
            if not publication:
                raise NotFoundError("Publication", str(parent_id))
            return publication.community_id

        vote = await self.vote_repository.find_by_id(VoteId(parent_id))
        if not vote:
            raise NotFoundError("Vote", str(parent_id))
        return vote.community_id
