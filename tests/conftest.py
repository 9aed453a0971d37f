"""Test configuration and shared builders."""

from typing import Optional
from uuid import UUID, uuid4

from dishka import AsyncContainer

from meriter.domain.model import Comment, Community, Membership, Publication
from meriter.domain.repository import (
    CommentRepository,
    CommunityRepository,
    MembershipRepository,
    PublicationRepository,
)
from meriter.domain.service import WalletService
from meriter.domain.value import (
    CommentId,
    CommunityId,
    CommunityRole,
    CommunityTypeTag,
    PostType,
    PublicationId,
    ReferenceType,
    TargetType,
    UserId,
)


def new_user_id() -> UserId:
    return UserId(uuid4())


async def seed_community(
    env: AsyncContainer,
    type_tag: CommunityTypeTag = CommunityTypeTag.CUSTOM,
    daily_emission: int = 10,
    name: Optional[str] = None,
    **updates,
) -> Community:
    """Save a community with archetype defaults, then apply overrides.

    Args:
        env: Request-scoped test container
        type_tag: Community archetype
        daily_emission: Daily quota per member
        name: Community name (defaults to the archetype value)
        **updates: Fields replaced on the created community (voting_rules, ...)
    """
    community = Community.create(
        name=name or type_tag.value, type_tag=type_tag, daily_emission=daily_emission
    )
    if updates:
        community = community.model_copy(update=updates)
    repo = await env.get(CommunityRepository)
    return await repo.save(community)


async def add_member(
    env: AsyncContainer,
    community: Community,
    user_id: Optional[UserId] = None,
    role: CommunityRole = CommunityRole.PARTICIPANT,
) -> UserId:
    """Add a user to a community and return the user's ID."""
    user_id = user_id or new_user_id()
    repo = await env.get(MembershipRepository)
    await repo.save(Membership(user_id=user_id, community_id=community.id, role=role))
    return user_id


async def seed_publication(
    env: AsyncContainer,
    community: Community,
    author_id: UserId,
    beneficiary_id: Optional[UserId] = None,
    post_type: PostType = PostType.BASIC,
    is_project: bool = False,
) -> Publication:
    publication = Publication(
        id=PublicationId(uuid4()),
        community_id=community.id,
        author_id=author_id,
        beneficiary_id=beneficiary_id,
        post_type=post_type,
        is_project=is_project,
        content="Cleaned up the riverside park",
    )
    repo = await env.get(PublicationRepository)
    return await repo.save(publication)


async def seed_comment(
    env: AsyncContainer,
    target_type: TargetType,
    target_id: UUID,
    author_id: UserId,
) -> Comment:
    comment = Comment(
        id=CommentId(uuid4()),
        target_type=target_type,
        target_id=target_id,
        author_id=author_id,
        content="Well done",
    )
    repo = await env.get(CommentRepository)
    return await repo.save(comment)


async def fund_wallet(
    env: AsyncContainer, user_id: UserId, community_id: CommunityId, amount: int
) -> None:
    """Credit a wallet through the ledger so history and balance agree."""
    wallet_service = await env.get(WalletService)
    await wallet_service.credit(
        user_id, community_id, amount, ReferenceType.WELCOME_MERITS, description="Test grant"
    )
