"""Community membership entity."""

from datetime import datetime

from pydantic import Field

from meriter.domain.model.common import DomainModel, utc_now
from meriter.domain.value import CommunityId, CommunityRole, UserId


class Membership(DomainModel):
    """A user's role within a community."""

    user_id: UserId
    community_id: CommunityId
    role: CommunityRole = CommunityRole.PARTICIPANT
    joined_at: datetime = Field(default_factory=utc_now)
