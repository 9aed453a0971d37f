"""Get quota use case."""

from uuid import UUID

from pydantic import BaseModel

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import QuotaService
from meriter.domain.value import CommunityId, UserId


class GetQuotaRequest(BaseModel):
    """Get quota request."""

    user_id: str
    community_id: str


class GetQuotaResponse(BaseModel):
    """Get quota response."""

    daily_quota: int
    used: int
    remaining: int


class GetQuotaUseCase(BaseUseCase):
    """Use case for reading a user's daily quota in a community."""

    def __init__(self, quota_service: QuotaService) -> None:
        """Initialize get quota use case.

        Args:
            quota_service: Quota domain service
        """
        self.quota_service = quota_service

    async def execute(self, request: GetQuotaRequest) -> GetQuotaResponse:
        """Execute get quota flow.

        Raises:
            NotFoundError: If the community does not exist
        """
        status = await self.quota_service.get_remaining(
            UserId(UUID(request.user_id)), CommunityId(UUID(request.community_id))
        )
        return GetQuotaResponse(
            daily_quota=status.daily_quota,
            used=status.used,
            remaining=status.remaining,
        )
