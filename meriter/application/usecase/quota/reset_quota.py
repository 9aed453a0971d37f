"""Quota reset use cases.

Quota windows are reset by an external scheduler; these use cases are
its entry points.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from meriter.application.usecase.base import BaseUseCase
from meriter.domain.service import QuotaService
from meriter.domain.value import CommunityId


class ResetDailyQuotaRequest(BaseModel):
    """Reset daily quota request."""

    community_id: str


class ResetDailyQuotaResponse(BaseModel):
    """Reset daily quota response."""

    community_id: str
    reset_at: datetime


class ResetDailyQuotaUseCase(BaseUseCase):
    """Use case for starting a new quota window in one community."""

    def __init__(self, quota_service: QuotaService) -> None:
        """Initialize reset daily quota use case.

        Args:
            quota_service: Quota domain service
        """
        self.quota_service = quota_service

    async def execute(self, request: ResetDailyQuotaRequest) -> ResetDailyQuotaResponse:
        """Execute reset flow.

        Raises:
            NotFoundError: If the community does not exist
        """
        reset_at = await self.quota_service.reset(CommunityId(UUID(request.community_id)))
        return ResetDailyQuotaResponse(
            community_id=request.community_id, reset_at=reset_at
        )


class ResetAllQuotasRequest(BaseModel):
    """Reset all quotas request."""

    pass


class ResetAllQuotasResponse(BaseModel):
    """Reset all quotas response."""

    communities_reset: int


class ResetAllQuotasUseCase(BaseUseCase):
    """Use case for starting a new quota window in every community."""

    def __init__(self, quota_service: QuotaService) -> None:
        """Initialize reset all quotas use case.

        Args:
            quota_service: Quota domain service
        """
        self.quota_service = quota_service

    async def execute(self, request: ResetAllQuotasRequest) -> ResetAllQuotasResponse:
        count = await self.quota_service.reset_all()
        return ResetAllQuotasResponse(communities_reset=count)
