"""Quota use cases."""

from .get_quota import GetQuotaRequest, GetQuotaResponse, GetQuotaUseCase
from .reset_quota import (
    ResetAllQuotasRequest,
    ResetAllQuotasResponse,
    ResetAllQuotasUseCase,
    ResetDailyQuotaRequest,
    ResetDailyQuotaResponse,
    ResetDailyQuotaUseCase,
)

__all__ = [
    "GetQuotaRequest",
    "GetQuotaResponse",
    "GetQuotaUseCase",
    "ResetDailyQuotaRequest",
    "ResetDailyQuotaResponse",
    "ResetDailyQuotaUseCase",
    "ResetAllQuotasRequest",
    "ResetAllQuotasResponse",
    "ResetAllQuotasUseCase",
]
