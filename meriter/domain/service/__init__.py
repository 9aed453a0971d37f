"""Domain services."""

from .base import Service
from .beneficiary_resolver import BeneficiaryResolver, ResolvedTarget
from .community_service import CommunityService
from .currency_policy import CurrencyModeResult, VoteContext, evaluate
from .event_publisher import EventPublisher
from .quota_service import QuotaService, QuotaStatus
from .score_service import Reply, Score, ScoreService
from .vote_service import VoteService
from .wallet_service import WalletService
from .withdrawal_service import WithdrawalResult, WithdrawalService

__all__ = [
    "BeneficiaryResolver",
    "CommunityService",
    "CurrencyModeResult",
    "EventPublisher",
    "QuotaService",
    "QuotaStatus",
    "Reply",
    "ResolvedTarget",
    "Score",
    "ScoreService",
    "Service",
    "VoteContext",
    "VoteService",
    "WalletService",
    "WithdrawalResult",
    "WithdrawalService",
    "evaluate",
]
