"""Application layer DI providers."""

from dishka import Scope, provide

from meriter.application.usecase.quota import (
    GetQuotaUseCase,
    ResetAllQuotasUseCase,
    ResetDailyQuotaUseCase,
)
from meriter.application.usecase.score import GetTargetScoreUseCase, ListRepliesUseCase
from meriter.application.usecase.vote import CreateVoteUseCase
from meriter.application.usecase.wallet import (
    GetWalletBalanceUseCase,
    GrantWelcomeMeritsUseCase,
    ListTransactionsUseCase,
    VerifyWalletBalanceUseCase,
)
from meriter.application.usecase.withdrawal import WithdrawUseCase
from meriter.domain.service import (
    QuotaService,
    ScoreService,
    VoteService,
    WalletService,
    WithdrawalService,
)
from meriter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_create_vote_use_case(self, vote_service: VoteService) -> CreateVoteUseCase:
        """Provide create vote use case."""
        return CreateVoteUseCase(vote_service=vote_service)

    # Withdrawal use cases
    @provide(scope=Scope.REQUEST)
    def get_withdraw_use_case(
        self, withdrawal_service: WithdrawalService
    ) -> WithdrawUseCase:
        """Provide withdraw use case."""
        return WithdrawUseCase(withdrawal_service=withdrawal_service)

    # Quota use cases
    @provide(scope=Scope.REQUEST)
    def get_get_quota_use_case(self, quota_service: QuotaService) -> GetQuotaUseCase:
        """Provide get quota use case."""
        return GetQuotaUseCase(quota_service=quota_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_daily_quota_use_case(
        self, quota_service: QuotaService
    ) -> ResetDailyQuotaUseCase:
        """Provide reset daily quota use case."""
        return ResetDailyQuotaUseCase(quota_service=quota_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_all_quotas_use_case(
        self, quota_service: QuotaService
    ) -> ResetAllQuotasUseCase:
        """Provide reset all quotas use case."""
        return ResetAllQuotasUseCase(quota_service=quota_service)

    # Wallet use cases
    @provide(scope=Scope.REQUEST)
    def get_get_wallet_balance_use_case(
        self, wallet_service: WalletService
    ) -> GetWalletBalanceUseCase:
        """Provide get wallet balance use case."""
        return GetWalletBalanceUseCase(wallet_service=wallet_service)

    @provide(scope=Scope.REQUEST)
    def get_list_transactions_use_case(
        self, wallet_service: WalletService
    ) -> ListTransactionsUseCase:
        """Provide list transactions use case."""
        return ListTransactionsUseCase(wallet_service=wallet_service)

    @provide(scope=Scope.REQUEST)
    def get_grant_welcome_merits_use_case(
        self, wallet_service: WalletService
    ) -> GrantWelcomeMeritsUseCase:
        """Provide grant welcome merits use case."""
        return GrantWelcomeMeritsUseCase(wallet_service=wallet_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_wallet_balance_use_case(
        self, wallet_service: WalletService
    ) -> VerifyWalletBalanceUseCase:
        """Provide verify wallet balance use case."""
        return VerifyWalletBalanceUseCase(wallet_service=wallet_service)

    # Score use cases
    @provide(scope=Scope.REQUEST)
    def get_get_target_score_use_case(
        self, score_service: ScoreService
    ) -> GetTargetScoreUseCase:
        """Provide get target score use case."""
        return GetTargetScoreUseCase(score_service=score_service)

    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self, score_service: ScoreService
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(score_service=score_service)
