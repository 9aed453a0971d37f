"""Domain layer DI providers."""

from dishka import Scope, provide

from meriter.config import LedgerSettings, VotingSettings
from meriter.domain.repository import (
    CommentRepository,
    CommunityRepository,
    MembershipRepository,
    PublicationRepository,
    TransactionRepository,
    UnitOfWork,
    VoteRepository,
    WalletRepository,
)
from meriter.domain.service import (
    BeneficiaryResolver,
    CommunityService,
    EventPublisher,
    QuotaService,
    ScoreService,
    VoteService,
    WalletService,
    WithdrawalService,
)
from meriter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances sharing one unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_community_service(
        self,
        community_repository: CommunityRepository,
        membership_repository: MembershipRepository,
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(
            community_repository=community_repository,
            membership_repository=membership_repository,
        )

    @provide
    def get_beneficiary_resolver(
        self,
        publication_repository: PublicationRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> BeneficiaryResolver:
        """Provide beneficiary resolver."""
        return BeneficiaryResolver(
            publication_repository=publication_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_quota_service(
        self,
        community_service: CommunityService,
        community_repository: CommunityRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> QuotaService:
        """Provide quota domain service."""
        return QuotaService(
            community_service=community_service,
            community_repository=community_repository,
            vote_repository=vote_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_wallet_service(
        self,
        wallet_repository: WalletRepository,
        transaction_repository: TransactionRepository,
        community_service: CommunityService,
        unit_of_work: UnitOfWork,
        ledger_settings: LedgerSettings,
    ) -> WalletService:
        """Provide wallet domain service."""
        return WalletService(
            wallet_repository=wallet_repository,
            transaction_repository=transaction_repository,
            community_service=community_service,
            unit_of_work=unit_of_work,
            ledger_settings=ledger_settings,
        )

    @provide
    def get_score_service(self, vote_repository: VoteRepository) -> ScoreService:
        """Provide score domain service."""
        return ScoreService(vote_repository=vote_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        beneficiary_resolver: BeneficiaryResolver,
        community_service: CommunityService,
        quota_service: QuotaService,
        wallet_service: WalletService,
        event_publisher: EventPublisher,
        unit_of_work: UnitOfWork,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            beneficiary_resolver=beneficiary_resolver,
            community_service=community_service,
            quota_service=quota_service,
            wallet_service=wallet_service,
            event_publisher=event_publisher,
            unit_of_work=unit_of_work,
            voting_settings=voting_settings,
        )

    @provide
    def get_withdrawal_service(
        self,
        beneficiary_resolver: BeneficiaryResolver,
        community_service: CommunityService,
        wallet_service: WalletService,
        score_service: ScoreService,
        event_publisher: EventPublisher,
        unit_of_work: UnitOfWork,
    ) -> WithdrawalService:
        """Provide withdrawal domain service."""
        return WithdrawalService(
            beneficiary_resolver=beneficiary_resolver,
            community_service=community_service,
            wallet_service=wallet_service,
            score_service=score_service,
            event_publisher=event_publisher,
            unit_of_work=unit_of_work,
        )
