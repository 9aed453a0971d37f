"""Vote orchestrator.

Validating -> BeneficiaryResolved -> PolicyEvaluated -> Debited ->
Persisted -> EventPublished. Any failure before the commit leaves no
trace: the quota check, wallet debit and vote inserts share one unit of
work holding the voter's account lock.
"""

from typing import List, Optional
from uuid import UUID, uuid4

import logfire

from meriter.config import VotingSettings
from meriter.domain.error import (
    InsufficientQuotaError,
    InsufficientWalletBalanceError,
    PolicyRejectedError,
    ValidationError,
)
from meriter.domain.model.common import utc_now
from meriter.domain.model.event import VoteCastEvent
from meriter.domain.model.vote import Vote
from meriter.domain.repository import UnitOfWork, VoteRepository
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TargetType,
    UserId,
    VoteDirection,
    VoteId,
    VoteSource,
)

from .base import Service
from .beneficiary_resolver import BeneficiaryResolver, ResolvedTarget
from .community_service import CommunityService
from .currency_policy import CurrencyModeResult, VoteContext, evaluate
from .event_publisher import EventPublisher
from .quota_service import QuotaService
from .wallet_service import WalletService


class VoteService(Service):
    """Domain service orchestrating dual-currency votes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        beneficiary_resolver: BeneficiaryResolver,
        community_service: CommunityService,
        quota_service: QuotaService,
        wallet_service: WalletService,
        event_publisher: EventPublisher,
        unit_of_work: UnitOfWork,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            beneficiary_resolver: Target to beneficiary/community resolution
            community_service: Community policy lookups
            quota_service: Quota ledger
            wallet_service: Wallet ledger
            event_publisher: Domain event sink
            unit_of_work: Transaction boundary and account locks
            voting_settings: Vote validation configuration
        """
        self.vote_repository = vote_repository
        self.beneficiary_resolver = beneficiary_resolver
        self.community_service = community_service
        self.quota_service = quota_service
        self.wallet_service = wallet_service
        self.event_publisher = event_publisher
        self.unit_of_work = unit_of_work
        self.voting_settings = voting_settings

    async def create_vote(
        self,
        voter_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        amount_quota: int = 0,
        amount_wallet: int = 0,
        direction: VoteDirection = VoteDirection.UP,
        comment: Optional[str] = None,
        community_id: Optional[CommunityId] = None,
    ) -> List[Vote]:
        """Cast a vote spending quota, wallet merits, or both.

        Args:
            voter_id: The voting user
            target_type: Type of the target
            target_id: ID of the target
            amount_quota: Quota to spend
            amount_wallet: Wallet merits to spend
            direction: Up or down
            comment: Text explaining the vote
            community_id: Community the caller expects the target to be in

        Returns:
            Persisted vote records, quota-sourced first

        Raises:
            ValidationError: If amounts or comment are invalid
            NotFoundError: If the target or its community does not exist
            PolicyRejectedError: If community policy forbids the spend
            InsufficientQuotaError: If quota_amount exceeds the remaining quota
            InsufficientWalletBalanceError: If amount_wallet exceeds the balance
        """
        with logfire.span(
            "vote_service.create_vote",
            voter_id=str(voter_id),
            target_type=target_type.value,
            target_id=str(target_id),
            amount_quota=amount_quota,
            amount_wallet=amount_wallet,
            direction=direction.value,
        ):
            self._validate(amount_quota, amount_wallet, comment)

            target = await self.beneficiary_resolver.resolve(target_type, target_id)
            if community_id is not None and community_id != target.community_id:
                raise ValidationError(
                    f"{target_type.value.capitalize()} {target_id} does not belong "
                    f"to community {community_id}"
                )

            mode = await self.evaluate_currency_mode(voter_id, target, direction)
            self._enforce(mode, amount_quota, amount_wallet)

            async with self.unit_of_work.transaction():
                await self.unit_of_work.lock_account(voter_id, target.community_id)
                await self._check_funds(
                    voter_id, target.community_id, amount_quota, amount_wallet
                )
                votes = await self._record(
                    voter_id, target, amount_quota, amount_wallet, direction, comment
                )

            logfire.info(
                "Vote cast",
                vote_ids=[str(v.id) for v in votes],
                community_id=str(target.community_id),
                beneficiary_id=str(target.beneficiary_id),
            )

            await self._publish(
                VoteCastEvent(
                    vote_ids=[v.id for v in votes],
                    target_type=target_type,
                    target_id=target_id,
                    voter_id=voter_id,
                    beneficiary_id=target.beneficiary_id,
                    community_id=target.community_id,
                    amount_quota=amount_quota,
                    amount_wallet=amount_wallet,
                    direction=direction,
                )
            )
            return votes

    async def evaluate_currency_mode(
        self,
        voter_id: UserId,
        target: ResolvedTarget,
        direction: VoteDirection = VoteDirection.UP,
    ) -> CurrencyModeResult:
        """Gather the vote context and run the currency evaluator."""
        community = await self.community_service.get_community(target.community_id)
        context = VoteContext(
            voter_id=voter_id,
            beneficiary_id=target.beneficiary_id,
            community=community,
            target_type=target.target_type,
            target_id=target.target_id,
            post_type=target.post_type,
            is_project=target.is_project,
            direction=direction,
            voter_role=await self.community_service.get_role(voter_id, community.id),
            beneficiary_role=await self.community_service.get_role(
                target.beneficiary_id, community.id
            ),
            shared_team_community_ids=await self.community_service.shared_team_community_ids(
                voter_id, target.beneficiary_id
            ),
        )
        return evaluate(context)

    def _validate(
        self, amount_quota: int, amount_wallet: int, comment: Optional[str]
    ) -> None:
        if amount_quota < 0 or amount_wallet < 0:
            raise ValidationError("Vote amounts cannot be negative")
        if amount_quota == 0 and amount_wallet == 0:
            raise ValidationError("Vote must spend a positive quota or wallet amount")
        if self.voting_settings.comment_required and not (comment and comment.strip()):
            raise ValidationError("A comment is required to vote")

    def _enforce(
        self, mode: CurrencyModeResult, amount_quota: int, amount_wallet: int
    ) -> None:
        reason: Optional[str] = None
        if mode.rejected:
            reason = mode.reason
        elif amount_quota > 0 and not mode.allowed_quota:
            reason = mode.quota_reason
        elif amount_wallet > 0 and not mode.allowed_wallet:
            reason = mode.wallet_reason
        elif mode.required_currency == VoteSource.QUOTA and amount_quota == 0:
            reason = mode.reason
        elif mode.required_currency == VoteSource.WALLET and amount_wallet == 0:
            reason = mode.reason

        if reason is not None:
            logfire.info("Vote rejected by currency policy", reason=reason)
            raise PolicyRejectedError(reason)

    async def _check_funds(
        self,
        voter_id: UserId,
        community_id: CommunityId,
        amount_quota: int,
        amount_wallet: int,
    ) -> None:
        """Check quota and wallet as two separate authorizations."""
        if amount_quota > 0:
            quota = await self.quota_service.get_remaining(voter_id, community_id)
            if amount_quota > quota.remaining:
                logfire.info(
                    "Vote rejected for insufficient quota",
                    remaining=quota.remaining,
                    requested=amount_quota,
                )
                raise InsufficientQuotaError(quota.remaining, amount_quota)

        if amount_wallet > 0:
            balance = await self.wallet_service.get_balance(voter_id, community_id)
            if amount_wallet > balance:
                logfire.info(
                    "Vote rejected for insufficient wallet balance",
                    balance=balance,
                    requested=amount_wallet,
                )
                raise InsufficientWalletBalanceError(balance, amount_wallet)

    async def _record(
        self,
        voter_id: UserId,
        target: ResolvedTarget,
        amount_quota: int,
        amount_wallet: int,
        direction: VoteDirection,
        comment: Optional[str],
    ) -> List[Vote]:
        """Debit the wallet and insert the vote records."""
        now = utc_now()
        votes: List[Vote] = []

        if amount_quota > 0:
            votes.append(
                Vote(
                    id=VoteId(uuid4()),
                    target_type=target.target_type,
                    target_id=target.target_id,
                    user_id=voter_id,
                    community_id=target.community_id,
                    source_type=VoteSource.QUOTA,
                    amount_quota=amount_quota,
                    direction=direction,
                    comment=comment,
                    created_at=now,
                )
            )

        if amount_wallet > 0:
            await self.wallet_service.debit(
                voter_id,
                target.community_id,
                amount_wallet,
                ReferenceType.for_vote_on(target.target_type),
                reference_id=target.target_id,
                description=f"Vote on {target.target_type.value} {target.target_id}",
            )
            votes.append(
                Vote(
                    id=VoteId(uuid4()),
                    target_type=target.target_type,
                    target_id=target.target_id,
                    user_id=voter_id,
                    community_id=target.community_id,
                    source_type=VoteSource.WALLET,
                    amount_wallet=amount_wallet,
                    direction=direction,
                    # Only one record of a split vote carries the comment
                    comment=None if votes else comment,
                    created_at=now,
                )
            )

        for vote in votes:
            await self.vote_repository.save(vote)
        return votes

    async def _publish(self, event: VoteCastEvent) -> None:
        try:
            await self.event_publisher.publish(event)
        except Exception as e:
            logfire.warn(
                "Vote event publish failed",
                event_type=event.event_type,
                error=str(e),
                error_type=type(e).__name__,
            )
