"""Withdrawal engine.

Turns value accrued on a publication, vote or comment into a wallet
credit for its effective beneficiary. The withdrawable amount is the
direct net vote value minus what transaction history says has already
been withdrawn.

Marathon of Good withdrawals credit the beneficiary's wallet in the
Future Vision community instead of the source community.
"""

from typing import Optional
from uuid import UUID

import logfire

from meriter.domain.error import (
    InsufficientWithdrawableError,
    NotAuthorizedError,
    NothingToWithdrawError,
    PolicyRejectedError,
    ValidationError,
)
from meriter.domain.model.community import Community
from meriter.domain.model.event import WithdrawalEvent
from meriter.domain.model.wallet import Transaction
from meriter.domain.repository import UnitOfWork
from meriter.domain.value import (
    CommunityId,
    CommunityTypeTag,
    ReferenceType,
    TargetType,
    UserId,
)
from meriter.domain.value.common import ValueObject

from .base import Service
from .beneficiary_resolver import BeneficiaryResolver
from .community_service import CommunityService
from .event_publisher import EventPublisher
from .score_service import ScoreService
from .wallet_service import WalletService


class WithdrawalResult(ValueObject):
    """Outcome of a withdrawal.

    amount is what was actually credited. skipped is what would have been
    credited had the destination community existed.
    """

    amount: int
    credited_community_id: Optional[CommunityId]
    transaction: Optional[Transaction] = None
    remaining: int = 0
    skipped: int = 0


class WithdrawalService(Service):
    """Domain service for withdrawing accrued vote value."""

    def __init__(
        self,
        beneficiary_resolver: BeneficiaryResolver,
        community_service: CommunityService,
        wallet_service: WalletService,
        score_service: ScoreService,
        event_publisher: EventPublisher,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize withdrawal service.

        Args:
            beneficiary_resolver: Target to beneficiary/community resolution
            community_service: Community lookups
            wallet_service: Wallet ledger
            score_service: Vote value on targets
            event_publisher: Domain event sink
            unit_of_work: Transaction boundary and account locks
        """
        self.beneficiary_resolver = beneficiary_resolver
        self.community_service = community_service
        self.wallet_service = wallet_service
        self.score_service = score_service
        self.event_publisher = event_publisher
        self.unit_of_work = unit_of_work

    async def withdraw(
        self,
        target_type: TargetType,
        target_id: UUID,
        requester_id: UserId,
        amount: Optional[int] = None,
    ) -> WithdrawalResult:
        """Withdraw accrued value from a target.

        Args:
            target_type: Type of the target
            target_id: ID of the target
            requester_id: User asking for the withdrawal
            amount: Amount to withdraw, everything available if None

        Returns:
            Amount credited and the community credited (None, with a zero
            amount, if the Future Vision community is missing)

        Raises:
            ValidationError: If amount is not positive
            NotFoundError: If the target or its community does not exist
            NotAuthorizedError: If requester is not the effective beneficiary
            PolicyRejectedError: If the community is Future Vision or does
                not award merits
            NothingToWithdrawError: If nothing is left to withdraw
            InsufficientWithdrawableError: If amount exceeds what is left
        """
        with logfire.span(
            "withdrawal_service.withdraw",
            target_type=target_type.value,
            target_id=str(target_id),
            requester_id=str(requester_id),
        ):
            if amount is not None and amount <= 0:
                raise ValidationError("Withdrawal amount must be positive")

            target = await self.beneficiary_resolver.resolve(target_type, target_id)
            if requester_id != target.beneficiary_id:
                logfire.info(
                    "Withdrawal by non-beneficiary",
                    requester_id=str(requester_id),
                    beneficiary_id=str(target.beneficiary_id),
                )
                raise NotAuthorizedError(
                    "withdraw from", target_type.value, str(target_id), str(requester_id)
                )

            community = await self.community_service.get_community(target.community_id)
            if community.type_tag == CommunityTypeTag.FUTURE_VISION:
                raise PolicyRejectedError("Withdrawals are not allowed in Future Vision")
            if not community.voting_rules.awards_merits:
                raise PolicyRejectedError(
                    f"Community {community.name} does not award merits for withdrawal"
                )

            destination = await self._destination(community)
            reference_type = (
                ReferenceType.MERIT_TRANSFER_GDM_TO_FV
                if community.type_tag == CommunityTypeTag.MARATHON_OF_GOOD
                else ReferenceType.for_withdrawal_from(target_type)
            )

            async with self.unit_of_work.transaction():
                await self.unit_of_work.lock_account(requester_id, community.id)

                net = await self.score_service.get_direct_net(target_type, target_id)
                withdrawn = await self.wallet_service.total_withdrawn(target_id)
                available = max(0, net - withdrawn)
                if available <= 0:
                    raise NothingToWithdrawError(target_type.value, str(target_id))

                if amount is not None and amount > available:
                    raise InsufficientWithdrawableError(available, amount)
                to_withdraw = available if amount is None else amount

                transaction: Optional[Transaction] = None
                if destination is None:
                    logfire.error(
                        "Future Vision community missing, merit transfer skipped",
                        source_community_id=str(community.id),
                        target_id=str(target_id),
                        beneficiary_id=str(requester_id),
                        amount=to_withdraw,
                    )
                else:
                    transaction = await self.wallet_service.credit(
                        requester_id,
                        destination.id,
                        to_withdraw,
                        reference_type,
                        reference_id=target_id,
                        description=f"Withdrawal from {target_type.value} {target_id}",
                    )

            if transaction is None:
                return WithdrawalResult(
                    amount=0,
                    credited_community_id=None,
                    remaining=available,
                    skipped=to_withdraw,
                )

            result = WithdrawalResult(
                amount=to_withdraw,
                credited_community_id=destination.id,
                transaction=transaction,
                remaining=available - to_withdraw,
            )
            logfire.info(
                "Withdrawal completed",
                amount=result.amount,
                credited_community_id=str(result.credited_community_id),
            )

            await self._publish(
                WithdrawalEvent(
                    target_type=target_type,
                    target_id=target_id,
                    beneficiary_id=requester_id,
                    source_community_id=community.id,
                    credited_community_id=result.credited_community_id,
                    amount=result.amount,
                    transaction_id=transaction.id,
                )
            )
            return result

    async def _destination(self, community: Community) -> Optional[Community]:
        """Community whose wallet receives the withdrawal."""
        if community.type_tag != CommunityTypeTag.MARATHON_OF_GOOD:
            return community
        return await self.community_service.find_by_type_tag(
            CommunityTypeTag.FUTURE_VISION
        )

    async def _publish(self, event: WithdrawalEvent) -> None:
        try:
            await self.event_publisher.publish(event)
        except Exception as e:
            logfire.warn(
                "Withdrawal event publish failed",
                event_type=event.event_type,
                error=str(e),
                error_type=type(e).__name__,
            )
