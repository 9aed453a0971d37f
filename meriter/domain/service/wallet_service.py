"""Wallet ledger.

Every balance change is a Transaction appended in the same unit of work
as the cached balance update. Debits re-check the balance under the
account lock right before writing, so no overdraft can slip in between
a caller's check and the write.
"""

from typing import List, Optional
from uuid import UUID, uuid4

import logfire

from meriter.config import LedgerSettings
from meriter.domain.error import InsufficientWalletBalanceError, ValidationError
from meriter.domain.model.common import utc_now
from meriter.domain.model.wallet import Transaction, Wallet
from meriter.domain.repository import (
    TransactionRepository,
    UnitOfWork,
    WalletRepository,
)
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionId,
    TransactionSource,
    TransactionType,
    UserId,
    WalletId,
)

from .base import Service
from .community_service import CommunityService


class WalletService(Service):
    """Domain service for wallet balances and their audit trail."""

    def __init__(
        self,
        wallet_repository: WalletRepository,
        transaction_repository: TransactionRepository,
        community_service: CommunityService,
        unit_of_work: UnitOfWork,
        ledger_settings: LedgerSettings,
    ) -> None:
        """Initialize wallet service.

        Args:
            wallet_repository: Wallet repository
            transaction_repository: Transaction repository
            community_service: Community lookups (currency names)
            unit_of_work: Transaction boundary and account locks
            ledger_settings: Ledger configuration
        """
        self.wallet_repository = wallet_repository
        self.transaction_repository = transaction_repository
        self.community_service = community_service
        self.unit_of_work = unit_of_work
        self.ledger_settings = ledger_settings

    async def get_wallet(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Wallet]:
        return await self.wallet_repository.find_by_user_and_community(
            user_id, community_id
        )

    async def get_balance(self, user_id: UserId, community_id: CommunityId) -> int:
        """Get a wallet balance, 0 if the wallet does not exist yet."""
        wallet = await self.get_wallet(user_id, community_id)
        return wallet.balance if wallet else 0

    async def credit(
        self,
        user_id: UserId,
        community_id: CommunityId,
        amount: int,
        reference_type: ReferenceType,
        reference_id: Optional[UUID] = None,
        description: str = "",
        source_type: TransactionSource = TransactionSource.PERSONAL,
    ) -> Transaction:
        """Credit a wallet, creating it if needed.

        Args:
            user_id: Wallet owner
            community_id: Wallet community
            amount: Positive amount to add
            reference_type: What the credit refers to
            reference_id: ID of the referenced entity
            description: Human-readable description
            source_type: Origin of the merits

        Returns:
            The appended transaction

        Raises:
            ValidationError: If amount is not positive
            NotFoundError: If the wallet must be created and the community does not exist
        """
        return await self._apply(
            user_id,
            community_id,
            TransactionType.CREDIT,
            amount,
            reference_type,
            reference_id,
            description,
            source_type,
        )

    async def debit(
        self,
        user_id: UserId,
        community_id: CommunityId,
        amount: int,
        reference_type: ReferenceType,
        reference_id: Optional[UUID] = None,
        description: str = "",
        source_type: TransactionSource = TransactionSource.PERSONAL,
    ) -> Transaction:
        """Debit a wallet, creating it if needed.

        Args:
            user_id: Wallet owner
            community_id: Wallet community
            amount: Positive amount to remove
            reference_type: What the debit pays for
            reference_id: ID of the referenced entity
            description: Human-readable description
            source_type: Origin of the merits

        Returns:
            The appended transaction

        Raises:
            ValidationError: If amount is not positive
            InsufficientWalletBalanceError: If amount exceeds the balance
        """
        return await self._apply(
            user_id,
            community_id,
            TransactionType.DEBIT,
            amount,
            reference_type,
            reference_id,
            description,
            source_type,
        )

    async def _apply(
        self,
        user_id: UserId,
        community_id: CommunityId,
        transaction_type: TransactionType,
        amount: int,
        reference_type: ReferenceType,
        reference_id: Optional[UUID],
        description: str,
        source_type: TransactionSource,
    ) -> Transaction:
        if amount <= 0:
            raise ValidationError("Transaction amount must be positive")

        with logfire.span(
            f"wallet_service.{transaction_type.value}",
            user_id=str(user_id),
            community_id=str(community_id),
            amount=amount,
            reference_type=reference_type.value,
        ):
            async with self.unit_of_work.transaction():
                await self.unit_of_work.lock_account(user_id, community_id)

                wallet = await self._get_or_new_wallet(user_id, community_id)
                if transaction_type == TransactionType.DEBIT and amount > wallet.balance:
                    logfire.info(
                        "Debit rejected for insufficient balance",
                        wallet_id=str(wallet.id),
                        balance=wallet.balance,
                        amount=amount,
                    )
                    raise InsufficientWalletBalanceError(wallet.balance, amount)

                transaction = Transaction(
                    id=TransactionId(uuid4()),
                    wallet_id=wallet.id,
                    type=transaction_type,
                    amount=amount,
                    source_type=source_type,
                    reference_type=reference_type,
                    reference_id=reference_id,
                    description=description,
                    created_at=utc_now(),
                )
                # The wallet row must exist before a transaction references it
                updated = await self.wallet_repository.save(wallet.apply(transaction))
                await self.transaction_repository.save(transaction)

            logfire.info(
                "Wallet transaction recorded",
                wallet_id=str(wallet.id),
                transaction_id=str(transaction.id),
                balance=updated.balance,
            )
            return transaction

    async def _get_or_new_wallet(
        self, user_id: UserId, community_id: CommunityId
    ) -> Wallet:
        """Existing wallet, or an unsaved empty one."""
        wallet = await self.get_wallet(user_id, community_id)
        if wallet:
            return wallet

        community = await self.community_service.get_community(community_id)
        return Wallet(
            id=WalletId(uuid4()),
            user_id=user_id,
            community_id=community_id,
            balance=0,
            currency=community.settings.currency_names,
        )

    async def list_transactions(
        self,
        user_id: UserId,
        community_id: CommunityId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Transaction]:
        """List a wallet's transactions, newest first."""
        wallet = await self.get_wallet(user_id, community_id)
        if not wallet:
            return []
        return await self.transaction_repository.find_by_wallet(
            wallet.id,
            limit=limit or self.ledger_settings.transactions_page_size,
            offset=offset,
        )

    async def total_withdrawn(self, reference_id: UUID) -> int:
        """Total value already withdrawn from a vote target."""
        return await self.transaction_repository.sum_by_reference(
            reference_id, ReferenceType.withdrawals(), TransactionType.CREDIT
        )

    async def verify_balance(self, user_id: UserId, community_id: CommunityId) -> bool:
        """Check that a cached balance matches its transaction history.

        Returns:
            True if consistent (or no wallet exists), False otherwise
        """
        wallet = await self.get_wallet(user_id, community_id)
        if not wallet:
            return True

        expected = await self.transaction_repository.sum_signed_by_wallet(wallet.id)
        if expected != wallet.balance:
            logfire.error(
                "Wallet balance does not reconcile with transactions",
                wallet_id=str(wallet.id),
                cached_balance=wallet.balance,
                transaction_sum=expected,
            )
            return False
        return True

    async def credit_welcome_merits_if_needed(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Transaction]:
        """Grant the one-time welcome credit to a member's wallet.

        Returns:
            The welcome transaction, or None if already granted or disabled
        """
        amount = self.ledger_settings.welcome_merits
        if amount <= 0:
            return None

        async with self.unit_of_work.transaction():
            await self.unit_of_work.lock_account(user_id, community_id)
            wallet = await self.get_wallet(user_id, community_id)
            if wallet and await self.transaction_repository.exists_for_wallet(
                wallet.id, ReferenceType.WELCOME_MERITS
            ):
                return None
            return await self.credit(
                user_id,
                community_id,
                amount,
                ReferenceType.WELCOME_MERITS,
                description="Welcome merits",
            )
