"""PostgreSQL implementations of Wallet and Transaction repositories."""

from typing import Collection, List, Optional
from uuid import UUID

from sqlalchemy import and_, case, exists, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from meriter.domain.model import Transaction, Wallet
from meriter.domain.repository import TransactionRepository, WalletRepository
from meriter.domain.value import (
    CommunityId,
    ReferenceType,
    TransactionType,
    UserId,
    WalletId,
)
from meriter.persistence.mappers import (
    row_to_transaction,
    row_to_wallet,
    transaction_to_dict,
    wallet_to_dict,
)
from meriter.persistence.tables import transactions_table, wallets_table


class PostgresWalletRepository(WalletRepository):
    """PostgreSQL implementation of WalletRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_community(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[Wallet]:
        """Find the wallet of a user in a community."""
        stmt = select(wallets_table).where(
            and_(
                wallets_table.c.user_id == user_id,
                wallets_table.c.community_id == community_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_wallet(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Wallet]:
        """Find all wallets of a user."""
        stmt = select(wallets_table).where(wallets_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_wallet(row._asdict()) for row in result.fetchall()]

    async def save(self, wallet: Wallet) -> Wallet:
        """Create or update a wallet (upsert on the owner key)."""
        values = wallet_to_dict(wallet)
        stmt = pg_insert(wallets_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_wallet_owner",
            set_={
                "balance": stmt.excluded.balance,
                "currency": stmt.excluded.currency,
                "last_updated": stmt.excluded.last_updated,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return wallet


class PostgresTransactionRepository(TransactionRepository):
    """PostgreSQL implementation of TransactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, transaction: Transaction) -> Transaction:
        """Append a transaction."""
        stmt = insert(transactions_table).values(**transaction_to_dict(transaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return transaction

    async def find_by_wallet(
        self, wallet_id: WalletId, limit: int = 50, offset: int = 0
    ) -> List[Transaction]:
        """List a wallet's transactions, newest first."""
        stmt = (
            select(transactions_table)
            .where(transactions_table.c.wallet_id == wallet_id)
            .order_by(transactions_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_transaction(row._asdict()) for row in result.fetchall()]

    async def sum_signed_by_wallet(self, wallet_id: WalletId) -> int:
        """Sum signed amounts of all of a wallet's transactions."""
        signed = case(
            (
                transactions_table.c.type == TransactionType.CREDIT.value,
                transactions_table.c.amount,
            ),
            else_=-transactions_table.c.amount,
        )
        stmt = select(func.coalesce(func.sum(signed), 0)).where(
            transactions_table.c.wallet_id == wallet_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def sum_by_reference(
        self,
        reference_id: UUID,
        reference_types: Collection[ReferenceType],
        transaction_type: TransactionType,
    ) -> int:
        """Sum amounts of transactions pointing at a reference."""
        stmt = select(func.coalesce(func.sum(transactions_table.c.amount), 0)).where(
            and_(
                transactions_table.c.reference_id == reference_id,
                transactions_table.c.reference_type.in_(
                    [t.value for t in reference_types]
                ),
                transactions_table.c.type == transaction_type.value,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def exists_for_wallet(
        self, wallet_id: WalletId, reference_type: ReferenceType
    ) -> bool:
        """Check whether a wallet has a transaction of a reference type."""
        stmt = select(
            exists().where(
                and_(
                    transactions_table.c.wallet_id == wallet_id,
                    transactions_table.c.reference_type == reference_type.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())
