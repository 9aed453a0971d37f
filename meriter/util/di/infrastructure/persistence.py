"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from meriter.config import Settings
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
from meriter.persistence.database import create_engine, create_session_factory
from meriter.persistence.repository import (
    PostgresCommentRepository,
    PostgresCommunityRepository,
    PostgresMembershipRepository,
    PostgresPublicationRepository,
    PostgresTransactionRepository,
    PostgresUnitOfWork,
    PostgresVoteRepository,
    PostgresWalletRepository,
)
from meriter.util.di.base import ProviderBase
from meriter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Ledger writes commit through the unit of work. Anything left pending
        is committed at the end of the request, or rolled back on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work bound to the request session."""
        return PostgresUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_community_repository(self, session: AsyncSession) -> CommunityRepository:
        """Provide Community repository."""
        return PostgresCommunityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_membership_repository(
        self, session: AsyncSession
    ) -> MembershipRepository:
        """Provide Membership repository."""
        return PostgresMembershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_publication_repository(
        self, session: AsyncSession
    ) -> PublicationRepository:
        """Provide Publication repository."""
        return PostgresPublicationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_wallet_repository(self, session: AsyncSession) -> WalletRepository:
        """Provide Wallet repository."""
        return PostgresWalletRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_transaction_repository(
        self, session: AsyncSession
    ) -> TransactionRepository:
        """Provide Transaction repository."""
        return PostgresTransactionRepository(session)
