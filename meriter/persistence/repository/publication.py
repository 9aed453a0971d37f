"""PostgreSQL implementations of Publication and Comment repositories."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from meriter.domain.model import Comment, Publication
from meriter.domain.repository import CommentRepository, PublicationRepository
from meriter.domain.value import CommentId, PublicationId
from meriter.persistence.mappers import (
    comment_to_dict,
    publication_to_dict,
    row_to_comment,
    row_to_publication,
)
from meriter.persistence.tables import comments_table, publications_table


class PostgresPublicationRepository(PublicationRepository):
    """PostgreSQL implementation of PublicationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, publication_id: PublicationId) -> Optional[Publication]:
        """Find a publication by ID."""
        stmt = select(publications_table).where(
            publications_table.c.id == publication_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_publication(row._asdict()) if row else None

    async def save(self, publication: Publication) -> Publication:
        """Create or update a publication."""
        values = publication_to_dict(publication)
        stmt = pg_insert(publications_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[publications_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return publication


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Create or update a comment."""
        values = comment_to_dict(comment)
        stmt = pg_insert(comments_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={"content": stmt.excluded.content},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
