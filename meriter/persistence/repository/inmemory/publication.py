"""In-memory publication and comment repositories for testing."""

from typing import Optional

from meriter.domain.model.publication import Comment, Publication
from meriter.domain.repository.publication import (
    CommentRepository,
    PublicationRepository,
)
from meriter.domain.value import CommentId, PublicationId

from .base import InMemoryRepository


class InMemoryPublicationRepository(InMemoryRepository, PublicationRepository):
    """In-memory implementation of PublicationRepository for testing."""

    def __init__(self) -> None:
        self._publications: dict[PublicationId, Publication] = {}

    async def find_by_id(self, publication_id: PublicationId) -> Optional[Publication]:
        return self._publications.get(publication_id)

    async def save(self, publication: Publication) -> Publication:
        self._publications[publication.id] = publication
        return publication


class InMemoryCommentRepository(InMemoryRepository, CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment
