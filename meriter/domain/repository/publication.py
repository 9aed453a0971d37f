"""Publication and comment repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from meriter.domain.model.publication import Comment, Publication
from meriter.domain.value import CommentId, PublicationId


class PublicationRepository(ABC):
    """Read access to publications owned by the content service."""

    @abstractmethod
    async def find_by_id(self, publication_id: PublicationId) -> Optional[Publication]:
        """Find a publication by ID.

        Args:
            publication_id: The publication's unique identifier

        Returns:
            The publication if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, publication: Publication) -> Publication:
        """Create or update a publication.

        Args:
            publication: The publication to persist

        Returns:
            The persisted publication
        """
        pass


class CommentRepository(ABC):
    """Read access to comments owned by the content service."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create or update a comment.

        Args:
            comment: The comment to persist

        Returns:
            The persisted comment
        """
        pass
