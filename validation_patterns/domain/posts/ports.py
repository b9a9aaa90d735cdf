"""
Port interfaces (ABCs) for the posts bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from validation_patterns.domain.posts.entities import Post


class PostRepository(ABC):
    """Port for storing and retrieving posts."""

    @abstractmethod
    def list_all(self) -> list[Post]:
        """Return every stored post in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def add(self, post: Post) -> None:
        """Append a new post to the store."""
        raise NotImplementedError

    @abstractmethod
    def get(self, post_id: UUID) -> Optional[Post]:
        """Return the post with the given identifier, or None."""
        raise NotImplementedError

    @abstractmethod
    def update(self, post_id: UUID, title: str, content: str) -> Optional[Post]:
        """Overwrite title and content of a stored post.

        The lookup and the overwrite happen atomically.

        Returns:
            The updated post, or None if no post has that identifier.
        """
        raise NotImplementedError
