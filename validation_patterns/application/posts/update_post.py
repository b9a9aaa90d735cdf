"""
Use case: Update the title and content of an existing post.

Input: UpdatePostCommand (id, title, content)
Output: PostUpdated | PostNotFound
Side effects: Overwrites the stored post in place.
Failure cases: A missing post is reported as PostNotFound, not raised.
"""

import logging

from validation_patterns.application.posts.dtos import (
    PostNotFound,
    PostSummary,
    PostUpdated,
    UpdatePostCommand,
    UpdatePostResult,
)
from validation_patterns.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Locates a post by identifier and overwrites it."""

    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdatePostCommand) -> UpdatePostResult:
        """Run the update post use case.

        Args:
            command: The already validated update request.

        Returns:
            PostUpdated with the new values, or PostNotFound.

        Raises:
            ValueError: If the command carries no identifier.
        """
        if command.id is None:
            raise ValueError("An identifier is required to update a post.")

        post = self._repository.update(
            command.id,
            title=(command.title or "").strip(),
            content=(command.content or "").strip(),
        )
        if post is None:
            logger.info("Post not found id=%s", command.id)
            return PostNotFound(post_id=command.id)

        logger.info("Updated post id=%s", post.id)
        return PostUpdated(
            post=PostSummary(id=post.id, title=post.title, content=post.content)
        )
