"""
Use case: Create a new post.

Input: CreatePostCommand (title, content)
Output: CreatePostResult
Side effects: Appends a post to the repository.
Failure cases: None. Validation happens before this use case runs.
"""

import logging

from validation_patterns.application.posts.dtos import (
    CreatePostCommand,
    CreatePostResult,
)
from validation_patterns.domain.posts.entities import Post
from validation_patterns.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Builds a Post from trimmed input and stores it.

    Identical requests are never deduplicated: each call yields a
    new post with a fresh identifier.
    """

    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, command: CreatePostCommand) -> CreatePostResult:
        """Run the create post use case.

        Args:
            command: The already validated create request.

        Returns:
            The identifier and stored values of the new post.
        """
        post = Post(
            title=(command.title or "").strip(),
            content=(command.content or "").strip(),
        )
        self._repository.add(post)

        logger.info("Created post id=%s", post.id)
        return CreatePostResult(id=post.id, title=post.title, content=post.content)
