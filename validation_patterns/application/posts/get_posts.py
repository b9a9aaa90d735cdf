"""
Use case: List every stored post.

Input: GetPostsQuery
Output: list[PostSummary], in insertion order.
Side effects: None.
"""

import logging

from validation_patterns.application.posts.dtos import GetPostsQuery, PostSummary
from validation_patterns.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class GetPostsUseCase:
    """Projects the whole store to lightweight read models."""

    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, query: GetPostsQuery) -> list[PostSummary]:
        posts = self._repository.list_all()
        logger.debug("Listing %d post(s)", len(posts))
        return [PostSummary(id=p.id, title=p.title, content=p.content) for p in posts]
