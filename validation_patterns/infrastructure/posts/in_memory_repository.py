"""
Adapter: In-memory post storage.

Implements the PostRepository port with a process-lifetime list.
Suitable for demos and tests; replace with a database adapter for
anything durable.
"""

import logging
from threading import Lock
from typing import Optional
from uuid import UUID

from validation_patterns.domain.posts.entities import Post
from validation_patterns.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "hoge"
DEFAULT_CONTENT = "fuga"


class InMemoryPostRepository(PostRepository):
    """List-backed repository seeded with one post on first access.

    A single lock guards the list, so concurrent updates never lose
    writes.
    """

    def __init__(self, seed: bool = True) -> None:
        self._posts: Optional[list[Post]] = None if seed else []
        self._lock = Lock()

    def _store(self) -> list[Post]:
        # Caller must hold the lock.
        if self._posts is None:
            self._posts = [Post(title=DEFAULT_TITLE, content=DEFAULT_CONTENT)]
            logger.debug("Seeded in-memory store with default post")
        return self._posts

    def list_all(self) -> list[Post]:
        with self._lock:
            return list(self._store())

    def add(self, post: Post) -> None:
        with self._lock:
            store = self._store()
            if any(p.id == post.id for p in store):
                raise ValueError(f"Post {post.id} already exists")
            store.append(post)

    def get(self, post_id: UUID) -> Optional[Post]:
        with self._lock:
            return next((p for p in self._store() if p.id == post_id), None)

    def update(self, post_id: UUID, title: str, content: str) -> Optional[Post]:
        with self._lock:
            post = next((p for p in self._store() if p.id == post_id), None)
            if post is None:
                return None
            post.revise(title=title, content=content)
            return post

    def __len__(self) -> int:
        with self._lock:
            return len(self._store())
