"""
Tests for the posts domain layer and the in-memory repository.

No HTTP involved.
"""

import threading
from uuid import UUID, uuid4

import pytest

from validation_patterns.domain.posts.entities import Post
from validation_patterns.domain.posts.errors import PostNotFoundError
from validation_patterns.infrastructure.posts.in_memory_repository import (
    DEFAULT_CONTENT,
    DEFAULT_TITLE,
    InMemoryPostRepository,
)
from validation_patterns.shared.errors.exceptions import NotFoundError


class TestPostEntity:
    """Tests for the Post entity."""

    def test_post_gets_generated_identifier(self) -> None:
        post = Post(title="A", content="B")
        assert isinstance(post.id, UUID)

    def test_identifiers_are_unique(self) -> None:
        assert Post(title="A", content="B").id != Post(title="A", content="B").id

    def test_identifier_is_immutable(self) -> None:
        post = Post(title="A", content="B")
        with pytest.raises(AttributeError):
            post.id = uuid4()

    def test_revise_overwrites_title_and_content(self) -> None:
        post = Post(title="A", content="B")
        original_id = post.id
        post.revise(title="C", content="D")
        assert (post.id, post.title, post.content) == (original_id, "C", "D")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_post_not_found_is_a_not_found_error(self) -> None:
        post_id = uuid4()
        error = PostNotFoundError(post_id)
        assert isinstance(error, NotFoundError)
        assert error.post_id == post_id
        assert str(post_id) in str(error)
        assert "Post" in str(error)


class TestInMemoryPostRepository:
    """Tests for the InMemoryPostRepository adapter."""

    def test_seeded_with_default_post_on_first_access(self) -> None:
        repository = InMemoryPostRepository()
        posts = repository.list_all()
        assert len(posts) == 1
        assert (posts[0].title, posts[0].content) == (DEFAULT_TITLE, DEFAULT_CONTENT)

    def test_seed_happens_only_once(self) -> None:
        repository = InMemoryPostRepository()
        first = repository.list_all()[0].id
        assert repository.list_all()[0].id == first
        assert len(repository) == 1

    def test_unseeded_repository_starts_empty(self) -> None:
        assert InMemoryPostRepository(seed=False).list_all() == []

    def test_add_and_get(self) -> None:
        repository = InMemoryPostRepository(seed=False)
        post = Post(title="A", content="B")
        repository.add(post)
        assert repository.get(post.id) is post

    def test_add_rejects_duplicate_identifier(self) -> None:
        repository = InMemoryPostRepository(seed=False)
        post = Post(title="A", content="B")
        repository.add(post)
        with pytest.raises(ValueError):
            repository.add(post)

    def test_get_unknown_returns_none(self) -> None:
        assert InMemoryPostRepository().get(uuid4()) is None

    def test_update_overwrites_in_place(self) -> None:
        repository = InMemoryPostRepository(seed=False)
        post = Post(title="A", content="B")
        repository.add(post)
        updated = repository.update(post.id, title="C", content="D")
        assert updated is post
        assert (post.title, post.content) == ("C", "D")

    def test_update_unknown_returns_none(self) -> None:
        assert InMemoryPostRepository().update(uuid4(), title="C", content="D") is None

    def test_concurrent_adds_are_not_lost(self) -> None:
        repository = InMemoryPostRepository(seed=False)

        def add_many() -> None:
            for _ in range(200):
                repository.add(Post(title="A", content="B"))

        threads = [threading.Thread(target=add_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(repository) == 1600
