"""
Data Transfer Objects for the posts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class GetPostsQuery:
    """Input DTO for listing every post."""


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post.

    Fields are optional so that missing values reach validation
    instead of failing deserialization.

    Attributes:
        title: Post title.
        content: Post body.
    """

    title: str | None
    content: str | None


@dataclass(frozen=True)
class UpdatePostCommand:
    """Input DTO for updating an existing post.

    Attributes:
        id: Identifier of the post to update.
        title: New title.
        content: New body.
    """

    id: UUID | None
    title: str | None
    content: str | None


@dataclass(frozen=True)
class PostSummary:
    """Read model for a single post."""

    id: UUID
    title: str
    content: str


@dataclass(frozen=True)
class CreatePostResult:
    """Output DTO for a newly created post."""

    id: UUID
    title: str
    content: str


@dataclass(frozen=True)
class PostUpdated:
    """The post was found and overwritten."""

    post: PostSummary


@dataclass(frozen=True)
class PostNotFound:
    """No post exists with the requested identifier."""

    post_id: UUID


UpdatePostResult = PostUpdated | PostNotFound
