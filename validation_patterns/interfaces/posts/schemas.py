"""
Pydantic schemas for posts API requests and responses.

Request fields are optional on purpose: presence and emptiness are
checked by the validation rule sets, not by deserialization, so every
invalid field is reported in one response.
No business logic belongs here.
"""

from uuid import UUID

from pydantic import BaseModel, Field

TITLE_DESCRIPTION = "Post title"
CONTENT_DESCRIPTION = "Post body"


class CreatePostRequest(BaseModel):
    """Request schema for creating a post.

    Attributes:
        title: Post title. Required, must not be blank.
        content: Post body. Required, must not be blank.
    """

    title: str | None = Field(default=None, description=TITLE_DESCRIPTION)
    content: str | None = Field(default=None, description=CONTENT_DESCRIPTION)


class UpdatePostRequest(BaseModel):
    """Request schema for updating a post.

    Attributes:
        id: Identifier of the post. Required, must not be the nil UUID.
        title: New title. Required, must not be blank.
        content: New body. Required, must not be blank.
    """

    id: UUID | None = Field(default=None, description="Post identifier")
    title: str | None = Field(default=None, description=TITLE_DESCRIPTION)
    content: str | None = Field(default=None, description=CONTENT_DESCRIPTION)


class PostItem(BaseModel):
    """A single post in a response."""

    id: UUID
    title: str
    content: str


class GetPostsResponse(BaseModel):
    """Response schema for listing posts through the mediator."""

    posts: list[PostItem]


class CreatePostResponse(BaseModel):
    """Response schema for a post created through the mediator."""

    id: UUID


class UpdatePostResponse(BaseModel):
    """Response schema for a post updated through the mediator."""
