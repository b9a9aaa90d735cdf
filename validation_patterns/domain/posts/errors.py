"""
Domain-specific errors for the posts bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from uuid import UUID

from validation_patterns.shared.errors.exceptions import NotFoundError


class PostNotFoundError(NotFoundError):
    """Raised when a post cannot be found by its identifier."""

    def __init__(self, post_id: UUID) -> None:
        super().__init__("Post", post_id)
        self.post_id = post_id
