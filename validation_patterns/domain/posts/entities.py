"""
Domain entities for the posts bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Post:
    """A blog or forum post.

    The identifier is generated at creation and never reassigned.
    Title and content are mutated in place by the update use case.

    Attributes:
        title: Post title. Never empty once the post is stored.
        content: Post body. Never empty once the post is stored.
        id: Unique identifier, generated automatically.
    """

    title: str
    content: str
    id: UUID = field(default_factory=uuid4)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Post.id is immutable")
        super().__setattr__(name, value)

    def revise(self, title: str, content: str) -> None:
        """Overwrite title and content in place."""
        self.title = title
        self.content = content
