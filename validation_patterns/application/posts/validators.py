"""
Rule sets for post requests.

The same checks apply to every request shape that carries the
fields, but each shape gets its own registration.
"""

from validation_patterns.application.posts.dtos import (
    CreatePostCommand,
    UpdatePostCommand,
)
from validation_patterns.application.validation import (
    RuleSet,
    ValidatorRegistry,
    not_default,
    not_empty,
)


def create_post_rules() -> RuleSet:
    """Title and content must both be present."""
    return RuleSet("create_post", [not_empty("title"), not_empty("content")])


def update_post_rules() -> RuleSet:
    """Identifier must be set; title and content must both be present."""
    return RuleSet(
        "update_post",
        [not_default("id"), not_empty("title"), not_empty("content")],
    )


def register_post_validators(registry: ValidatorRegistry) -> ValidatorRegistry:
    """Register the rule sets for the application commands."""
    registry.register(CreatePostCommand, create_post_rules())
    registry.register(UpdatePostCommand, update_post_rules())
    return registry
