"""
Dependency injection for the posts bounded context.

Builds the process-wide collaborators once (repository, validator
registry, executor, mediator, validation filter, exception handler)
and exposes them as FastAPI dependency functions.
This is the composition root for the posts context.
"""

from functools import lru_cache

from fastapi import Request

from validation_patterns.application.behaviors import LoggingBehavior, ValidationBehavior
from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.mediator import Mediator
from validation_patterns.application.posts.create_post import CreatePostUseCase
from validation_patterns.application.posts.dtos import (
    CreatePostCommand,
    GetPostsQuery,
    UpdatePostCommand,
)
from validation_patterns.application.posts.get_posts import GetPostsUseCase
from validation_patterns.application.posts.update_post import UpdatePostUseCase
from validation_patterns.application.posts.validators import (
    create_post_rules,
    register_post_validators,
    update_post_rules,
)
from validation_patterns.application.validation import (
    ValidationExecutor,
    ValidatorRegistry,
)
from validation_patterns.core.config import settings
from validation_patterns.domain.posts.ports import PostRepository
from validation_patterns.infrastructure.posts.in_memory_repository import (
    InMemoryPostRepository,
)
from validation_patterns.interfaces.posts.filters import ValidationFilter
from validation_patterns.interfaces.posts.schemas import (
    CreatePostRequest,
    UpdatePostRequest,
)
from validation_patterns.shared.errors.handlers import GlobalExceptionHandler


def build_validator_registry() -> ValidatorRegistry:
    """Register rule sets for every validated request shape.

    HTTP request schemas are validated by the filter, application
    commands by the pipeline behavior. Each shape has its own entry.
    """
    registry = ValidatorRegistry()
    registry.register(CreatePostRequest, create_post_rules())
    registry.register(UpdatePostRequest, update_post_rules())
    return register_post_validators(registry)


@lru_cache
def get_post_repository() -> PostRepository:
    """Return the process-wide post store."""
    return InMemoryPostRepository()


@lru_cache
def get_validator_registry() -> ValidatorRegistry:
    return build_validator_registry()


@lru_cache
def get_validation_executor() -> ValidationExecutor:
    return ValidationExecutor()


@lru_cache
def get_validation_filter() -> ValidationFilter:
    """Return the filter used to decorate validated routes."""
    return ValidationFilter(
        registry=get_validator_registry(),
        executor=get_validation_executor(),
    )


@lru_cache
def get_exception_handler() -> GlobalExceptionHandler:
    return GlobalExceptionHandler(is_development=settings.is_development)


def get_list_posts_use_case() -> GetPostsUseCase:
    """Build GetPostsUseCase with its infrastructure dependencies."""
    return GetPostsUseCase(repository=get_post_repository())


def get_create_post_use_case() -> CreatePostUseCase:
    """Build CreatePostUseCase with its infrastructure dependencies."""
    return CreatePostUseCase(repository=get_post_repository())


def get_update_post_use_case() -> UpdatePostUseCase:
    """Build UpdatePostUseCase with its infrastructure dependencies."""
    return UpdatePostUseCase(repository=get_post_repository())


@lru_cache
def get_mediator() -> Mediator:
    """Build the mediator with its handlers and pipeline behaviors.

    Behavior order matters: logging wraps validation, so rejected
    requests are logged too.
    """
    mediator = Mediator(
        behaviors=[
            LoggingBehavior(),
            ValidationBehavior(
                registry=get_validator_registry(),
                executor=get_validation_executor(),
            ),
        ]
    )
    mediator.register(GetPostsQuery, get_list_posts_use_case())
    mediator.register(CreatePostCommand, get_create_post_use_case())
    mediator.register(UpdatePostCommand, get_update_post_use_case())
    return mediator


def get_cancellation_token(request: Request) -> CancellationToken:
    """Return a token that reports cancellation once the client disconnects."""
    return CancellationToken(probe=request.is_disconnected)
