"""
Per-route validation filter.

Wraps a single endpoint: picks the request value destined for the
endpoint out of its arguments, validates it, and short-circuits with a
400 validation problem when anything fails. The endpoint (and anything
it would call) never runs for an invalid request.

Usage::

    validation = ValidationFilter(registry, executor)

    @router.post("/")
    @validation.apply(CreatePostRequest)
    async def create_post(payload: CreatePostRequest, request: Request, ...):
        ...
"""

import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from starlette.requests import Request

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.validation import (
    ValidationExecutor,
    ValidatorRegistry,
)
from validation_patterns.shared.errors.problem_details import validation_problem

logger = logging.getLogger(__name__)

Endpoint = TypeVar("Endpoint", bound=Callable[..., Any])


def _first_of(arguments: list[Any], kind: type) -> Any:
    return next((value for value in arguments if isinstance(value, kind)), None)


class ValidationFilter:
    """Validates one request argument before the wrapped endpoint runs."""

    def __init__(self, registry: ValidatorRegistry, executor: ValidationExecutor) -> None:
        self._registry = registry
        self._executor = executor

    def apply(self, request_type: type) -> Callable[[Endpoint], Endpoint]:
        """Return a decorator validating the *request_type* argument.

        The decorated endpoint must also accept a ``starlette`` Request,
        used to build the problem response, and may accept a
        CancellationToken that is handed to the validators.
        """

        def decorator(endpoint: Endpoint) -> Endpoint:
            @functools.wraps(endpoint)
            async def filtered(*args: Any, **kwargs: Any) -> Any:
                arguments = [*args, *kwargs.values()]
                request_value = _first_of(arguments, request_type)
                if request_value is None:
                    raise RuntimeError(
                        f"{endpoint.__name__} has no {request_type.__name__} argument"
                    )
                http_request = _first_of(arguments, Request)
                if http_request is None:
                    raise RuntimeError(f"{endpoint.__name__} has no Request argument")
                cancellation = _first_of(arguments, CancellationToken)

                outcome = await self._executor.validate(
                    request_value,
                    self._registry.validators_for(request_type),
                    cancellation,
                )
                if not outcome.is_valid:
                    logger.warning(
                        "Validation failed for %s: %s",
                        request_type.__name__,
                        list(outcome.errors),
                    )
                    return validation_problem(http_request, outcome.errors)

                result = endpoint(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
                return result

            return filtered  # type: ignore[return-value]

        return decorator

    with_request_validation = apply
