"""
In-process mediator for commands and queries.

Routes each request to the single handler registered for its exact
type and wraps the call in pipeline behaviors. Behaviors run in
registration order: the first one added is the outermost.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Optional, Protocol

from validation_patterns.application.cancellation import CancellationToken

logger = logging.getLogger(__name__)

NextStep = Callable[[], Awaitable[Any]]


class RequestHandler(Protocol):
    """A use case that handles one request type."""

    def execute(self, request: Any) -> Any:
        ...


class PipelineBehavior(Protocol):
    """A step wrapped around every handler invocation."""

    async def handle(
        self, request: Any, next_step: NextStep, cancellation: CancellationToken
    ) -> Any:
        ...


class HandlerNotFoundError(Exception):
    """Raised when no handler is registered for a request type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        self.message = f"No handler registered for {request_type.__name__}"
        super().__init__(self.message)


class Mediator:
    """Dispatches requests to handlers through a chain of behaviors."""

    def __init__(self, behaviors: Optional[list[PipelineBehavior]] = None) -> None:
        self._handlers: dict[type, RequestHandler] = {}
        self._behaviors: list[PipelineBehavior] = list(behaviors or [])

    def register(self, request_type: type, handler: RequestHandler) -> "Mediator":
        if request_type in self._handlers:
            raise ValueError(f"Handler already registered for {request_type.__name__}")
        self._handlers[request_type] = handler
        return self

    def add_behavior(self, behavior: PipelineBehavior) -> "Mediator":
        self._behaviors.append(behavior)
        return self

    async def send(
        self, request: Any, cancellation: Optional[CancellationToken] = None
    ) -> Any:
        """Dispatch *request* and return the handler's result.

        Raises:
            HandlerNotFoundError: If the request type has no handler.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotFoundError(type(request))

        token = cancellation or CancellationToken.none()

        async def invoke_handler() -> Any:
            return handler.execute(request)

        step: NextStep = invoke_handler
        for behavior in reversed(self._behaviors):
            step = _bind(behavior, request, step, token)
        return await step()


def _bind(
    behavior: PipelineBehavior,
    request: Any,
    next_step: NextStep,
    cancellation: CancellationToken,
) -> NextStep:
    async def step() -> Any:
        return await behavior.handle(request, next_step, cancellation)

    return step
