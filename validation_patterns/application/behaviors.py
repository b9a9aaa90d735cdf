"""
Pipeline behaviors for the mediator.

ValidationBehavior validates every request before its handler runs.
It knows nothing about HTTP: failures are raised as
ValidationFailedError and translated at the application boundary.
"""

import logging
import time
from typing import Any

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.mediator import NextStep
from validation_patterns.application.validation import (
    ValidationExecutor,
    ValidationFailedError,
    ValidatorRegistry,
)

logger = logging.getLogger(__name__)


class ValidationBehavior:
    """Runs all validators registered for the request's exact type.

    With no validators registered the request passes straight through.
    On failure the next step is never invoked.
    """

    def __init__(self, registry: ValidatorRegistry, executor: ValidationExecutor) -> None:
        self._registry = registry
        self._executor = executor

    async def handle(
        self, request: Any, next_step: NextStep, cancellation: CancellationToken
    ) -> Any:
        validators = self._registry.validators_for(type(request))
        if not validators:
            return await next_step()

        outcome = await self._executor.validate(request, validators, cancellation)
        if not outcome.is_valid:
            logger.warning(
                "Validation failed for %s: %s",
                type(request).__name__,
                list(outcome.errors),
            )
            raise ValidationFailedError(outcome)

        return await next_step()


class LoggingBehavior:
    """Logs each dispatched request with its duration."""

    async def handle(
        self, request: Any, next_step: NextStep, cancellation: CancellationToken
    ) -> Any:
        name = type(request).__name__
        started = time.perf_counter()
        logger.info("Handling %s", name)
        try:
            return await next_step()
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("Handled %s in %.1f ms", name, elapsed_ms)
