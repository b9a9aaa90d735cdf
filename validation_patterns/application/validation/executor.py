"""
Validation executor.

Runs every validator registered for a request and aggregates the
failures. It only aggregates; callers decide what a failure means.
"""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Optional

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.validation.types import (
    ValidationOutcome,
    Validator,
)

logger = logging.getLogger(__name__)


class ValidationExecutor:
    """Runs validators concurrently and joins their results."""

    async def validate(
        self,
        request: Any,
        validators: Sequence[Validator],
        cancellation: Optional[CancellationToken] = None,
    ) -> ValidationOutcome:
        """Validate *request* against all *validators*.

        Args:
            request: The request value to validate.
            validators: Validators registered for the request's type.
            cancellation: Token observed before and after validation.

        Returns:
            The aggregated outcome. Failures keep the registration
            order of their validators regardless of completion order.

        Raises:
            OperationCancelledError: If the token is cancelled.
        """
        token = cancellation or CancellationToken.none()
        await token.raise_if_cancelled()

        if not validators:
            return ValidationOutcome.success()

        results = await asyncio.gather(
            *(validator.validate_async(request, token) for validator in validators)
        )
        await token.raise_if_cancelled()

        outcome = ValidationOutcome.from_failures(
            failure for failures in results for failure in failures
        )
        if not outcome.is_valid:
            logger.debug(
                "Validation of %s produced %d failure(s)",
                type(request).__name__,
                len(outcome.failures),
            )
        return outcome
