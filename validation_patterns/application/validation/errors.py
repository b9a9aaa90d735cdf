"""
Validation failure signal raised by the pipeline behavior.

Carries the complete aggregated outcome so that the error mapper
can enumerate every invalid field.
"""

from validation_patterns.application.validation.types import ValidationOutcome


class ValidationFailedError(Exception):
    """Raised when a request fails validation."""

    def __init__(self, outcome: ValidationOutcome) -> None:
        self.outcome = outcome
        fields = ", ".join(outcome.errors) or "<none>"
        self.message = f"Validation failed for: {fields}"
        super().__init__(self.message)

    @property
    def errors(self) -> dict[str, list[str]]:
        return self.outcome.errors
