"""
Request validation core.

Rule sets describe field-level checks for one request shape.
The registry maps request shapes to their rule sets, and the
executor runs them and aggregates failures by field name.
"""

from validation_patterns.application.validation.errors import ValidationFailedError
from validation_patterns.application.validation.executor import ValidationExecutor
from validation_patterns.application.validation.registry import ValidatorRegistry
from validation_patterns.application.validation.rules import (
    FieldRule,
    RuleSet,
    not_default,
    not_empty,
)
from validation_patterns.application.validation.types import (
    ValidationFailure,
    ValidationOutcome,
    Validator,
)

__all__ = [
    "FieldRule",
    "RuleSet",
    "ValidationExecutor",
    "ValidationFailedError",
    "ValidationFailure",
    "ValidationOutcome",
    "Validator",
    "ValidatorRegistry",
    "not_default",
    "not_empty",
]
