"""
Validation result types.

A failure is a (field, message) pair. An outcome is the ordered
collection of failures for one request; empty means valid.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from validation_patterns.application.cancellation import CancellationToken


@dataclass(frozen=True)
class ValidationFailure:
    """A single field-level validation failure.

    Attributes:
        field_name: Name of the offending field as seen by the client.
        message: Human readable description of the problem.
    """

    field_name: str
    message: str


@dataclass(frozen=True)
class ValidationOutcome:
    """Aggregated validation result for one request."""

    failures: tuple[ValidationFailure, ...] = ()

    @classmethod
    def success(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def from_failures(cls, failures: Iterable[ValidationFailure]) -> "ValidationOutcome":
        return cls(failures=tuple(failures))

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def errors(self) -> dict[str, list[str]]:
        """Messages grouped by field name.

        Fields appear in first-seen order and messages keep the order
        in which they were reported.
        """
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field_name, []).append(failure.message)
        return grouped


class Validator(Protocol):
    """Anything that can validate a request value."""

    name: str

    def validate(self, request: Any) -> list[ValidationFailure]:
        """Return every failure found in *request*."""
        ...

    async def validate_async(
        self, request: Any, cancellation: CancellationToken
    ) -> list[ValidationFailure]:
        """Cancellation-aware variant of :meth:`validate`."""
        ...
