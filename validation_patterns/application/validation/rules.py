"""
Declarative field rules and rule sets.

A rule set is a named, ordered list of field rules for a single
request shape. Every rule is evaluated; there is no short-circuit,
so a request with several bad fields reports all of them.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.validation.types import ValidationFailure

NIL_UUID = UUID(int=0)


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return _is_default(value)


def _is_default(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, UUID):
        return value == NIL_UUID
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


@dataclass(frozen=True)
class FieldRule:
    """A single check against one attribute of a request.

    Attributes:
        field_name: Attribute read from the request and reported on failure.
        is_invalid: Predicate returning True when the value fails.
        message: Message reported when the check fails.
    """

    field_name: str
    is_invalid: Callable[[Any], bool]
    message: str

    def check(self, request: Any) -> Optional[ValidationFailure]:
        value = getattr(request, self.field_name, None)
        if self.is_invalid(value):
            return ValidationFailure(field_name=self.field_name, message=self.message)
        return None


def not_empty(field_name: str, message: Optional[str] = None) -> FieldRule:
    """Value must be present and, for strings, not blank after stripping."""
    return FieldRule(
        field_name=field_name,
        is_invalid=_is_empty,
        message=message or f"{_label(field_name)} is required.",
    )


def not_default(field_name: str, message: Optional[str] = None) -> FieldRule:
    """Value must differ from its type's default (None, 0, nil UUID)."""
    return FieldRule(
        field_name=field_name,
        is_invalid=_is_default,
        message=message or f"{_label(field_name)} is required.",
    )


class RuleSet:
    """A named collection of field rules for one request shape."""

    def __init__(self, name: str, rules: list[FieldRule]) -> None:
        self.name = name
        self._rules = tuple(rules)

    def validate(self, request: Any) -> list[ValidationFailure]:
        failures = []
        for rule in self._rules:
            failure = rule.check(request)
            if failure is not None:
                failures.append(failure)
        return failures

    async def validate_async(
        self, request: Any, cancellation: CancellationToken
    ) -> list[ValidationFailure]:
        await cancellation.raise_if_cancelled()
        return self.validate(request)

    def __repr__(self) -> str:
        fields = ", ".join(rule.field_name for rule in self._rules)
        return f"RuleSet({self.name!r}: {fields})"
