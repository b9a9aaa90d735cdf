"""
Tests for the mediator and its pipeline behaviors.

Handlers are small fakes; no HTTP involved.
"""

from dataclasses import dataclass

import pytest

from validation_patterns.application.behaviors import LoggingBehavior, ValidationBehavior
from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.mediator import HandlerNotFoundError, Mediator
from validation_patterns.application.validation import (
    RuleSet,
    ValidationExecutor,
    ValidationFailedError,
    ValidatorRegistry,
    not_empty,
)
from validation_patterns.shared.errors.exceptions import OperationCancelledError


@dataclass(frozen=True)
class Greet:
    name: str | None


@dataclass(frozen=True)
class Ping:
    pass


class GreetHandler:
    def __init__(self) -> None:
        self.calls = 0

    def execute(self, request: Greet) -> str:
        self.calls += 1
        return f"Hello, {request.name}"


class FailingHandler:
    def execute(self, request):
        raise RuntimeError("boom")


class RecordingBehavior:
    def __init__(self, label: str, log: list) -> None:
        self.label = label
        self.log = log

    async def handle(self, request, next_step, cancellation):
        self.log.append(f"{self.label}:before")
        result = await next_step()
        self.log.append(f"{self.label}:after")
        return result


def _validating_mediator(handler: GreetHandler, *rule_sets: RuleSet) -> Mediator:
    registry = ValidatorRegistry()
    for rule_set in rule_sets:
        registry.register(Greet, rule_set)
    mediator = Mediator(behaviors=[ValidationBehavior(registry, ValidationExecutor())])
    return mediator.register(Greet, handler)


class TestMediator:
    """Tests for request dispatch."""

    @pytest.mark.asyncio
    async def test_dispatches_to_registered_handler(self) -> None:
        mediator = Mediator().register(Greet, GreetHandler())
        assert await mediator.send(Greet(name="Ann")) == "Hello, Ann"

    @pytest.mark.asyncio
    async def test_unknown_request_type_raises(self) -> None:
        with pytest.raises(HandlerNotFoundError):
            await Mediator().send(Ping())

    def test_registering_twice_is_rejected(self) -> None:
        mediator = Mediator().register(Greet, GreetHandler())
        with pytest.raises(ValueError):
            mediator.register(Greet, GreetHandler())

    @pytest.mark.asyncio
    async def test_first_behavior_is_outermost(self) -> None:
        log: list[str] = []
        mediator = Mediator(
            behaviors=[RecordingBehavior("outer", log), RecordingBehavior("inner", log)]
        ).register(Greet, GreetHandler())

        await mediator.send(Greet(name="Ann"))

        assert log == ["outer:before", "inner:before", "inner:after", "outer:after"]

    @pytest.mark.asyncio
    async def test_handler_errors_propagate_through_behaviors(self) -> None:
        mediator = Mediator(behaviors=[LoggingBehavior()]).register(
            Greet, FailingHandler()
        )
        with pytest.raises(RuntimeError, match="boom"):
            await mediator.send(Greet(name="Ann"))


class TestValidationBehavior:
    """Tests for the ValidationBehavior."""

    @pytest.mark.asyncio
    async def test_no_validators_calls_handler(self) -> None:
        handler = GreetHandler()
        mediator = _validating_mediator(handler)
        assert await mediator.send(Greet(name="")) == "Hello, "
        assert handler.calls == 1

    @pytest.mark.asyncio
    async def test_valid_request_calls_handler(self) -> None:
        handler = GreetHandler()
        mediator = _validating_mediator(handler, RuleSet("greet", [not_empty("name")]))
        assert await mediator.send(Greet(name="Ann")) == "Hello, Ann"
        assert handler.calls == 1

    @pytest.mark.asyncio
    async def test_invalid_request_raises_without_calling_handler(self) -> None:
        handler = GreetHandler()
        mediator = _validating_mediator(handler, RuleSet("greet", [not_empty("name")]))

        with pytest.raises(ValidationFailedError) as excinfo:
            await mediator.send(Greet(name=""))

        assert excinfo.value.errors == {"name": ["Name is required."]}
        assert handler.calls == 0

    @pytest.mark.asyncio
    async def test_failures_from_multiple_validators_are_combined(self) -> None:
        handler = GreetHandler()
        mediator = _validating_mediator(
            handler,
            RuleSet("first", [not_empty("name", "first")]),
            RuleSet("second", [not_empty("name", "second")]),
        )

        with pytest.raises(ValidationFailedError) as excinfo:
            await mediator.send(Greet(name=None))

        assert excinfo.value.errors == {"name": ["first", "second"]}

    @pytest.mark.asyncio
    async def test_cancellation_reaches_validators(self) -> None:
        handler = GreetHandler()
        mediator = _validating_mediator(handler, RuleSet("greet", [not_empty("name")]))
        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError):
            await mediator.send(Greet(name="Ann"), token)
        assert handler.calls == 0
