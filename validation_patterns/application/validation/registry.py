"""
Explicit registry of rule sets keyed by request type.

Built once at process start and handed to the filter and the
pipeline behavior. Lookups match the exact request type only.
"""

import logging
from collections import defaultdict

from validation_patterns.application.validation.types import Validator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Maps request types to the ordered validators registered for them.

    Registering more than one validator for the same type is allowed;
    all of them run and their failures are combined.
    """

    def __init__(self) -> None:
        self._validators: dict[type, list[Validator]] = defaultdict(list)

    def register(self, request_type: type, validator: Validator) -> "ValidatorRegistry":
        self._validators[request_type].append(validator)
        logger.debug(
            "Registered validator %s for %s",
            getattr(validator, "name", type(validator).__name__),
            request_type.__name__,
        )
        return self

    def validators_for(self, request_type: type) -> tuple[Validator, ...]:
        return tuple(self._validators.get(request_type, ()))

    def __contains__(self, request_type: type) -> bool:
        return bool(self._validators.get(request_type))

    def __len__(self) -> int:
        return sum(len(v) for v in self._validators.values())
