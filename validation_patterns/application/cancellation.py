"""
Cooperative cancellation for in-flight requests.

The interface layer builds a token whose probe asks the transport
whether the client has gone away. Application code only sees the
token and never imports anything HTTP related.
"""

from collections.abc import Awaitable, Callable
from typing import Optional

from validation_patterns.shared.errors.exceptions import OperationCancelledError

CancellationProbe = Callable[[], Awaitable[bool]]


class CancellationToken:
    """Signals that the caller no longer wants the result.

    A token is cancelled when :meth:`cancel` was called or when its
    probe reports cancellation.
    """

    def __init__(self, probe: Optional[CancellationProbe] = None) -> None:
        self._probe = probe
        self._cancelled = False

    @classmethod
    def none(cls) -> "CancellationToken":
        """Return a token that is never cancelled by a probe."""
        return cls()

    def cancel(self) -> None:
        self._cancelled = True

    async def is_cancelled(self) -> bool:
        if not self._cancelled and self._probe is not None:
            self._cancelled = await self._probe()
        return self._cancelled

    async def raise_if_cancelled(self) -> None:
        if await self.is_cancelled():
            raise OperationCancelledError("The request was cancelled by the client.")
