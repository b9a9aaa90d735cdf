"""
Request correlation identifiers.

Every request gets a trace id, taken from the ``X-Request-ID`` header
when the client sends a usable one, generated otherwise. The id is
stored on ``request.state.trace_id``, exposed to logging through a
context variable and echoed back in the response header.
"""

import re
from contextvars import ContextVar
from uuid import uuid4

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

TRACE_HEADER = "X-Request-ID"
_VALID_TRACE_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the trace id of the request being served, if any."""
    return _trace_id.get()


def new_trace_id() -> str:
    return uuid4().hex


class CorrelationIdMiddleware:
    """Pure ASGI middleware assigning a trace id to each HTTP request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers") or []).get(TRACE_HEADER.lower().encode())
        candidate = incoming.decode("latin-1") if incoming else ""
        trace_id = candidate if _VALID_TRACE_ID.match(candidate) else new_trace_id()

        scope.setdefault("state", {})["trace_id"] = trace_id
        token = _trace_id.set(trace_id)

        async def send_with_trace(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers[TRACE_HEADER] = trace_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_trace)
        finally:
            _trace_id.reset(token)
