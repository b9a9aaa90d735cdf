"""
ASGI boundary installing the global exception handler.

Tracks whether the response has started so that the handler can
refuse to write a second response over a partially sent one.
"""

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from validation_patterns.shared.errors.handlers import GlobalExceptionHandler


class ExceptionHandlerMiddleware:
    """Pure ASGI middleware turning exceptions into error responses."""

    def __init__(self, app: ASGIApp, handler: GlobalExceptionHandler) -> None:
        self.app = app
        self.handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            response = self.handler.try_handle(
                Request(scope, receive), exc, response_started=response_started
            )
            if response is None:
                raise
            await response(scope, receive, send)
