"""
Centralized error handling for FastAPI.

Maps every failure raised while serving a request to a Problem
Details response. Internal details (exception type, stack trace,
inner exception) are only exposed in the development environment.
"""

import asyncio
import logging
import traceback
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import Response

from validation_patterns.application.validation import ValidationFailedError
from validation_patterns.shared.errors.exceptions import (
    InvalidOperationError,
    NotFoundError,
    OperationCancelledError,
    UnauthorizedError,
)
from validation_patterns.shared.errors.problem_details import (
    ProblemJSONResponse,
    problem_body,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_499 = 499
HTTP_500 = 500

VALIDATION_DETAIL = "One or more validation errors occurred."
UNAUTHORIZED_DETAIL = "Authentication is required to access this resource."
INVALID_ARGUMENT_DETAIL = "The request contains invalid arguments."
INVALID_OPERATION_DETAIL = "The requested operation is not valid in the current state."
CANCELLED_DETAIL = "The request was cancelled by the client."
INTERNAL_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@dataclass(frozen=True)
class ErrorContext:
    """What the client is told about one failed request.

    Attributes:
        status_code: HTTP status code of the response.
        title: Short human readable summary.
        detail: Explanation specific to this occurrence.
        validation_errors: Field to messages map, validation failures only.
        suppress_body: Send the status code with an empty body.
    """

    status_code: int
    title: str
    detail: str
    validation_errors: Optional[dict[str, list[str]]] = None
    suppress_body: bool = False


def _request_validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group FastAPI's parsing errors by dotted field path."""
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field_name = ".".join(loc) or "body"
        grouped.setdefault(field_name, []).append(error.get("msg", "Invalid value."))
    return grouped


def _inner_exception(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


class GlobalExceptionHandler:
    """Translates exceptions into Problem Details responses.

    Args:
        is_development: Expose exception details in responses and use
            exception messages as details for argument, operation and
            unclassified failures.
    """

    def __init__(self, is_development: bool = False) -> None:
        self.is_development = is_development

    def map_exception(self, exc: BaseException) -> ErrorContext:
        """Return the error context for *exc*. Never raises."""
        if isinstance(exc, ValidationFailedError):
            return ErrorContext(
                HTTP_400, "Validation Error", VALIDATION_DETAIL, exc.errors
            )

        if isinstance(exc, RequestValidationError):
            return ErrorContext(
                HTTP_400,
                "Validation Error",
                VALIDATION_DETAIL,
                _request_validation_errors(exc),
            )

        if isinstance(exc, NotFoundError):
            return ErrorContext(HTTP_404, "Resource Not Found", str(exc))

        if isinstance(exc, (UnauthorizedError, PermissionError)):
            return ErrorContext(HTTP_401, "Unauthorized", UNAUTHORIZED_DETAIL)

        if isinstance(exc, (OperationCancelledError, asyncio.CancelledError)):
            return ErrorContext(
                HTTP_499, "Request Cancelled", CANCELLED_DETAIL, suppress_body=True
            )

        if isinstance(exc, (ValueError, TypeError)):
            return ErrorContext(
                HTTP_400,
                "Invalid Argument",
                str(exc) if self.is_development else INVALID_ARGUMENT_DETAIL,
            )

        if isinstance(exc, InvalidOperationError):
            return ErrorContext(
                HTTP_400,
                "Invalid Operation",
                str(exc) if self.is_development else INVALID_OPERATION_DETAIL,
            )

        return ErrorContext(
            HTTP_500,
            "Internal Server Error",
            str(exc) if self.is_development else INTERNAL_ERROR_DETAIL,
        )

    def create_problem_details(
        self, request: Request, context: ErrorContext, exc: BaseException
    ) -> dict[str, Any]:
        """Build the response body for *context*."""
        extensions: dict[str, Any] = {}
        if self.is_development and not context.suppress_body:
            extensions["exception"] = type(exc).__name__
            extensions["stackTrace"] = "".join(traceback.format_tb(exc.__traceback__))
            inner = _inner_exception(exc)
            if inner is not None:
                extensions["innerException"] = {
                    "type": type(inner).__name__,
                    "message": str(inner),
                }

        return problem_body(
            request,
            status_code=context.status_code,
            title=context.title,
            detail=context.detail,
            errors=context.validation_errors,
            **extensions,
        )

    def try_handle(
        self, request: Request, exc: BaseException, response_started: bool = False
    ) -> Optional[Response]:
        """Produce the error response for *exc*.

        Returns:
            The response to send, or None when the response has already
            started and the exception must propagate.
        """
        logger.error(
            "Exception occurred: %s - %s",
            type(exc).__name__,
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        context = self.map_exception(exc)

        if response_started:
            logger.warning("Response has already started, cannot handle exception")
            return None

        if context.suppress_body:
            return Response(status_code=context.status_code)

        return ProblemJSONResponse(
            status_code=context.status_code,
            content=self.create_problem_details(request, context, exc),
        )

    def to_response(self, request: Request, exc: BaseException) -> Response:
        """Translate a failure reported without raising, e.g. a not-found result."""
        response = self.try_handle(request, exc)
        if response is None:
            raise RuntimeError("Cannot build an error response once sending started")
        return response


def register_error_handlers(app: FastAPI, handler: GlobalExceptionHandler) -> None:
    """Route FastAPI's own request parsing errors through *handler*.

    Everything else reaches the handler via ExceptionHandlerMiddleware.

    Args:
        app: The FastAPI application instance.
        handler: The configured global exception handler.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Report malformed bodies as a validation problem."""
        response = handler.try_handle(request, exc)
        if response is None:
            raise exc
        return response
