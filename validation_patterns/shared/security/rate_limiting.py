"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default rate limit on every endpoint.
Rejections are reported as Problem Details like any other error.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from validation_patterns.core.config import settings
from validation_patterns.shared.errors.problem_details import (
    ProblemJSONResponse,
    problem_body,
)

HTTP_429 = 429

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> Response:
    """Handle rate limit exceeded errors with a Problem Details response.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 response describing the limit that was hit.
    """
    return ProblemJSONResponse(
        status_code=HTTP_429,
        content=problem_body(
            request,
            status_code=HTTP_429,
            title="Too Many Requests",
            detail=f"Rate limit exceeded: {exc.detail}",
        ),
    )
