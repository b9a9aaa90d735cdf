"""
Problem Details (RFC 9457 / RFC 7807) building blocks.

Shared by the global exception handler and the validation filter so
that both produce the same wire format:
``{type, title, status, detail, instance, errors?, traceId}``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from starlette.requests import Request
from starlette.responses import JSONResponse

from validation_patterns.shared.tracing import new_trace_id

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"
RFC9110_BASE_URI = "https://tools.ietf.org/html/rfc9110#section-"
VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."

_SUBSECTIONS = {
    400: "1",
    401: "2",
    403: "4",
    404: "5",
    405: "6",
    409: "10",
    500: "1",
    501: "2",
    503: "4",
}


def problem_type_uri(status_code: int) -> str:
    """Return the RFC 9110 section URI describing *status_code*."""
    if 400 <= status_code < 500:
        section = "15.5"
    elif 500 <= status_code < 600:
        section = "15.6"
    else:
        section = "15"
    return f"{RFC9110_BASE_URI}{section}.{_SUBSECTIONS.get(status_code, '1')}"


class ProblemDetails(BaseModel):
    """Response schema for every error response."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    errors: dict[str, list[str]] | None = None
    trace_id: str = Field(alias="traceId")


class ProblemJSONResponse(JSONResponse):
    """JSON response advertised as ``application/problem+json``."""

    media_type = PROBLEM_JSON_MEDIA_TYPE


def trace_id_of(request: Request) -> str:
    """Return the request's correlation id, assigning one if missing."""
    trace_id = getattr(request.state, "trace_id", None)
    if not trace_id:
        trace_id = new_trace_id()
        request.state.trace_id = trace_id
    return trace_id


def problem_body(
    request: Request,
    status_code: int,
    title: str,
    detail: str | None = None,
    errors: dict[str, list[str]] | None = None,
    **extensions: Any,
) -> dict[str, Any]:
    """Assemble a Problem Details body as a plain dict."""
    body: dict[str, Any] = {
        "type": problem_type_uri(status_code),
        "title": title,
        "status": status_code,
    }
    if detail is not None:
        body["detail"] = detail
    body["instance"] = request.url.path
    if errors is not None:
        body["errors"] = errors
    body.update(extensions)
    body["traceId"] = trace_id_of(request)
    return body


def validation_problem(
    request: Request, errors: dict[str, list[str]]
) -> ProblemJSONResponse:
    """Build the 400 response returned when a request fails validation."""
    return ProblemJSONResponse(
        status_code=400,
        content=problem_body(
            request,
            status_code=400,
            title=VALIDATION_PROBLEM_TITLE,
            errors=errors,
        ),
    )
