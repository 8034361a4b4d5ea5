"""Translation of errors into HTTP responses.

Every error response has the shape ``{"error": <message>}``. Routes do
not catch domain errors themselves; the handlers registered here map each
class of the domain taxonomy onto one status code.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookofmemes.domain.error import (
    AuthError,
    DomainError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)

GENERIC_FAILURE = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error response body."""
    return JSONResponse(status_code=status_code, content={"error": message})


def failure_message(request: Request) -> str:
    """Client-facing message for an unexpected failure on this route.

    Derived from the route summary ("Fetch comments" gives "Failed to
    fetch comments").
    """
    route = request.scope.get("route")
    summary = getattr(route, "summary", None)
    if not summary:
        return GENERIC_FAILURE
    return f"Failed to {summary[0].lower()}{summary[1:]}"


def _field_name(loc: tuple) -> str:
    return next((str(part) for part in reversed(loc) if isinstance(part, str)), "request")


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Missing or malformed query/body fields (400)."""
    missing: list[str] = []
    invalid: list[str] = []
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(field)

    if missing:
        message = "Missing " + ", ".join(dict.fromkeys(missing))
    else:
        message = "Invalid " + ", ".join(dict.fromkeys(invalid))

    logfire.info("Request rejected", path=request.url.path, error=message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, exc.message)


async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    """Record store failure (500). Driver details stay in the logs."""
    logfire.error(
        "Record store failure",
        method=request.method,
        path=request.url.path,
        operation=exc.operation,
        collection=exc.collection,
        detail=exc.detail,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, failure_message(request))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.error("Unhandled domain error", path=request.url.path, error=exc.message)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, failure_message(request))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unexpected error", path=request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, failure_message(request))


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
    app.add_exception_handler(AuthError, handle_auth_error)
    app.add_exception_handler(UpstreamError, handle_upstream_error)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
