"""
Centralized error handlers for FastAPI.

Semantic and framework exceptions are handed to the ErrorBoundary stored
on ``app.state``. Unexpected exceptions are rendered by
CorrelationIdMiddleware so they never escape to the server.
Framework failures (schema validation, unknown routes, rate limits) are
first wrapped in the matching platform exception so they carry a stable
response code.
No stack traces or internal details are exposed to clients.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from exception_boundary.shared.errors.boundary import ErrorBoundary
from exception_boundary.shared.errors.exceptions import (
    ApiException,
    BadRequestError,
    ForbiddenError,
    MethodNotAllowedError,
    RateLimitedError,
    RouteNotFoundError,
    UnauthenticatedError,
    ValidationFailedError,
)

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_405 = 405
HTTP_422 = 422
HTTP_429 = 429
HTTP_500 = 500


def _boundary(request: Request) -> ErrorBoundary:
    return request.app.state.error_boundary


def validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce pydantic errors to client-safe field/message/type triples."""
    return [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


def platform_error_for(request: Request, exc: StarletteHTTPException) -> BaseException:
    """Map a framework HTTPException onto a platform exception."""
    status = exc.status_code
    if status == HTTP_404:
        return RouteNotFoundError(request.url.path)
    if status == HTTP_405:
        return MethodNotAllowedError(request.method)
    if status == HTTP_401:
        return UnauthenticatedError()
    if status == HTTP_403:
        return ForbiddenError()
    if status == HTTP_429:
        return RateLimitedError(str(exc.detail))
    if status == HTTP_422:
        return ValidationFailedError([])
    if HTTP_400 <= status < HTTP_500:
        return BadRequestError(str(exc.detail))
    # 5xx raised by framework code is an internal error like any other
    return exc


def register_error_handlers(app: FastAPI) -> None:
    """Register the boundary on semantic and framework exceptions.

    Args:
        app: The FastAPI application instance. ``app.state.error_boundary``
            must be set before the first request.
    """

    @app.exception_handler(ApiException)
    async def handle_api_exception(request: Request, exc: ApiException) -> Response:
        """Render semantic domain and platform failures."""
        return _boundary(request).render_http(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Render schema validation failures as VALIDATION_FAILED."""
        return _boundary(request).render_http(
            request, ValidationFailedError(validation_errors(exc))
        )

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limited(request: Request, exc: RateLimitExceeded) -> Response:
        """Render slowapi rate limit hits as RATE_LIMITED."""
        return _boundary(request).render_http(request, RateLimitedError(str(exc.detail)))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Render framework HTTP errors through their platform codes."""
        return _boundary(request).render_http(request, platform_error_for(request, exc))
