"""
Correlation id middleware.

Assigns every request a correlation id (taken from the caller when
supplied) before any handler runs, and echoes it on the response so
clients can quote it when reporting a failure.

It is also the catch-all for unexpected exceptions: anything the
registered exception handlers did not render is handed to the error
boundary here, inside the application, so it never reaches the server.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from exception_boundary.shared.errors import correlation


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Stores the id on ``request.state.correlation_id``."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = correlation.from_headers(request.headers)
        request.state.correlation_id = correlation_id
        try:
            response = await call_next(request)
        except Exception as e:
            response = request.app.state.error_boundary.render_http(request, e)
        response.headers[correlation.RESPONSE_HEADER] = correlation_id
        return response
