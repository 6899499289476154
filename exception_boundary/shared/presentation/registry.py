"""
Presenter registry: picks the presenter for a transport or request.
"""

from starlette.requests import Request

from exception_boundary.shared.presentation.base import ErrorPresenter, Transport
from exception_boundary.shared.presentation.cli import CliErrorPresenter
from exception_boundary.shared.presentation.rpc import GrpcErrorPresenter
from exception_boundary.shared.presentation.http import (
    HtmlErrorPresenter,
    HttpErrorPresenter,
)


class ErrorPresenterRegistry:
    """Holds one presenter per transport.

    Args:
        http: JSON presenter.
        html: HTML presenter.
        cli: Console presenter.
        grpc: gRPC presenter.
        default_http_transport: Used when a request states no preference.
    """

    def __init__(
        self,
        http: HttpErrorPresenter,
        html: HtmlErrorPresenter,
        cli: CliErrorPresenter,
        grpc: GrpcErrorPresenter,
        default_http_transport: Transport = Transport.HTTP_JSON,
    ) -> None:
        self._presenters: dict[Transport, ErrorPresenter] = {
            Transport.HTTP_JSON: http,
            Transport.HTTP_HTML: html,
            Transport.CLI: cli,
            Transport.GRPC: grpc,
        }
        if default_http_transport not in (Transport.HTTP_JSON, Transport.HTTP_HTML):
            raise ValueError(
                f"default_http_transport must be an HTTP transport, got {default_http_transport.value}"
            )
        self._default_http_transport = default_http_transport

    def get(self, transport: Transport) -> ErrorPresenter:
        """Return the presenter registered for ``transport``."""
        return self._presenters[transport]

    def http_transport_for(self, request: Request) -> Transport:
        """Pick JSON or HTML by inspecting the request headers."""
        accept = request.headers.get("accept", "").lower()
        if "application/json" in accept or "+json" in accept:
            return Transport.HTTP_JSON
        if "text/html" in accept:
            return Transport.HTTP_HTML
        if request.headers.get("x-requested-with", "").lower() == "xmlhttprequest":
            return Transport.HTTP_JSON
        return self._default_http_transport

    def resolve_for_http(self, request: Request) -> ErrorPresenter:
        """Resolve the HTTP presenter (JSON or HTML) for ``request``."""
        return self.get(self.http_transport_for(request))
