"""
The error boundary.

The single place where a failure is converted, logged and rendered.
Every transport entry point (FastAPI exception handlers, the CLI, the
gRPC decorator) hands its exception here and emits what comes back.
"""

import logging
import os
from typing import Iterable, Mapping, TextIO

from starlette.requests import Request
from starlette.responses import Response

from exception_boundary.shared.errors import correlation
from exception_boundary.shared.errors.adapter import ErrorAdapter
from exception_boundary.shared.errors.dto import BoundaryErrorDto
from exception_boundary.shared.i18n.translator import Translator
from exception_boundary.shared.presentation.base import Transport
from exception_boundary.shared.presentation.registry import ErrorPresenterRegistry
from exception_boundary.shared.presentation.rpc import GrpcErrorStatus

logger = logging.getLogger(__name__)


class ErrorBoundary:
    """Converts any exception into a transport response.

    Args:
        adapter: Builds the DTO from the exception.
        presenters: Presenter per transport.
        translator: Used to negotiate the response locale.
        log: Logger that receives one record per failure.
    """

    def __init__(
        self,
        adapter: ErrorAdapter,
        presenters: ErrorPresenterRegistry,
        translator: Translator,
        log: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._presenters = presenters
        self._translator = translator
        self._log = log or logger

    @property
    def presenters(self) -> ErrorPresenterRegistry:
        return self._presenters

    def capture(self, exc: BaseException, correlation_id: str) -> BoundaryErrorDto:
        """Build the DTO for ``exc`` and log it once."""
        dto = self._adapter.to_dto(exc, correlation_id)
        self._log.log(
            dto.log_level.to_logging(),
            "%s [%s]: %s",
            dto.response_code,
            correlation_id,
            exc,
            extra={"error": dto.to_dict()},
            exc_info=None if dto.expected else exc,
        )
        return dto

    def render_http(self, request: Request, exc: BaseException) -> Response:
        """Render ``exc`` as JSON or HTML depending on the request."""
        correlation_id = correlation.for_request(request)
        dto = self.capture(exc, correlation_id)
        locale = self._translator.negotiate(request.headers.get("accept-language"))
        response = self._presenters.resolve_for_http(request).present(dto, locale)
        response.headers[correlation.RESPONSE_HEADER] = correlation_id
        return response

    def render_cli(
        self,
        exc: BaseException,
        stream: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> int:
        """Write ``exc`` to the console and return the exit code."""
        env = os.environ if environ is None else environ
        dto = self.capture(exc, correlation.from_environ(env))
        locale = self._translator.negotiate(_posix_locale(env.get("LANG")))
        return self._presenters.get(Transport.CLI).present(dto, locale, stream=stream)

    def render_grpc(
        self,
        exc: BaseException,
        metadata: Iterable[tuple[str, str | bytes]] | None = None,
    ) -> GrpcErrorStatus:
        """Render ``exc`` as a gRPC status with trailing metadata."""
        pairs = list(metadata or ())
        dto = self.capture(exc, correlation.from_grpc_metadata(pairs))
        accept_language = next(
            (v for k, v in pairs if k.lower() == "accept-language" and isinstance(v, str)),
            None,
        )
        locale = self._translator.negotiate(accept_language)
        return self._presenters.get(Transport.GRPC).present(dto, locale)


def _posix_locale(value: str | None) -> str | None:
    """``es_ES.UTF-8`` -> ``es-es``."""
    if not value:
        return None
    return value.split(".", 1)[0].replace("_", "-").lower()
