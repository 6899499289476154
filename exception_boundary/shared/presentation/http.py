"""
HTTP presenters: JSON for API clients, HTML for browsers.
"""

from pathlib import Path

from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from exception_boundary.shared.errors.dto import BoundaryErrorDto
from exception_boundary.shared.i18n.translator import Translator
from exception_boundary.shared.policy.outcome import TransportPolicy
from exception_boundary.shared.presentation.base import ErrorPresenter

HTML_TEMPLATE = "errors/generic.html"


class HttpErrorPresenter(ErrorPresenter):
    """Renders the JSON error envelope.

    Shape::

        {"success": false,
         "error": {"response_code", "log_level", "message", "meta",
                   "correlation_id"}}
    """

    def present(self, dto: BoundaryErrorDto, locale: str | None = None) -> JSONResponse:
        error = {
            "response_code": dto.response_code,
            "log_level": dto.log_level.value,
            "message": self._message(dto, locale),
            "meta": jsonable_encoder(dto.meta),
            "correlation_id": dto.correlation_id,
        }
        return JSONResponse(
            status_code=self._policy.http_status(dto.code),
            content={"success": False, "error": error},
        )


class HtmlErrorPresenter(ErrorPresenter):
    """Renders the generic Jinja2 error page."""

    def __init__(
        self,
        policy: TransportPolicy,
        translator: Translator,
        templates_path: Path,
    ) -> None:
        super().__init__(policy, translator)
        self._env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def present(self, dto: BoundaryErrorDto, locale: str | None = None) -> HTMLResponse:
        status = self._policy.http_status(dto.code)
        html = self._env.get_template(HTML_TEMPLATE).render(
            status=status,
            response_code=dto.response_code,
            message=self._message(dto, locale),
            meta=dto.meta,
            correlation_id=dto.correlation_id,
            locale=locale or self._translator.default_locale,
        )
        return HTMLResponse(content=html, status_code=status)
