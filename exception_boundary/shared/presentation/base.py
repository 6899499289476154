"""
Presenter port and transport enumeration.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from exception_boundary.shared.errors.dto import BoundaryErrorDto
from exception_boundary.shared.i18n.translator import Translator
from exception_boundary.shared.policy.outcome import TransportPolicy


class Transport(str, Enum):
    """Delivery channels an error can be rendered to."""

    HTTP_JSON = "http_json"
    HTTP_HTML = "http_html"
    CLI = "cli"
    GRPC = "grpc"


class ErrorPresenter(ABC):
    """Renders a boundary DTO for one transport.

    Args:
        policy: Resolves the status attached to the rendered payload.
        translator: Turns the DTO's message key into text.
    """

    def __init__(self, policy: TransportPolicy, translator: Translator) -> None:
        self._policy = policy
        self._translator = translator

    @abstractmethod
    def present(self, dto: BoundaryErrorDto, locale: str | None = None) -> Any:
        """Render ``dto`` in ``locale`` (default locale when omitted)."""
        raise NotImplementedError

    def _message(self, dto: BoundaryErrorDto, locale: str | None) -> str:
        # Translation is a boundary service, not domain logic.
        return self._translator.translate(dto.message_key, dto.message_params, locale)
