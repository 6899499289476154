"""
CLI presenter: human-readable lines on stderr, policy exit code back.
"""

import json
import sys
from typing import TextIO

from exception_boundary.shared.errors.dto import BoundaryErrorDto
from exception_boundary.shared.i18n.translator import Translator
from exception_boundary.shared.policy.outcome import TransportPolicy
from exception_boundary.shared.presentation.base import ErrorPresenter


class CliErrorPresenter(ErrorPresenter):
    """Writes the error to a text stream and returns the exit code.

    Args:
        stream: Where to write. Defaults to the process stderr at call time.
    """

    def __init__(
        self,
        policy: TransportPolicy,
        translator: Translator,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(policy, translator)
        self._stream = stream

    def present(
        self,
        dto: BoundaryErrorDto,
        locale: str | None = None,
        stream: TextIO | None = None,
    ) -> int:
        out = stream or self._stream or sys.stderr
        out.write(f"{dto.response_code}: {self._message(dto, locale)}\n")
        out.write(f"correlation_id: {dto.correlation_id}\n")
        if dto.meta:
            out.write(json.dumps({"meta": dto.meta}, ensure_ascii=False, default=str) + "\n")
        out.flush()
        return self._policy.cli_exit_code(dto.code)
