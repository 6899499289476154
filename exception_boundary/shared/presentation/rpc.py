"""
gRPC presenter.

Produces the status code, details string and trailing metadata a
servicer hands to ``context.abort``. Metadata keys are lowercase as the
gRPC wire format requires.
"""

from dataclasses import dataclass

import grpc

from exception_boundary.shared.errors.dto import BoundaryErrorDto
from exception_boundary.shared.presentation.base import ErrorPresenter


@dataclass(frozen=True)
class GrpcErrorStatus:
    """Rendered gRPC error.

    Attributes:
        code: Status code to abort with.
        details: Translated, client-safe message.
        metadata: Trailing metadata pairs.
    """

    code: grpc.StatusCode
    details: str
    metadata: tuple[tuple[str, str], ...]

    def metadata_dict(self) -> dict[str, str]:
        return dict(self.metadata)


class GrpcErrorPresenter(ErrorPresenter):
    """Renders a DTO as a GrpcErrorStatus."""

    def present(self, dto: BoundaryErrorDto, locale: str | None = None) -> GrpcErrorStatus:
        return GrpcErrorStatus(
            code=self._policy.grpc_status(dto.code),
            details=self._message(dto, locale),
            metadata=(
                ("response_code", dto.response_code),
                ("log_level", dto.log_level.value),
                ("correlation_id", dto.correlation_id),
            ),
        )
