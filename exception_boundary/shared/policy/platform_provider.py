"""
Transport outcomes for platform error codes.
"""

import grpc

from exception_boundary.shared.errors.codes import ErrorCode, PlatformErrorCode
from exception_boundary.shared.policy.outcome import (
    EXIT_AUTH,
    EXIT_INVALID_INPUT,
    EXIT_NOT_FOUND,
    EXIT_RATE_LIMITED,
    INTERNAL_OUTCOME,
    TransportOutcome,
    TransportPolicyProvider,
)

_OUTCOMES = {
    PlatformErrorCode.INTERNAL_SERVER_ERROR: INTERNAL_OUTCOME,
    PlatformErrorCode.UNAUTHENTICATED: TransportOutcome(
        401, EXIT_AUTH, grpc.StatusCode.UNAUTHENTICATED
    ),
    PlatformErrorCode.FORBIDDEN: TransportOutcome(
        403, EXIT_AUTH, grpc.StatusCode.PERMISSION_DENIED
    ),
    PlatformErrorCode.VALIDATION_FAILED: TransportOutcome(
        422, EXIT_INVALID_INPUT, grpc.StatusCode.INVALID_ARGUMENT
    ),
    PlatformErrorCode.NOT_FOUND: TransportOutcome(
        404, EXIT_NOT_FOUND, grpc.StatusCode.NOT_FOUND
    ),
    PlatformErrorCode.BAD_REQUEST: TransportOutcome(
        400, EXIT_INVALID_INPUT, grpc.StatusCode.INVALID_ARGUMENT
    ),
    PlatformErrorCode.METHOD_NOT_ALLOWED: TransportOutcome(
        405, EXIT_INVALID_INPUT, grpc.StatusCode.UNIMPLEMENTED
    ),
    PlatformErrorCode.RATE_LIMITED: TransportOutcome(
        429, EXIT_RATE_LIMITED, grpc.StatusCode.RESOURCE_EXHAUSTED
    ),
}


class PlatformTransportPolicyProvider(TransportPolicyProvider):
    """Owns every PlatformErrorCode."""

    def supports(self, code: ErrorCode) -> bool:
        return isinstance(code, PlatformErrorCode)

    def outcome(self, code: ErrorCode) -> TransportOutcome:
        return _OUTCOMES.get(code, INTERNAL_OUTCOME)
