"""
Transport outcomes for user error codes.
"""

import grpc

from exception_boundary.domain.user.codes import UserErrorCode
from exception_boundary.shared.errors.codes import ErrorCode
from exception_boundary.shared.policy.outcome import (
    EXIT_CONFLICT,
    EXIT_NOT_FOUND,
    INTERNAL_OUTCOME,
    TransportOutcome,
    TransportPolicyProvider,
)

_OUTCOMES = {
    UserErrorCode.USER_NOT_FOUND: TransportOutcome(
        404, EXIT_NOT_FOUND, grpc.StatusCode.NOT_FOUND
    ),
    UserErrorCode.EMAIL_ALREADY_TAKEN: TransportOutcome(
        409, EXIT_CONFLICT, grpc.StatusCode.ALREADY_EXISTS
    ),
}


class UserTransportPolicyProvider(TransportPolicyProvider):
    def supports(self, code: ErrorCode) -> bool:
        return isinstance(code, UserErrorCode)

    def outcome(self, code: ErrorCode) -> TransportOutcome:
        return _OUTCOMES.get(code, INTERNAL_OUTCOME)
