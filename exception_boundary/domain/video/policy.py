"""
Transport outcomes for video error codes.
"""

import grpc

from exception_boundary.domain.video.codes import VideoErrorCode
from exception_boundary.shared.errors.codes import ErrorCode
from exception_boundary.shared.policy.outcome import (
    EXIT_INVALID_INPUT,
    EXIT_NOT_FOUND,
    INTERNAL_OUTCOME,
    TransportOutcome,
    TransportPolicyProvider,
)

_OUTCOMES = {
    VideoErrorCode.THUMBNAIL_INVALID_DIMENSIONS: TransportOutcome(
        422, EXIT_INVALID_INPUT, grpc.StatusCode.INVALID_ARGUMENT
    ),
    VideoErrorCode.VIDEO_NOT_FOUND: TransportOutcome(
        404, EXIT_NOT_FOUND, grpc.StatusCode.NOT_FOUND
    ),
}


class VideoTransportPolicyProvider(TransportPolicyProvider):
    def supports(self, code: ErrorCode) -> bool:
        return isinstance(code, VideoErrorCode)

    def outcome(self, code: ErrorCode) -> TransportOutcome:
        return _OUTCOMES.get(code, INTERNAL_OUTCOME)
