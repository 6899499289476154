"""
Tests for the transport policy registry and its providers.
"""

import logging
from unittest.mock import MagicMock

import grpc
import pytest

from exception_boundary.domain.user.codes import UserErrorCode
from exception_boundary.domain.user.policy import UserTransportPolicyProvider
from exception_boundary.domain.video.codes import VideoErrorCode
from exception_boundary.domain.video.policy import VideoTransportPolicyProvider
from exception_boundary.interfaces.dependencies import build_transport_policy
from exception_boundary.shared.errors.codes import ErrorCode, PlatformErrorCode
from exception_boundary.shared.policy.outcome import TransportOutcome, TransportPolicyProvider
from exception_boundary.shared.policy.platform_provider import PlatformTransportPolicyProvider
from exception_boundary.shared.policy.registry import (
    DefaultTransportPolicy,
    TransportPolicyRegistry,
)


class BillingErrorCode(ErrorCode):
    CARD_DECLINED = "BILLING_CARD_DECLINED"

    @property
    def translation_key(self) -> str:
        return "errors.billing.card_declined"


EXPECTED = {
    PlatformErrorCode.INTERNAL_SERVER_ERROR: (500, 1, grpc.StatusCode.INTERNAL),
    PlatformErrorCode.UNAUTHENTICATED: (401, 5, grpc.StatusCode.UNAUTHENTICATED),
    PlatformErrorCode.FORBIDDEN: (403, 5, grpc.StatusCode.PERMISSION_DENIED),
    PlatformErrorCode.VALIDATION_FAILED: (422, 2, grpc.StatusCode.INVALID_ARGUMENT),
    PlatformErrorCode.NOT_FOUND: (404, 3, grpc.StatusCode.NOT_FOUND),
    PlatformErrorCode.BAD_REQUEST: (400, 2, grpc.StatusCode.INVALID_ARGUMENT),
    PlatformErrorCode.METHOD_NOT_ALLOWED: (405, 2, grpc.StatusCode.UNIMPLEMENTED),
    PlatformErrorCode.RATE_LIMITED: (429, 6, grpc.StatusCode.RESOURCE_EXHAUSTED),
    UserErrorCode.USER_NOT_FOUND: (404, 3, grpc.StatusCode.NOT_FOUND),
    UserErrorCode.EMAIL_ALREADY_TAKEN: (409, 4, grpc.StatusCode.ALREADY_EXISTS),
    VideoErrorCode.THUMBNAIL_INVALID_DIMENSIONS: (422, 2, grpc.StatusCode.INVALID_ARGUMENT),
    VideoErrorCode.VIDEO_NOT_FOUND: (404, 3, grpc.StatusCode.NOT_FOUND),
}


class TestOutcomeTable:
    @pytest.mark.parametrize("code,expected", list(EXPECTED.items()))
    def test_outcome(self, code: ErrorCode, expected: tuple) -> None:
        policy = build_transport_policy()
        assert policy.outcome(code) == TransportOutcome(*expected)

    def test_convenience_accessors(self) -> None:
        policy = build_transport_policy()
        code = UserErrorCode.EMAIL_ALREADY_TAKEN
        assert policy.http_status(code) == 409
        assert policy.cli_exit_code(code) == 4
        assert policy.grpc_status(code) is grpc.StatusCode.ALREADY_EXISTS


class TestRegistry:
    def _registry(self, fallback: TransportPolicyProvider) -> TransportPolicyRegistry:
        return TransportPolicyRegistry(
            providers=[
                PlatformTransportPolicyProvider(),
                UserTransportPolicyProvider(),
                VideoTransportPolicyProvider(),
            ],
            fallback=fallback,
        )

    def test_registered_families_never_reach_fallback(self) -> None:
        fallback = MagicMock(spec=TransportPolicyProvider)
        registry = self._registry(fallback)
        for code in EXPECTED:
            registry.outcome(code)
        fallback.outcome.assert_not_called()

    def test_first_supporting_provider_wins(self) -> None:
        first = MagicMock(spec=TransportPolicyProvider)
        first.supports.return_value = True
        first.outcome.return_value = TransportOutcome(418, 9, grpc.StatusCode.ABORTED)
        registry = TransportPolicyRegistry([first, UserTransportPolicyProvider()])

        outcome = registry.outcome(UserErrorCode.USER_NOT_FOUND)

        assert outcome.http_status == 418
        first.outcome.assert_called_once_with(UserErrorCode.USER_NOT_FOUND)

    def test_unmapped_family_falls_back_to_internal(self, caplog) -> None:
        registry = self._registry(DefaultTransportPolicy())

        with caplog.at_level(logging.WARNING, logger="exception_boundary.shared.policy.registry"):
            outcome = registry.outcome(BillingErrorCode.CARD_DECLINED)

        assert outcome == TransportOutcome(500, 1, grpc.StatusCode.INTERNAL)
        assert "Unmapped error code BILLING_CARD_DECLINED" in caplog.text

    def test_default_fallback_is_used_when_none_given(self) -> None:
        registry = TransportPolicyRegistry([])
        assert registry.http_status(UserErrorCode.USER_NOT_FOUND) == 500
        assert registry.cli_exit_code(UserErrorCode.USER_NOT_FOUND) == 1
        assert registry.grpc_status(UserErrorCode.USER_NOT_FOUND) is grpc.StatusCode.INTERNAL


class TestProviders:
    def test_providers_claim_only_their_family(self) -> None:
        assert UserTransportPolicyProvider().supports(UserErrorCode.USER_NOT_FOUND)
        assert not UserTransportPolicyProvider().supports(VideoErrorCode.VIDEO_NOT_FOUND)
        assert VideoTransportPolicyProvider().supports(VideoErrorCode.VIDEO_NOT_FOUND)
        assert not PlatformTransportPolicyProvider().supports(BillingErrorCode.CARD_DECLINED)
