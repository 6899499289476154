"""
Transport policy registry and its fallback.
"""

import logging

from exception_boundary.shared.errors.codes import ErrorCode
from exception_boundary.shared.policy.outcome import (
    INTERNAL_OUTCOME,
    TransportOutcome,
    TransportPolicy,
    TransportPolicyProvider,
)

logger = logging.getLogger(__name__)


class DefaultTransportPolicy(TransportPolicyProvider):
    """Fallback provider: every code maps to an internal error.

    Reaching this provider means a code family has no registered
    provider, so each hit is logged as a warning.
    """

    def supports(self, code: ErrorCode) -> bool:
        return True

    def outcome(self, code: ErrorCode) -> TransportOutcome:
        logger.warning(
            "Unmapped error code %s (%s)", code.response_code, type(code).__name__
        )
        return INTERNAL_OUTCOME


class TransportPolicyRegistry(TransportPolicy):
    """Consults providers in order; the first that supports a code wins.

    Args:
        providers: Providers in priority order.
        fallback: Provider used when none of ``providers`` supports a code.
    """

    def __init__(
        self,
        providers: list[TransportPolicyProvider],
        fallback: TransportPolicyProvider | None = None,
    ) -> None:
        self._providers = list(providers)
        self._fallback = fallback or DefaultTransportPolicy()

    def outcome(self, code: ErrorCode) -> TransportOutcome:
        for provider in self._providers:
            if provider.supports(code):
                return provider.outcome(code)
        return self._fallback.outcome(code)
