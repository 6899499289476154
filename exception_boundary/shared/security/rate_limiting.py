"""
Rate limiting configuration.

Uses slowapi to enforce per-endpoint rate limits. Limit hits raise
RateLimitExceeded, which the error handlers render as RATE_LIMITED
like any other failure.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from exception_boundary.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
)
