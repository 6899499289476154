"""
Shared fixtures.

The boundary fixture is built fresh from the packaged catalogs and
templates; the client fixture drives the real FastAPI application.
"""

import pytest
from fastapi.testclient import TestClient

from exception_boundary.interfaces.dependencies import build_error_boundary
from exception_boundary.main import app
from exception_boundary.shared.errors.boundary import ErrorBoundary
from exception_boundary.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def boundary() -> ErrorBoundary:
    return build_error_boundary()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_correlation_env(monkeypatch):
    for name in ("X_REQUEST_ID", "X_CORRELATION_ID", "TRACEPARENT", "LANG"):
        monkeypatch.delenv(name, raising=False)
