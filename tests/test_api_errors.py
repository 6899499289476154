"""
End-to-end tests for the HTTP error boundary.

Drive the real FastAPI application and assert on the JSON/HTML
envelopes clients receive.
"""

import logging
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from exception_boundary.core.config import Settings
from exception_boundary.main import create_app


class TestDomainErrors:
    def test_thumbnail_too_small(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/videos/thumbnail", json={"width": 320, "height": 180}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        error = body["error"]
        assert error["response_code"] == "VIDEO_THUMBNAIL_INVALID_DIMENSIONS"
        assert error["log_level"] == "info"
        assert error["message"] == "Thumbnail must be at least 640x360 pixels, got 320x180."
        assert error["meta"] == {"width": 320, "height": 180}
        assert error["correlation_id"] == response.headers["X-Request-ID"]

    def test_thumbnail_accepted(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/videos/thumbnail", json={"width": 1280, "height": 720}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_user_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/u-404")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["response_code"] == "USER_NOT_FOUND"
        assert error["message"] == "The user could not be found."
        assert error["meta"] == {"user_id": "u-404"}

    def test_video_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/videos/v-404")

        assert response.status_code == 404
        assert response.json()["error"]["response_code"] == "VIDEO_NOT_FOUND"

    def test_existing_resources(self, client: TestClient) -> None:
        assert client.get("/api/v1/users/u-1").json()["email"] == "ada@example.com"
        assert client.get("/api/v1/videos/v-1").json()["title"] == "Getting started"

    def test_email_already_taken(self, client: TestClient) -> None:
        response = client.post("/api/v1/users", json={"email": "Ada@Example.com"})

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["response_code"] == "USER_EMAIL_ALREADY_TAKEN"
        assert error["message"] == "The email address ada@example.com is already registered."

    def test_register_then_conflict(self, client: TestClient) -> None:
        email = f"{uuid4().hex}@example.com"

        created = client.post("/api/v1/users", json={"email": email})
        again = client.post("/api/v1/users", json={"email": email})

        assert created.status_code == 201
        assert created.json()["email"] == email
        assert again.status_code == 409


class TestPlatformErrors:
    def test_schema_validation(self, client: TestClient) -> None:
        response = client.post("/api/v1/videos/thumbnail", json={"width": 0, "height": 360})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["response_code"] == "VALIDATION_FAILED"
        assert error["message"] == "The request contains invalid data."
        fields = [e["field"] for e in error["meta"]["errors"]]
        assert fields == ["body.width"]

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get("/api/v1/nowhere")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["response_code"] == "NOT_FOUND"
        assert error["meta"] == {"path": "/api/v1/nowhere"}

    def test_method_not_allowed(self, client: TestClient) -> None:
        response = client.delete("/api/v1/health")

        assert response.status_code == 405
        error = response.json()["error"]
        assert error["response_code"] == "METHOD_NOT_ALLOWED"
        assert error["message"] == "The DELETE method is not allowed for this resource."

    def test_rate_limited(self, client: TestClient) -> None:
        payload = {"width": 1280, "height": 720}
        for _ in range(10):
            assert client.post("/api/v1/videos/thumbnail", json=payload).status_code == 200

        response = client.post("/api/v1/videos/thumbnail", json=payload)

        assert response.status_code == 429
        assert response.json()["error"]["response_code"] == "RATE_LIMITED"
        assert response.json()["error"]["log_level"] == "warning"


class TestUnexpectedErrors:
    @pytest.fixture
    def boom_client(self) -> TestClient:
        app = create_app(Settings())

        @app.get("/boom")
        def boom() -> None:
            raise RuntimeError("secret connection string")

        return TestClient(app)

    def test_internal_error_hides_details(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom", headers={"X-Request-ID": "trace-500"})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["response_code"] == "INTERNAL_SERVER_ERROR"
        assert error["log_level"] == "error"
        assert error["meta"] == {}
        assert error["correlation_id"] == "trace-500"
        assert response.headers["X-Request-ID"] == "trace-500"
        assert "secret" not in response.text

    def test_internal_error_is_logged_once_and_not_reraised(
        self, boom_client: TestClient, caplog
    ) -> None:
        # the default TestClient re-raises anything that escapes the app
        with caplog.at_level(logging.DEBUG):
            response = boom_client.get("/boom")

        assert response.status_code == 500
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert errors[0].name == "exception_boundary.shared.errors.boundary"
        assert errors[0].error["context"]["exception_class"] == "builtins.RuntimeError"


class TestNegotiation:
    def test_html_for_browsers(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/u-404", headers={"Accept": "text/html"})

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "USER_NOT_FOUND" in response.text
        assert "The user could not be found." in response.text

    def test_spanish_message(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/users/u-404", headers={"Accept-Language": "es-ES,es;q=0.9"}
        )
        assert response.json()["error"]["message"] == "No se encontró el usuario."

    def test_unsupported_language_uses_default(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/u-404", headers={"Accept-Language": "de"})
        assert response.json()["error"]["message"] == "The user could not be found."


class TestCorrelationId:
    def test_incoming_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/u-404", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["error"]["correlation_id"] == "abc-123"

    def test_id_is_generated(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        assert len(response.headers["X-Request-ID"]) == 32


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}
