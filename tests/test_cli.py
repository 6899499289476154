"""
Tests for the console entry point and its exit codes.
"""

import io
import json
import logging
import sys
from unittest.mock import MagicMock

import pytest

from exception_boundary import cli
from exception_boundary.core.config import settings
from exception_boundary.domain.user.errors import UserNotFoundError
from exception_boundary.shared.errors.exceptions import ForbiddenError
from exception_boundary.shared.logging import configure_logging


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch) -> list[dict]:
    # basicConfig(force=True) would bind to capsys' replaced streams
    calls: list[dict] = []
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: calls.append(kwargs))
    return calls


class TestCheckThumbnail:
    def test_too_small_exits_with_invalid_input(self, capsys) -> None:
        exit_code = cli.main(["check-thumbnail", "--width", "320", "--height", "180"])

        captured = capsys.readouterr()
        assert exit_code == 2
        assert captured.out == ""
        lines = captured.err.splitlines()
        assert lines[0] == (
            "VIDEO_THUMBNAIL_INVALID_DIMENSIONS: "
            "Thumbnail must be at least 640x360 pixels, got 320x180."
        )
        assert lines[1].startswith("correlation_id: ")
        assert json.loads(lines[2]) == {"meta": {"width": 320, "height": 180}}

    def test_valid_thumbnail(self, capsys) -> None:
        exit_code = cli.main(["check-thumbnail", "--width", "1920", "--height", "1080"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == {"success": True}


class TestLookups:
    def test_missing_user_exits_with_not_found(self, capsys) -> None:
        exit_code = cli.main(["show-user", "--id", "u-404"])

        assert exit_code == 3
        assert capsys.readouterr().err.startswith("USER_NOT_FOUND: ")

    def test_existing_video(self, capsys) -> None:
        exit_code = cli.main(["show-video", "--id", "v-1"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["title"] == "Getting started"

    def test_taken_email_exits_with_conflict(self, capsys) -> None:
        assert cli.main(["register-user", "--email", "ada@example.com"]) == 4
        assert "USER_EMAIL_ALREADY_TAKEN" in capsys.readouterr().err


class TestEnvironment:
    def test_correlation_id_from_environment(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("X_REQUEST_ID", "nightly-42")

        cli.main(["show-user", "--id", "u-404"])

        assert "correlation_id: nightly-42" in capsys.readouterr().err

    def test_locale_from_lang(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("LANG", "es_ES.UTF-8")

        cli.main(["show-video", "--id", "v-404"])

        assert capsys.readouterr().err.startswith("VIDEO_NOT_FOUND: No se encontró el vídeo.")


class TestUnexpectedFailure:
    def test_internal_error_exit_code(self, capsys, monkeypatch) -> None:
        use_case = MagicMock()
        use_case.execute.side_effect = ConnectionError("replica-3 unreachable")
        monkeypatch.setattr(cli, "get_user_use_case", lambda: use_case)

        exit_code = cli.main(["show-user", "--id", "u-1"])

        err = capsys.readouterr().err
        assert exit_code == 1
        assert err.startswith("INTERNAL_SERVER_ERROR: ")
        assert "replica-3" not in err


class TestConsoleLogging:
    def test_logs_go_to_stderr_at_cli_level(self, logging_calls, capsys) -> None:
        cli.main(["show-user", "--id", "u-404"])

        assert logging_calls == [{"level": "WARNING", "stream": sys.stderr}]
        assert settings.cli_log_level == "WARNING"

    def test_expected_failures_are_not_echoed(self, boundary) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        log_stream = io.StringIO()
        try:
            configure_logging(level=settings.cli_log_level, stream=log_stream)

            boundary.render_cli(UserNotFoundError("u-404"), stream=io.StringIO(), environ={})
            assert log_stream.getvalue() == ""

            boundary.render_cli(ForbiddenError(), stream=io.StringIO(), environ={})
            assert "FORBIDDEN" in log_stream.getvalue()
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)
