"""
CLI entry point.

Every command runs a use case; any failure is rendered by the error
boundary's CLI presenter on stderr and becomes the process exit code.

Usage:
    # Validate thumbnail dimensions
    python -m exception_boundary.cli check-thumbnail --width 640 --height 360

    # Register an account
    python -m exception_boundary.cli register-user --email ada@example.com

    # Look up a user or a video
    python -m exception_boundary.cli show-user --id u-1
    python -m exception_boundary.cli show-video --id v-1

Set X_REQUEST_ID to tag the run with an existing correlation id.
"""

import argparse
import json
import sys
from dataclasses import asdict
from typing import Sequence

from exception_boundary.application.user.dtos import GetUserQuery, RegisterUserCommand
from exception_boundary.application.video.dtos import (
    GetVideoQuery,
    UploadThumbnailCommand,
)
from exception_boundary.core.config import settings
from exception_boundary.interfaces.dependencies import (
    get_error_boundary,
    get_register_user_use_case,
    get_upload_thumbnail_use_case,
    get_user_use_case,
    get_video_use_case,
)
from exception_boundary.shared.logging import configure_logging


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, default=str, ensure_ascii=False))


def cmd_check_thumbnail(args: argparse.Namespace) -> None:
    """Validate thumbnail dimensions."""
    get_upload_thumbnail_use_case().execute(
        UploadThumbnailCommand(width=args.width, height=args.height)
    )
    _print_json({"success": True})


def cmd_register_user(args: argparse.Namespace) -> None:
    """Register a new account."""
    result = get_register_user_use_case().execute(RegisterUserCommand(email=args.email))
    _print_json(asdict(result))


def cmd_show_user(args: argparse.Namespace) -> None:
    """Print a user."""
    result = get_user_use_case().execute(GetUserQuery(user_id=args.id))
    _print_json(asdict(result))


def cmd_show_video(args: argparse.Namespace) -> None:
    """Print a video."""
    result = get_video_use_case().execute(GetVideoQuery(video_id=args.id))
    _print_json(asdict(result))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exception-boundary",
        description="Run use cases from the console.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_thumb = sub.add_parser("check-thumbnail", help="Validate thumbnail dimensions")
    p_thumb.add_argument("--width", type=int, required=True)
    p_thumb.add_argument("--height", type=int, required=True)
    p_thumb.set_defaults(func=cmd_check_thumbnail)

    p_register = sub.add_parser("register-user", help="Register an account")
    p_register.add_argument("--email", required=True)
    p_register.set_defaults(func=cmd_register_user)

    p_user = sub.add_parser("show-user", help="Show a user")
    p_user.add_argument("--id", required=True)
    p_user.set_defaults(func=cmd_show_user)

    p_video = sub.add_parser("show-video", help="Show a video")
    p_video.add_argument("--id", required=True)
    p_video.set_defaults(func=cmd_show_video)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; returns the process exit code."""
    # stdout carries command output; logs go to stderr
    configure_logging(level=settings.cli_log_level, stream=sys.stderr)
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except Exception as e:
        return get_error_boundary().render_cli(e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
