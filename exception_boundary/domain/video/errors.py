"""
Domain-specific errors for the video bounded context.

All errors raised from the video domain layer are defined here.
No framework imports allowed.
"""

from typing import Any

from exception_boundary.domain.video.codes import VideoErrorCode
from exception_boundary.shared.errors.exceptions import (
    CATEGORY_NOT_FOUND,
    CATEGORY_VALIDATION,
    ApiException,
)
from exception_boundary.shared.logging import LogLevel

MIN_THUMBNAIL_WIDTH = 640
MIN_THUMBNAIL_HEIGHT = 360


class ThumbnailInvalidDimensionsError(ApiException):
    """Raised when a thumbnail is smaller than the minimum size."""

    code = VideoErrorCode.THUMBNAIL_INVALID_DIMENSIONS
    log_level = LogLevel.INFO
    category = CATEGORY_VALIDATION
    expected = True

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def message_params(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "min_width": MIN_THUMBNAIL_WIDTH,
            "min_height": MIN_THUMBNAIL_HEIGHT,
        }

    def public_meta(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}


class VideoNotFoundError(ApiException):
    """Raised when no video exists for the given id."""

    code = VideoErrorCode.VIDEO_NOT_FOUND
    log_level = LogLevel.INFO
    category = CATEGORY_NOT_FOUND
    expected = True

    def __init__(self, video_id: str) -> None:
        super().__init__(f"Video not found: {video_id}")
        self.video_id = video_id

    def public_meta(self) -> dict[str, Any]:
        return {"video_id": self.video_id}
