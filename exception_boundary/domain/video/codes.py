"""
Error codes owned by the video context.
"""

from exception_boundary.shared.errors.codes import ErrorCode


class VideoErrorCode(ErrorCode):
    THUMBNAIL_INVALID_DIMENSIONS = "VIDEO_THUMBNAIL_INVALID_DIMENSIONS"
    VIDEO_NOT_FOUND = "VIDEO_NOT_FOUND"

    @property
    def translation_key(self) -> str:
        return _TRANSLATION_KEYS[self]


_TRANSLATION_KEYS = {
    VideoErrorCode.THUMBNAIL_INVALID_DIMENSIONS: "errors.video.thumbnail_invalid_dimensions",
    VideoErrorCode.VIDEO_NOT_FOUND: "errors.video.not_found",
}
