"""
Guard clauses for video rules.
"""

from exception_boundary.domain.video.errors import (
    MIN_THUMBNAIL_HEIGHT,
    MIN_THUMBNAIL_WIDTH,
    ThumbnailInvalidDimensionsError,
)


class VideoGuards:
    @staticmethod
    def thumbnail_is_large_enough(width: int, height: int) -> None:
        """Raise unless the thumbnail is at least 640x360."""
        if width < MIN_THUMBNAIL_WIDTH or height < MIN_THUMBNAIL_HEIGHT:
            raise ThumbnailInvalidDimensionsError(width, height)
