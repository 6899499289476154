"""
Data Transfer Objects for the video application layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadThumbnailCommand:
    """Input DTO for a thumbnail upload.

    Attributes:
        width: Thumbnail width in pixels.
        height: Thumbnail height in pixels.
    """

    width: int
    height: int


@dataclass(frozen=True)
class GetVideoQuery:
    video_id: str


@dataclass(frozen=True)
class VideoResult:
    id: str
    title: str
    duration_seconds: int
