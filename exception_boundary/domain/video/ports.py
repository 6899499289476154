"""
Port interfaces (ABCs) for the video bounded context.
"""

from abc import ABC, abstractmethod

from exception_boundary.domain.video.entities import Video


class VideoRepository(ABC):
    """Port for reading videos."""

    @abstractmethod
    def get(self, video_id: str) -> Video | None:
        """Return the video with ``video_id``, or None."""
        raise NotImplementedError
