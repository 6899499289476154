"""
Domain entities for the video bounded context.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Video:
    """A published video.

    Attributes:
        id: Opaque video id.
        title: Display title.
        duration_seconds: Running time.
    """

    id: str
    title: str
    duration_seconds: int
