"""
Use case: Fetch a video by id.

Input: GetVideoQuery (video_id)
Output: VideoResult
Side effects: None.
Failure cases: VideoNotFoundError.
"""

from exception_boundary.application.video.dtos import GetVideoQuery, VideoResult
from exception_boundary.domain.video.errors import VideoNotFoundError
from exception_boundary.domain.video.ports import VideoRepository


class GetVideoUseCase:
    def __init__(self, video_repo: VideoRepository) -> None:
        self._video_repo = video_repo

    def execute(self, query: GetVideoQuery) -> VideoResult:
        """Return the video or raise VideoNotFoundError."""
        video = self._video_repo.get(query.video_id)
        if video is None:
            raise VideoNotFoundError(query.video_id)
        return VideoResult(
            id=video.id, title=video.title, duration_seconds=video.duration_seconds
        )
