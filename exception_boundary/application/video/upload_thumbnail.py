"""
Use case: Accept a thumbnail for a video.

Input: UploadThumbnailCommand (width, height)
Output: None
Side effects: None.
Failure cases: ThumbnailInvalidDimensionsError.
"""

import logging

from exception_boundary.application.video.dtos import UploadThumbnailCommand
from exception_boundary.domain.video.guards import VideoGuards

logger = logging.getLogger(__name__)


class UploadThumbnailUseCase:
    """Validates thumbnail dimensions before accepting the upload."""

    def execute(self, command: UploadThumbnailCommand) -> None:
        VideoGuards.thumbnail_is_large_enough(command.width, command.height)
        logger.info("Accepted thumbnail %dx%d", command.width, command.height)
