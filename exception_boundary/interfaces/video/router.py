"""
FastAPI router for the video bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by the centralized error boundary.
"""

from fastapi import APIRouter, Depends, Request

from exception_boundary.application.video.dtos import (
    GetVideoQuery,
    UploadThumbnailCommand,
)
from exception_boundary.application.video.get_video import GetVideoUseCase
from exception_boundary.application.video.upload_thumbnail import (
    UploadThumbnailUseCase,
)
from exception_boundary.core.config import settings
from exception_boundary.interfaces.dependencies import (
    get_upload_thumbnail_use_case,
    get_video_use_case,
)
from exception_boundary.interfaces.schemas import ErrorResponse
from exception_boundary.interfaces.video.schemas import (
    UploadThumbnailRequest,
    UploadThumbnailResponse,
    VideoResponse,
)
from exception_boundary.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/videos", tags=["videos"])


@router.post(
    "/thumbnail",
    response_model=UploadThumbnailResponse,
    responses={422: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="Upload a thumbnail",
    description="Accepts a thumbnail of at least 640x360 pixels.",
)
@limiter.limit(settings.rate_limit_heavy)
def upload_thumbnail(
    request: Request,
    body: UploadThumbnailRequest,
    use_case: UploadThumbnailUseCase = Depends(get_upload_thumbnail_use_case),
) -> UploadThumbnailResponse:
    """Validate and accept a thumbnail."""
    use_case.execute(UploadThumbnailCommand(width=body.width, height=body.height))
    return UploadThumbnailResponse()


@router.get(
    "/{video_id}",
    response_model=VideoResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a video",
)
def get_video(
    video_id: str,
    use_case: GetVideoUseCase = Depends(get_video_use_case),
) -> VideoResponse:
    """Return a video by id."""
    result = use_case.execute(GetVideoQuery(video_id=video_id))
    return VideoResponse(
        id=result.id, title=result.title, duration_seconds=result.duration_seconds
    )
