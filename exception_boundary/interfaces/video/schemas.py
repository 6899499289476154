"""
Pydantic schemas for video API request/response validation.

Thumbnail dimensions are only checked for being positive here; the
minimum size is a domain rule enforced by VideoGuards.
"""

from pydantic import BaseModel, Field


class UploadThumbnailRequest(BaseModel):
    """Request schema for a thumbnail upload.

    Attributes:
        width: Thumbnail width in pixels.
        height: Thumbnail height in pixels.
    """

    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")


class UploadThumbnailResponse(BaseModel):
    success: bool = True


class VideoResponse(BaseModel):
    id: str
    title: str
    duration_seconds: int
