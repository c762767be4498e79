"""Pydantic models for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from frinkiac.layout.grid import ItemSize
from frinkiac.models.frinkiac import Frame


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class DetailedHealthResponse(BaseModel):
    """Detailed health check response with dependency status."""

    status: str = Field(..., description="Overall health status: healthy or unhealthy")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current server timestamp")
    checks: dict[str, str] = Field(..., description="Individual health check results")


class WrapResponse(BaseModel):
    """Wrapped caption text."""

    lines: list[str]
    text: str = Field(..., description="Lines joined with newlines")


class MemeLinkResponse(BaseModel):
    """Meme link for a frame and free-form caption text."""

    frame: Frame
    caption: str
    meme_link: str


class FrameCell(BaseModel):
    """A frame placed in the grid with its computed cell size."""

    frame: Frame
    size: ItemSize
