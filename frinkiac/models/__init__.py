"""Frinkiac client models"""

from frinkiac.models.base_models import (
    DetailedHealthResponse,
    FrameCell,
    HealthResponse,
    MemeLinkResponse,
    WrapResponse,
)
from frinkiac.models.frinkiac import Caption, Episode, Frame, Subtitle

__all__ = [
    "Caption",
    "DetailedHealthResponse",
    "Episode",
    "Frame",
    "FrameCell",
    "HealthResponse",
    "MemeLinkResponse",
    "Subtitle",
    "WrapResponse",
]
