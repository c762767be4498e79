"""Template rendering utilities for HTML views."""

from pathlib import Path

import httpx
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from frinkiac.config import Settings
from frinkiac.layout.grid import AspectRatio, EdgeInsets, RatioMode, layout_grid
from frinkiac.logging_config import get_logger, log_with_context
from frinkiac.models import FrameCell
from frinkiac.models.frinkiac import Frame
from frinkiac.services import frinkiac_service

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Padding applied by the grid stylesheet around the tile content
GRID_INSETS = EdgeInsets(top=8, left=8, bottom=8, right=8)
GRID_ITEM_SPACING = 8.0


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for all frame views."""

    @staticmethod
    def render_index(request: Request, settings: Settings) -> HTMLResponse:
        """Render main search page."""
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "items_per_row": settings.items_per_row,
                "ratio_mode": settings.ratio_mode.value,
            },
        )

    @staticmethod
    def frame_cells(
        frames: list[Frame],
        settings: Settings,
        container_width: float,
        container_height: float,
        ratio_mode: RatioMode,
    ) -> list[FrameCell]:
        """Pair each frame with its grid cell size.

        Every Frinkiac still shares the configured image dimensions, so one
        aspect ratio applies to the whole grid.
        """
        aspect_ratio = AspectRatio(width=settings.frame_image_width, height=settings.frame_image_height)
        sizes = layout_grid(
            container_width=container_width,
            container_height=container_height,
            items=[aspect_ratio] * len(frames),
            items_per_row=settings.items_per_row,
            insets=GRID_INSETS,
            ratio_mode=ratio_mode,
            item_spacing=GRID_ITEM_SPACING,
        )
        return [FrameCell(frame=frame, size=item_size) for frame, item_size in zip(frames, sizes, strict=True)]

    @staticmethod
    async def render_frames_tile(
        request: Request,
        client: httpx.AsyncClient,
        settings: Settings,
        query: str,
        container_width: float,
        container_height: float,
        ratio_mode: RatioMode | None = None,
    ) -> HTMLResponse:
        """Render the frame grid fragment for a search.

        Args:
            request: FastAPI request object
            client: HTTP client for API calls
            settings: Settings instance
            query: Quote to search for
            container_width: Width of the grid container in CSS pixels
            container_height: Visible height of the grid container in CSS pixels
            ratio_mode: Cell ratio policy (defaults to settings)

        Returns:
            HTMLResponse with rendered frame grid, or an error message
        """
        ratio_mode = ratio_mode or settings.ratio_mode
        try:
            frames = await frinkiac_service.search(client, query, settings) if query else []
            cells = TemplateRenderer.frame_cells(frames, settings, container_width, container_height, ratio_mode)
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Failed to render frame grid",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
                event_type="frame_grid_error",
            )
            return templates.TemplateResponse(
                request,
                "tiles/frames.html",
                {"cells": [], "query": query, "error": str(e)},
            )

        return templates.TemplateResponse(
            request,
            "tiles/frames.html",
            {
                "cells": cells,
                "query": query,
                "spacing": GRID_ITEM_SPACING,
                "insets": GRID_INSETS,
                "error": None,
            },
        )

    @staticmethod
    async def render_caption_tile(
        request: Request,
        client: httpx.AsyncClient,
        settings: Settings,
        frame: Frame | None = None,
    ) -> HTMLResponse:
        """Render a selected frame as a meme, or a random one when no frame is given."""
        try:
            if frame is None:
                caption = await frinkiac_service.get_random(client, settings)
            else:
                caption = await frinkiac_service.get_caption(client, frame, settings)
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Failed to get caption",
                error=str(e),
                error_type=type(e).__name__,
                event_type="caption_error",
            )
            return templates.TemplateResponse(request, "tiles/caption.html", {"caption": None, "error": str(e)})

        return templates.TemplateResponse(request, "tiles/caption.html", {"caption": caption, "error": None})
