"""Page/view routes for serving HTML pages and tile fragments."""

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from frinkiac.config import Settings, get_settings
from frinkiac.dependencies import get_http_client
from frinkiac.layout.grid import RatioMode
from frinkiac.models.frinkiac import Frame
from frinkiac.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, settings: Settings = Depends(get_settings)):
    """Render main search page."""
    return TemplateRenderer.render_index(request, settings)


@router.get("/tiles/frames", response_class=HTMLResponse)
async def frames_tile(
    request: Request,
    q: str = Query(default=""),
    container_width: float = Query(default=960, gt=0),
    container_height: float = Query(default=720, gt=0),
    ratio: RatioMode | None = Query(default=None),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Render the frame grid fragment."""
    return await TemplateRenderer.render_frames_tile(
        request, client, settings, q, container_width, container_height, ratio
    )


@router.get("/tiles/caption", response_class=HTMLResponse)
async def caption_tile(
    request: Request,
    e: str | None = Query(default=None),
    t: int | None = Query(default=None, ge=0),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Render a meme for the selected frame, or a random one."""
    frame = Frame(episode=e, timestamp=t) if e and t is not None else None
    return await TemplateRenderer.render_caption_tile(request, client, settings, frame)
