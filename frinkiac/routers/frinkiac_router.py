"""Frinkiac API routes: frame search, captions, random quotes and meme links."""

import httpx
from fastapi import APIRouter, Depends, Query, Request

from frinkiac.config import Settings, get_settings
from frinkiac.core.middleware import limiter
from frinkiac.dependencies import get_http_client
from frinkiac.links import meme_link
from frinkiac.models import Caption, Frame, MemeLinkResponse
from frinkiac.services import frinkiac_service
from frinkiac.text.line_wrapper import line_split

router = APIRouter()


@router.get(
    "/search",
    response_model=list[Frame],
    summary="Search frames by quote",
    responses={502: {"description": "Frinkiac API error"}},
)
@limiter.limit("60/minute")
async def search(
    request: Request,
    q: str = Query(..., min_length=1, description="Quote to search for"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Search for frames whose subtitles contain the quote."""
    return await frinkiac_service.search(client, q, settings)


@router.get("/caption", response_model=Caption, summary="Get the caption for a frame")
@limiter.limit("60/minute")
async def caption(
    request: Request,
    e: str = Query(..., min_length=1, description="Episode key, e.g. S07E21"),
    t: int = Query(..., ge=0, description="Frame timestamp in milliseconds"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Fetch the episode, subtitles and nearby frames for a frame."""
    return await frinkiac_service.get_caption(client, Frame(episode=e, timestamp=t), settings)


@router.get("/random", response_model=Caption, summary="Get a random caption")
@limiter.limit("30/minute")
async def random_caption(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Fetch a random caption."""
    return await frinkiac_service.get_random(client, settings)


@router.get("/meme-link", response_model=MemeLinkResponse, summary="Build a meme link for custom text")
async def build_meme_link(
    e: str = Query(..., min_length=1, description="Episode key"),
    t: int = Query(..., ge=0, description="Frame timestamp in milliseconds"),
    text: str = Query(default="", description="Caption text, wrapped before encoding"),
    settings: Settings = Depends(get_settings),
):
    """Wrap the text and return the meme image link for the frame.

    No request is made to Frinkiac; the link is built locally.
    """
    frame = Frame(episode=e, timestamp=t)
    wrapped = line_split(text, settings.max_line_length)
    return MemeLinkResponse(frame=frame, caption=wrapped, meme_link=meme_link(frame, wrapped, settings))
