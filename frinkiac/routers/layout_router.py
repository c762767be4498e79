"""Caption wrapping and grid sizing routes."""

from fastapi import APIRouter, Depends, Query

from frinkiac.config import Settings, get_settings
from frinkiac.layout.grid import GridConstraint, ItemSize, size
from frinkiac.models import WrapResponse
from frinkiac.text.line_wrapper import wrap

router = APIRouter()


@router.get("/wrap", response_model=WrapResponse, summary="Wrap caption text into meme lines")
async def wrap_text(
    text: str = Query(default="", description="Text to wrap"),
    max_line_length: int | None = Query(default=None, ge=1, description="Line width (default from settings)"),
    settings: Settings = Depends(get_settings),
):
    lines = wrap(text, max_line_length or settings.max_line_length)
    return WrapResponse(lines=lines, text="\n".join(lines))


@router.post(
    "/size",
    response_model=ItemSize,
    summary="Size a grid cell",
    responses={400: {"description": "Invalid layout input (non-positive items per row, zero dimensions)"}},
)
async def size_item(constraint: GridConstraint):
    """Compute a grid cell size.

    Square mode returns a square of the allowable row width. Preserve-aspect
    mode fits the source ratio to the row width, then shrinks it to the
    container height when needed.
    """
    return size(constraint)
