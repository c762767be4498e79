"""Grid cell sizing for frame image collections.

This module is intentionally UI-framework agnostic: it takes plain numbers
for the container geometry and an optional source image size, and returns
the width and height a cell should occupy.

Sizing happens in two explicit passes. The cell is first fitted to the row
width, then clamped so it never exceeds the visible height. Height wins the
tie: a height-clamped cell is narrower than its row slot.
"""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from frinkiac.exceptions import DivisionByZeroError, InvalidArgumentError


class RatioMode(str, Enum):
    """Policy for the aspect ratio of grid cells.

    - ``square``: every cell has equal width and height; meme text may be clipped.
    - ``preserve_aspect``: cells are scaled down from the source image size.
    """

    SQUARE = "square"
    PRESERVE_ASPECT = "preserve_aspect"


class EdgeInsets(BaseModel):
    """Padding around the grid content."""

    model_config = ConfigDict(frozen=True)

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


class AspectRatio(BaseModel):
    """Source image dimensions, used only as a width/height ratio."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class ItemSize(BaseModel):
    """Computed cell size."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float

    def scaled(self, factor: float) -> "ItemSize":
        return ItemSize(width=self.width * factor, height=self.height * factor)


class GridConstraint(BaseModel):
    """Everything needed to size one grid cell."""

    model_config = ConfigDict(frozen=True)

    container_width: float
    container_height: float = 0.0
    items_per_row: float = Field(default=3, description="Cells per row; must be > 0")
    insets: EdgeInsets = Field(default_factory=EdgeInsets)
    source_aspect_ratio: AspectRatio | None = None
    ratio_mode: RatioMode = RatioMode.SQUARE
    item_spacing: float = 0.0


def allowable_width(
    container_width: float,
    items_per_row: float,
    insets: EdgeInsets | None = None,
    item_spacing: float = 0.0,
) -> float:
    """Width available to one cell in a row.

    Args:
        container_width: Full width of the grid container
        items_per_row: Number of cells per row
        insets: Container insets; only left/right are used here
        item_spacing: Gap between adjacent cells in a row

    Returns:
        Per-cell width after removing horizontal insets and gaps

    Raises:
        InvalidArgumentError: If items_per_row is not positive
    """
    if items_per_row <= 0:
        raise InvalidArgumentError(
            "items_per_row must be > 0",
            details={"items_per_row": items_per_row},
        )
    insets = insets or EdgeInsets()
    usable = container_width - insets.left - insets.right - item_spacing * (items_per_row - 1)
    return usable / items_per_row


def fit_to_row_width(width: float, aspect_ratio: AspectRatio) -> ItemSize:
    """Scale the source size so its width equals ``width``."""
    if aspect_ratio.width == 0:
        raise DivisionByZeroError(
            "source aspect ratio width must be non-zero",
            details={"aspect_width": aspect_ratio.width, "aspect_height": aspect_ratio.height},
        )
    y_scale = width / aspect_ratio.width
    return ItemSize(width=width, height=aspect_ratio.height * y_scale)


def clamp_to_available_height(item_size: ItemSize, available_height: float) -> ItemSize:
    """Uniformly shrink ``item_size`` if it is taller than ``available_height``."""
    if item_size.height == 0:
        raise DivisionByZeroError(
            "cannot clamp an item with zero height",
            details={"width": item_size.width, "available_height": available_height},
        )
    x_scale = available_height / item_size.height
    if x_scale < 1.0:
        return item_size.scaled(x_scale)
    return item_size


def size(constraint: GridConstraint) -> ItemSize:
    """Compute the cell size for ``constraint``.

    Square mode, or a missing source aspect ratio, yields a square cell of
    the allowable width. Otherwise the aspect ratio is preserved and the
    cell is clamped to the container height minus top and bottom insets.

    Raises:
        InvalidArgumentError: If items_per_row is not positive
        DivisionByZeroError: If a scale factor has a zero denominator
    """
    width = allowable_width(
        constraint.container_width,
        constraint.items_per_row,
        constraint.insets,
        constraint.item_spacing,
    )

    aspect_ratio = constraint.source_aspect_ratio
    if constraint.ratio_mode == RatioMode.SQUARE or aspect_ratio is None:
        return ItemSize(width=width, height=width)

    item_size = fit_to_row_width(width, aspect_ratio)

    available_height = constraint.container_height - constraint.insets.top - constraint.insets.bottom
    return clamp_to_available_height(item_size, available_height)


def layout_grid(
    *,
    container_width: float,
    container_height: float,
    items: Iterable[AspectRatio | None],
    items_per_row: float = 3,
    insets: EdgeInsets | None = None,
    ratio_mode: RatioMode = RatioMode.SQUARE,
    item_spacing: float = 0.0,
) -> list[ItemSize]:
    """Size every cell of a grid, one entry per item in order.

    Each item supplies its source aspect ratio, or None when the image
    size is not known yet.
    """
    insets = insets or EdgeInsets()
    return [
        size(
            GridConstraint(
                container_width=container_width,
                container_height=container_height,
                items_per_row=items_per_row,
                insets=insets,
                source_aspect_ratio=aspect_ratio,
                ratio_mode=ratio_mode,
                item_spacing=item_spacing,
            )
        )
        for aspect_ratio in items
    ]
