"""Grid layout helpers"""

from frinkiac.layout.grid import (
    AspectRatio,
    EdgeInsets,
    GridConstraint,
    ItemSize,
    RatioMode,
    allowable_width,
    layout_grid,
    size,
)

__all__ = [
    "AspectRatio",
    "EdgeInsets",
    "GridConstraint",
    "ItemSize",
    "RatioMode",
    "allowable_width",
    "layout_grid",
    "size",
]
