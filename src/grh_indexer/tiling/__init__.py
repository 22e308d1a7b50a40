"""
Tile grid geometry, selection and export encoding.

This package has no GUI dependencies.
"""

from .geometry import (
    TileCoordinate,
    Rect,
    GridConfig,
    DisplayTransform,
    pixel_to_tile,
    tile_to_pixel_rect,
)
from .selection import TileSelection
from .export import (
    ExportConfig,
    GraphicRecord,
    AnimationRecord,
    ExportRecord,
    build_records,
    render_records,
    compile_export,
)
from .session import TilingSession

__all__ = [
    "TileCoordinate",
    "Rect",
    "GridConfig",
    "DisplayTransform",
    "pixel_to_tile",
    "tile_to_pixel_rect",
    "TileSelection",
    "ExportConfig",
    "GraphicRecord",
    "AnimationRecord",
    "ExportRecord",
    "build_records",
    "render_records",
    "compile_export",
    "TilingSession",
]
