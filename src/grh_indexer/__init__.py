"""
grh-indexer: tile picker for graphic sheets.

Overlays a tile grid on an image, lets the user click tiles to select them
and exports the selection as ``Grh`` graphic and animation entries.
"""

__version__ = "0.1.0"
__author__ = "grh-indexer Contributors"

from .tiling import (
    TileCoordinate,
    GridConfig,
    DisplayTransform,
    ExportConfig,
    TilingSession,
    compile_export,
    pixel_to_tile,
    tile_to_pixel_rect,
)

__all__ = [
    "TileCoordinate",
    "GridConfig",
    "DisplayTransform",
    "ExportConfig",
    "TilingSession",
    "compile_export",
    "pixel_to_tile",
    "tile_to_pixel_rect",
]
