"""Grid geometry for tile picking.

This module converts between the three coordinate spaces used by the
tiler: image pixels, displayed (scaled) pixels and tile indices.
Everything here is a pure function of its arguments.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True, order=True)
class TileCoordinate:
    """Zero-based (column, row) address of a single grid cell."""

    column: int
    row: int

    def sort_key(self) -> tuple[int, int]:
        """Row-major ordering key."""
        return (self.row, self.column)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixels."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class GridConfig:
    """Tile grid laid over an image.

    Offsets are in image pixels and may be negative. Tile sizes must be
    positive; that is a precondition and is not checked here.
    """

    tile_width: int
    tile_height: int
    offset_x: int
    offset_y: int
    image_width: int
    image_height: int

    @property
    def columns(self) -> int:
        """Number of whole tiles that fit horizontally."""
        if self.tile_width <= 0:
            return 0
        return self.image_width // self.tile_width

    @property
    def rows(self) -> int:
        """Number of whole tiles that fit vertically."""
        if self.tile_height <= 0:
            return 0
        return self.image_height // self.tile_height

    def contains(self, tile: TileCoordinate) -> bool:
        """Check whether a tile lies inside the drawn grid."""
        return 0 <= tile.column < self.columns and 0 <= tile.row < self.rows

    def tiles(self) -> Iterator[TileCoordinate]:
        """Iterate every grid cell in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield TileCoordinate(column, row)


@dataclass(frozen=True)
class DisplayTransform:
    """Uniform scale that fits an image into its on-screen container."""

    scale: float
    image_width: int
    image_height: int

    @staticmethod
    def fit(
        image_width: int,
        image_height: int,
        container_width: float,
        container_height: float,
    ) -> "DisplayTransform":
        """Create the transform that fits the image inside the container.

        Args:
            image_width: Image width in pixels
            image_height: Image height in pixels
            container_width: Available width on screen
            container_height: Available height on screen

        Returns:
            DisplayTransform with ``scale = min(cw / iw, ch / ih)``.
            An empty image keeps a scale of 1.0.
        """
        if image_width <= 0 or image_height <= 0:
            return DisplayTransform(1.0, image_width, image_height)
        scale = min(container_width / image_width, container_height / image_height)
        return DisplayTransform(scale, image_width, image_height)

    @property
    def displayed_width(self) -> float:
        return self.image_width * self.scale

    @property
    def displayed_height(self) -> float:
        return self.image_height * self.scale

    def to_display(self, rect: Rect) -> Rect:
        """Map an image-space rectangle to screen space (origin at canvas corner)."""
        return Rect(
            rect.x * self.scale,
            rect.y * self.scale,
            rect.width * self.scale,
            rect.height * self.scale,
        )


def pixel_to_tile(
    pointer_x: float,
    pointer_y: float,
    origin_x: float,
    origin_y: float,
    config: GridConfig,
    transform: DisplayTransform,
) -> Optional[TileCoordinate]:
    """Resolve a pointer position to the tile underneath it.

    The pointer is made relative to the canvas origin, shifted by the grid
    offset (scaled into display space), and divided by the on-screen size
    of one tile. Cells therefore line up with ``tile_to_pixel_rect`` even
    when the image is not a whole number of tiles wide. The result is
    floored but never clamped, so a click outside the grid yields an
    out-of-range coordinate.

    Args:
        pointer_x: Pointer X in viewport coordinates
        pointer_y: Pointer Y in viewport coordinates
        origin_x: Canvas left edge in viewport coordinates
        origin_y: Canvas top edge in viewport coordinates
        config: Grid configuration
        transform: Current display transform

    Returns:
        TileCoordinate, or None when the grid has no columns or rows or
        the pointer is not a finite position.
    """
    if config.columns <= 0 or config.rows <= 0:
        return None

    cell_width = config.tile_width * transform.scale
    cell_height = config.tile_height * transform.scale
    if cell_width <= 0 or cell_height <= 0:
        return None

    rel_x = pointer_x - origin_x - config.offset_x * transform.scale
    rel_y = pointer_y - origin_y - config.offset_y * transform.scale
    if not (math.isfinite(rel_x) and math.isfinite(rel_y)):
        return None

    return TileCoordinate(
        math.floor(rel_x / cell_width),
        math.floor(rel_y / cell_height),
    )


def tile_to_pixel_rect(tile: TileCoordinate, config: GridConfig) -> Rect:
    """Image-space rectangle covered by a tile, offset applied."""
    return Rect(
        tile.column * config.tile_width + config.offset_x,
        tile.row * config.tile_height + config.offset_y,
        config.tile_width,
        config.tile_height,
    )
