"""Tiling session: selection and export state for one loaded image.

The session owns every input the grid overlay depends on (image size, tile
size, offsets, export parameters, container size) together with the current
selection. Setters record which inputs changed and notify subscribers once
per call, so views can recompute geometry and redraw explicitly.
"""

import logging
from typing import Callable, Hashable, List, Optional

from .export import ExportConfig, ExportRecord, build_records, compile_export
from .geometry import DisplayTransform, GridConfig, TileCoordinate, pixel_to_tile
from .selection import TileSelection

# Names of the inputs reported to subscribers
IMAGE = "image"
TILE_SIZE = "tile_size"
OFFSET = "offset"
EXPORT = "export"
CONTAINER = "container"
SELECTION = "selection"

ChangeListener = Callable[[frozenset[str]], None]


class TilingSession:
    """Selection and export engine for one image and grid configuration."""

    def __init__(
        self,
        tile_width: int = 32,
        tile_height: int = 32,
        offset_x: int = 0,
        offset_y: int = 0,
        export_config: Optional[ExportConfig] = None,
    ) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.image_width = 0
        self.image_height = 0
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.export_config = export_config or ExportConfig()
        self.container_width = 0.0
        self.container_height = 0.0

        self.selection = TileSelection()
        self._listeners: List[ChangeListener] = []

    # === CHANGE NOTIFICATION ===

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callback receiving the names of changed inputs."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, changed: set[str]) -> None:
        if not changed:
            return
        frozen = frozenset(changed)
        for listener in list(self._listeners):
            listener(frozen)

    # === DERIVED STATE ===

    @property
    def has_image(self) -> bool:
        return self.image_width > 0 and self.image_height > 0

    @property
    def grid(self) -> GridConfig:
        """Grid configuration for the current inputs."""
        return GridConfig(
            tile_width=self.tile_width,
            tile_height=self.tile_height,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            image_width=self.image_width,
            image_height=self.image_height,
        )

    @property
    def transform(self) -> DisplayTransform:
        """Display transform fitting the image into the container."""
        return DisplayTransform.fit(
            self.image_width,
            self.image_height,
            self.container_width,
            self.container_height,
        )

    # === INPUTS ===

    def set_image(self, identity: Hashable, width: int, height: int) -> None:
        """Switch to a newly loaded image. Always clears the selection."""
        self.image_width = width
        self.image_height = height
        self.selection.clear()
        self.logger.info(f"Image loaded: {identity} ({width}x{height})")
        self._notify({IMAGE, SELECTION})

    def set_tile_size(self, tile_width: int, tile_height: int) -> None:
        """Change tile dimensions. Clears the selection if they differ."""
        if (tile_width, tile_height) == (self.tile_width, self.tile_height):
            return
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.selection.clear()
        self.logger.debug(f"Tile size set to {tile_width}x{tile_height}")
        self._notify({TILE_SIZE, SELECTION})

    def set_offset(self, offset_x: int, offset_y: int) -> None:
        """Move the grid. Selected tiles keep their indices."""
        if (offset_x, offset_y) == (self.offset_x, self.offset_y):
            return
        self.offset_x = offset_x
        self.offset_y = offset_y
        self._notify({OFFSET})

    def set_export_config(self, config: ExportConfig) -> None:
        if config == self.export_config:
            return
        self.export_config = config
        self._notify({EXPORT})

    def resize_container(self, width: float, height: float) -> None:
        """Update the on-screen area available for the image."""
        if (width, height) == (self.container_width, self.container_height):
            return
        self.container_width = width
        self.container_height = height
        self._notify({CONTAINER})

    # === SELECTION ===

    def toggle(self, tile: TileCoordinate) -> bool:
        """Flip selection of a tile. Returns True if it is now selected."""
        selected = self.selection.toggle(tile)
        self._notify({SELECTION})
        return selected

    def clear(self) -> None:
        """Deselect everything."""
        had_tiles = bool(self.selection)
        self.selection.clear()
        if had_tiles:
            self._notify({SELECTION})

    def click(
        self,
        pointer_x: float,
        pointer_y: float,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> Optional[TileCoordinate]:
        """Toggle the tile under a pointer click.

        Clicks that resolve outside the drawn grid are ignored.

        Returns:
            The toggled tile, or None if nothing was toggled
        """
        if not self.has_image:
            return None

        grid = self.grid
        tile = pixel_to_tile(
            pointer_x, pointer_y, origin_x, origin_y, grid, self.transform
        )
        if tile is None or not grid.contains(tile):
            self.logger.debug(
                f"Ignored click at ({pointer_x}, {pointer_y}) outside the grid"
            )
            return None

        self.toggle(tile)
        return tile

    # === EXPORT ===

    def records(self) -> List[ExportRecord]:
        """Structured export records for the current selection."""
        return build_records(
            self.selection, self.tile_width, self.tile_height, self.export_config
        )

    def compile_export(self) -> Optional[str]:
        """Export text for the current selection, or None if it is empty."""
        return compile_export(
            self.selection, self.tile_width, self.tile_height, self.export_config
        )

    def copy_to_clipboard(self) -> Optional[str]:
        """Text to place on the clipboard; None means there is nothing to copy."""
        text = self.compile_export()
        if text is None:
            self.logger.debug("Nothing selected, export skipped")
        else:
            self.logger.info(f"Exported {len(self.selection)} tiles")
        return text
