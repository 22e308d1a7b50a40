"""
Tile grid and export settings for grh-indexer.

These hold the values of the settings form between sessions. The tile
selection itself is never stored.
"""

import logging
from typing import TYPE_CHECKING, cast

from ..tiling.export import ExportConfig, clamp_frame_delay, clamp_starting_index

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 32
MAX_TILE_SIZE = 4096


class TilerSettings:
    """Manages grid and export settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer for {key}: {value!r}, using {default}")
            return default

    def _set(self, key: str, value: int) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    @staticmethod
    def clamp_tile_size(value: int) -> int:
        return max(1, min(MAX_TILE_SIZE, int(value)))

    # === GRID ===

    @property
    def tile_width(self) -> int:
        """Tile width in pixels (1-4096)."""
        return self.clamp_tile_size(self._get_int("tiler/tile_width", DEFAULT_TILE_SIZE))

    @tile_width.setter
    def tile_width(self, value: int) -> None:
        self._set("tiler/tile_width", self.clamp_tile_size(value))

    @property
    def tile_height(self) -> int:
        """Tile height in pixels (1-4096)."""
        return self.clamp_tile_size(self._get_int("tiler/tile_height", DEFAULT_TILE_SIZE))

    @tile_height.setter
    def tile_height(self, value: int) -> None:
        self._set("tiler/tile_height", self.clamp_tile_size(value))

    @property
    def offset_x(self) -> int:
        return self._get_int("tiler/offset_x", 0)

    @offset_x.setter
    def offset_x(self, value: int) -> None:
        self._set("tiler/offset_x", int(value))

    @property
    def offset_y(self) -> int:
        return self._get_int("tiler/offset_y", 0)

    @offset_y.setter
    def offset_y(self, value: int) -> None:
        self._set("tiler/offset_y", int(value))

    def stored_tile_size(self) -> tuple[int, int]:
        """Tile size exactly as stored, before clamping."""
        return (
            self._get_int("tiler/tile_width", DEFAULT_TILE_SIZE),
            self._get_int("tiler/tile_height", DEFAULT_TILE_SIZE),
        )

    # === EXPORT ===

    @property
    def graphic_sheet_id(self) -> int:
        """Graphic sheet number written into every exported entry."""
        return max(0, self._get_int("tiler/graphic_sheet_id", 0))

    @graphic_sheet_id.setter
    def graphic_sheet_id(self, value: int) -> None:
        self._set("tiler/graphic_sheet_id", max(0, int(value)))

    @property
    def frame_delay(self) -> int:
        """Animation frame delay (1-4)."""
        return clamp_frame_delay(self._get_int("tiler/frame_delay", 1))

    @frame_delay.setter
    def frame_delay(self, value: int) -> None:
        self._set("tiler/frame_delay", clamp_frame_delay(value))

    @property
    def starting_index(self) -> int:
        """First exported Grh index (>= 1)."""
        return clamp_starting_index(self._get_int("tiler/starting_index", 1))

    @starting_index.setter
    def starting_index(self, value: int) -> None:
        self._set("tiler/starting_index", clamp_starting_index(value))

    def export_config(self) -> ExportConfig:
        """Export parameters built from the stored values."""
        return ExportConfig(
            graphic_sheet_id=self.graphic_sheet_id,
            frame_delay=self.frame_delay,
            starting_index=self.starting_index,
        )
