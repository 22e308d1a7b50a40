"""Selected tiles of the current grid."""

import logging
from typing import Iterable, Iterator

from .geometry import TileCoordinate

logger = logging.getLogger(__name__)


class TileSelection:
    """Set of selected tiles.

    Keeps insertion order for display purposes only; nothing that reads
    the selection for export may depend on it.
    """

    def __init__(self, tiles: Iterable[TileCoordinate] = ()) -> None:
        self._tiles: dict[TileCoordinate, None] = dict.fromkeys(tiles)

    def __contains__(self, tile: object) -> bool:
        return tile in self._tiles

    def __iter__(self) -> Iterator[TileCoordinate]:
        return iter(list(self._tiles))

    def __len__(self) -> int:
        return len(self._tiles)

    def __bool__(self) -> bool:
        return bool(self._tiles)

    def toggle(self, tile: TileCoordinate) -> bool:
        """Flip membership of a tile.

        Returns:
            True if the tile is selected after the call
        """
        if tile in self._tiles:
            del self._tiles[tile]
            logger.debug(f"Deselected tile {tile.column},{tile.row}")
            return False

        self._tiles[tile] = None
        logger.debug(f"Selected tile {tile.column},{tile.row}")
        return True

    def clear(self) -> None:
        """Remove every tile."""
        if self._tiles:
            logger.debug(f"Cleared {len(self._tiles)} selected tiles")
        self._tiles.clear()

    def as_set(self) -> frozenset[TileCoordinate]:
        return frozenset(self._tiles)
