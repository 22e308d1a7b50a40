"""Export encoding for selected tiles.

Selected tiles are written as ``Grh`` lines of a graphics table. Each tile
becomes a static graphic entry; each row of selected tiles additionally
becomes an animation entry that plays that row's graphics in column order.

Example for a 32x32 grid, sheet 1, tiles (0,0), (1,0) and (0,1)::

    Grh1=1-1-0-0-32-32
    Grh2=1-1-1-0-32-32
    Grh3=1-1-0-1-32-32
    Grh4=2-1-2-1
    Grh5=1-3-1
"""

import logging
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .geometry import TileCoordinate

logger = logging.getLogger(__name__)

MIN_FRAME_DELAY = 1
MAX_FRAME_DELAY = 4
MIN_STARTING_INDEX = 1


def clamp_frame_delay(value: int) -> int:
    """Clamp an animation frame delay to the range the engine accepts."""
    return max(MIN_FRAME_DELAY, min(MAX_FRAME_DELAY, int(value)))


def clamp_starting_index(value: int) -> int:
    """Clamp the first exported index to a valid graphic index."""
    return max(MIN_STARTING_INDEX, int(value))


@dataclass(frozen=True)
class ExportConfig:
    """Export parameters. Out-of-range values are clamped on creation."""

    graphic_sheet_id: int = 0
    frame_delay: int = 1
    starting_index: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "graphic_sheet_id", int(self.graphic_sheet_id))
        object.__setattr__(self, "frame_delay", clamp_frame_delay(self.frame_delay))
        object.__setattr__(
            self, "starting_index", clamp_starting_index(self.starting_index)
        )


@dataclass(frozen=True)
class GraphicRecord:
    """Static reference to one tile of a graphic sheet."""

    index: int
    graphic_sheet_id: int
    column: int
    row: int
    tile_width: int
    tile_height: int

    def to_line(self) -> str:
        return (
            f"Grh{self.index}=1-{self.graphic_sheet_id}-{self.column}-{self.row}"
            f"-{self.tile_width}-{self.tile_height}"
        )


@dataclass(frozen=True)
class AnimationRecord:
    """Animation playing previously exported graphics in order."""

    index: int
    frames: Tuple[int, ...]
    frame_delay: int

    def to_line(self) -> str:
        frames = "-".join(str(frame) for frame in self.frames)
        return f"Grh{self.index}={len(self.frames)}-{frames}-{self.frame_delay}"


ExportRecord = Union[GraphicRecord, AnimationRecord]


def build_records(
    tiles: Iterable[TileCoordinate],
    tile_width: int,
    tile_height: int,
    config: ExportConfig,
) -> List[ExportRecord]:
    """Build export records for a set of tiles.

    Tiles are sorted row-major, so the result does not depend on the order
    they were selected in. Graphics come first, numbered from
    ``config.starting_index``; one animation per distinct row follows,
    numbered contiguously after the last graphic.

    Args:
        tiles: Selected tiles (duplicates are ignored)
        tile_width: Tile width in pixels
        tile_height: Tile height in pixels
        config: Export parameters

    Returns:
        Records in emission order, empty if there are no tiles
    """
    ordered = sorted(set(tiles), key=TileCoordinate.sort_key)

    graphics = [
        GraphicRecord(
            index=config.starting_index + position,
            graphic_sheet_id=config.graphic_sheet_id,
            column=tile.column,
            row=tile.row,
            tile_width=tile_width,
            tile_height=tile_height,
        )
        for position, tile in enumerate(ordered)
    ]

    records: List[ExportRecord] = list(graphics)
    next_index = config.starting_index + len(graphics)
    for _row, row_graphics in groupby(graphics, key=lambda graphic: graphic.row):
        records.append(
            AnimationRecord(
                index=next_index,
                frames=tuple(graphic.index for graphic in row_graphics),
                frame_delay=config.frame_delay,
            )
        )
        next_index += 1

    return records


def render_records(records: Sequence[ExportRecord]) -> str:
    """Join records into newline-separated text without a trailing newline."""
    return "\n".join(record.to_line() for record in records)


def compile_export(
    tiles: Iterable[TileCoordinate],
    tile_width: int,
    tile_height: int,
    config: ExportConfig,
) -> Optional[str]:
    """Compile selected tiles into export text.

    Returns:
        Export text, or None when nothing is selected
    """
    records = build_records(tiles, tile_width, tile_height, config)
    if not records:
        return None

    text = render_records(records)
    logger.debug(f"Compiled {len(records)} export lines")
    return text
