"""Tests for tile selection and the tiling session."""

from typing import List

import pytest

from grh_indexer.tiling.export import ExportConfig
from grh_indexer.tiling.geometry import TileCoordinate
from grh_indexer.tiling.selection import TileSelection
from grh_indexer.tiling.session import (
    CONTAINER,
    EXPORT,
    IMAGE,
    OFFSET,
    SELECTION,
    TILE_SIZE,
    TilingSession,
)


class TestTileSelection:
    """Test membership operations."""

    def test_toggle_adds_then_removes(self) -> None:
        """Toggle reports the new membership state."""
        selection = TileSelection()
        tile = TileCoordinate(3, 1)
        assert selection.toggle(tile) is True
        assert tile in selection
        assert selection.toggle(tile) is False
        assert tile not in selection

    def test_double_toggle_restores_set(self) -> None:
        """Toggling twice leaves the set unchanged."""
        selection = TileSelection([TileCoordinate(0, 0), TileCoordinate(1, 0)])
        before = selection.as_set()
        selection.toggle(TileCoordinate(0, 0))
        selection.toggle(TileCoordinate(0, 0))
        assert selection.as_set() == before

    def test_iteration_keeps_insertion_order(self) -> None:
        """Iteration order is the order tiles were added."""
        tiles = [TileCoordinate(1, 1), TileCoordinate(2, 0), TileCoordinate(0, 1)]
        assert list(TileSelection(tiles)) == tiles

    def test_clear(self) -> None:
        """Clear empties the selection."""
        selection = TileSelection([TileCoordinate(0, 0)])
        selection.clear()
        assert len(selection) == 0
        assert not selection


@pytest.fixture
def session() -> TilingSession:
    """Session with a 64x64 image shown at scale 1."""
    session = TilingSession(tile_width=32, tile_height=32)
    session.resize_container(64, 64)
    session.set_image("sheet.png", 64, 64)
    return session


class TestTilingSession:
    """Test session state and change tracking."""

    def test_image_change_clears_selection(self, session: TilingSession) -> None:
        """Loading an image always starts with an empty selection."""
        session.toggle(TileCoordinate(0, 0))
        session.set_image("other.png", 128, 128)
        assert len(session.selection) == 0

    def test_reloading_same_image_clears_selection(self, session: TilingSession) -> None:
        """A reload counts as a new image."""
        session.toggle(TileCoordinate(0, 0))
        session.set_image("sheet.png", 64, 64)
        assert len(session.selection) == 0

    def test_tile_size_change_clears_selection(self, session: TilingSession) -> None:
        """Tile identity depends on tile size."""
        session.toggle(TileCoordinate(1, 1))
        session.set_tile_size(16, 32)
        assert len(session.selection) == 0
        assert session.grid.columns == 4

    def test_same_tile_size_keeps_selection(self, session: TilingSession) -> None:
        """Setting the current size again is not a change."""
        session.toggle(TileCoordinate(1, 1))
        session.set_tile_size(32, 32)
        assert TileCoordinate(1, 1) in session.selection

    def test_offset_change_keeps_selection(self, session: TilingSession) -> None:
        """Tiles are index based, so moving the grid keeps them."""
        session.toggle(TileCoordinate(1, 0))
        session.set_offset(5, -7)
        assert TileCoordinate(1, 0) in session.selection
        assert session.grid.offset_x == 5
        assert session.grid.offset_y == -7

    def test_listeners_receive_changed_inputs(self, session: TilingSession) -> None:
        """Each setter reports exactly what changed."""
        events: List[frozenset[str]] = []
        session.subscribe(events.append)

        session.set_offset(1, 1)
        session.set_tile_size(16, 16)
        session.set_export_config(ExportConfig(frame_delay=2))
        session.resize_container(200, 100)
        session.toggle(TileCoordinate(0, 0))
        session.set_image("next.png", 32, 32)

        assert events == [
            frozenset({OFFSET}),
            frozenset({TILE_SIZE, SELECTION}),
            frozenset({EXPORT}),
            frozenset({CONTAINER}),
            frozenset({SELECTION}),
            frozenset({IMAGE, SELECTION}),
        ]

    def test_unchanged_inputs_do_not_notify(self, session: TilingSession) -> None:
        """Setting current values again is silent."""
        events: List[frozenset[str]] = []
        session.subscribe(events.append)

        session.set_offset(0, 0)
        session.set_export_config(ExportConfig())
        session.resize_container(64, 64)
        session.clear()

        assert events == []

    def test_unsubscribe(self, session: TilingSession) -> None:
        """Removed listeners get no further events."""
        events: List[frozenset[str]] = []
        session.subscribe(events.append)
        session.unsubscribe(events.append)
        session.toggle(TileCoordinate(0, 0))
        assert events == []


class TestSessionClicks:
    """Test pointer interaction."""

    def test_click_toggles_tile(self, session: TilingSession) -> None:
        """A click selects the tile under the pointer, a second one deselects it."""
        assert session.click(40, 10) == TileCoordinate(1, 0)
        assert TileCoordinate(1, 0) in session.selection
        assert session.click(40, 10) == TileCoordinate(1, 0)
        assert TileCoordinate(1, 0) not in session.selection

    def test_click_respects_origin_and_scale(self) -> None:
        """Clicks are resolved in display space relative to the canvas origin."""
        session = TilingSession(tile_width=32, tile_height=32)
        session.resize_container(256, 128)
        session.set_image("sheet.png", 64, 64)  # scale 2
        tile = session.click(100 + 70, 20 + 70, origin_x=100, origin_y=20)
        assert tile == TileCoordinate(1, 1)

    def test_click_outside_grid_is_ignored(self, session: TilingSession) -> None:
        """Out-of-grid clicks do not enter the selection."""
        assert session.click(100, 10) is None
        assert session.click(-1, 10) is None
        assert len(session.selection) == 0

    def test_click_on_partial_tile_sheet(self) -> None:
        """Clicks follow the drawn tiles; the leftover strip is not a tile."""
        session = TilingSession(tile_width=32, tile_height=32)
        session.resize_container(100, 64)
        session.set_image("strip.png", 100, 64)  # scale 1, 3 whole columns
        assert session.click(33, 10) == TileCoordinate(1, 0)
        assert session.click(70, 10) == TileCoordinate(2, 0)
        assert session.click(97, 10) is None
        assert session.selection.as_set() == {TileCoordinate(1, 0), TileCoordinate(2, 0)}

    def test_click_without_image(self) -> None:
        """Nothing can be selected before an image is loaded."""
        session = TilingSession()
        session.resize_container(100, 100)
        assert session.click(10, 10) is None

    def test_toggle_accepts_any_coordinate(self, session: TilingSession) -> None:
        """Direct toggles are pure membership flips."""
        session.toggle(TileCoordinate(-1, 9))
        assert TileCoordinate(-1, 9) in session.selection


class TestSessionExport:
    """Test export through the session."""

    def test_copy_to_clipboard_empty(self, session: TilingSession) -> None:
        """Empty selection exports nothing."""
        assert session.copy_to_clipboard() is None

    def test_copy_to_clipboard_uses_current_config(self, session: TilingSession) -> None:
        """Export reflects the tile size and export config at call time."""
        session.set_export_config(ExportConfig(graphic_sheet_id=1))
        for tile in (TileCoordinate(0, 1), TileCoordinate(1, 0), TileCoordinate(0, 0)):
            session.toggle(tile)

        assert session.copy_to_clipboard() == "\n".join(
            [
                "Grh1=1-1-0-0-32-32",
                "Grh2=1-1-1-0-32-32",
                "Grh3=1-1-0-1-32-32",
                "Grh4=2-1-2-1",
                "Grh5=1-3-1",
            ]
        )

    def test_offset_does_not_affect_export(self, session: TilingSession) -> None:
        """Offsets are only used for drawing and picking."""
        session.toggle(TileCoordinate(1, 1))
        before = session.compile_export()
        session.set_offset(10, 10)
        assert session.compile_export() == before

    def test_records_match_text(self, session: TilingSession) -> None:
        """Structured records render to the exported text."""
        session.toggle(TileCoordinate(1, 1))
        lines = [record.to_line() for record in session.records()]
        assert "\n".join(lines) == session.compile_export()
