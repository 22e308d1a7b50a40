"""Tests for grid geometry conversions."""

import pytest

from grh_indexer.tiling.geometry import (
    DisplayTransform,
    GridConfig,
    Rect,
    TileCoordinate,
    pixel_to_tile,
    tile_to_pixel_rect,
)


def make_grid(**overrides: int) -> GridConfig:
    values = dict(
        tile_width=32,
        tile_height=32,
        offset_x=0,
        offset_y=0,
        image_width=64,
        image_height=64,
    )
    values.update(overrides)
    return GridConfig(**values)


class TestGridConfig:
    """Test derived grid dimensions."""

    def test_columns_and_rows_are_floored(self) -> None:
        """Partial tiles at the right and bottom edges are not counted."""
        grid = make_grid(image_width=100, image_height=70)
        assert grid.columns == 3
        assert grid.rows == 2

    def test_non_positive_tile_size_gives_empty_grid(self) -> None:
        """Degenerate tile sizes produce no columns or rows."""
        assert make_grid(tile_width=0).columns == 0
        assert make_grid(tile_height=-4).rows == 0

    def test_contains(self) -> None:
        """Only indices inside [0, columns) x [0, rows) are contained."""
        grid = make_grid()
        assert grid.contains(TileCoordinate(0, 0))
        assert grid.contains(TileCoordinate(1, 1))
        assert not grid.contains(TileCoordinate(2, 0))
        assert not grid.contains(TileCoordinate(0, -1))

    def test_tiles_are_row_major(self) -> None:
        """Grid cells are iterated row by row."""
        grid = make_grid(image_width=96)
        assert list(grid.tiles()) == [
            TileCoordinate(0, 0),
            TileCoordinate(1, 0),
            TileCoordinate(2, 0),
            TileCoordinate(0, 1),
            TileCoordinate(1, 1),
            TileCoordinate(2, 1),
        ]


class TestDisplayTransform:
    """Test fitting an image into its container."""

    def test_fit_uses_smaller_ratio(self) -> None:
        """The image is scaled uniformly to fit both dimensions."""
        transform = DisplayTransform.fit(64, 32, 128, 128)
        assert transform.scale == 2.0
        assert transform.displayed_width == 128
        assert transform.displayed_height == 64

    def test_fit_can_shrink(self) -> None:
        """Images larger than the container are scaled down."""
        transform = DisplayTransform.fit(400, 200, 100, 100)
        assert transform.scale == 0.25

    def test_empty_image_keeps_unit_scale(self) -> None:
        """No image loaded yet means no scaling."""
        assert DisplayTransform.fit(0, 0, 300, 300).scale == 1.0

    def test_to_display(self) -> None:
        """Rectangles are scaled from image to screen space."""
        transform = DisplayTransform(2.0, 64, 64)
        assert transform.to_display(Rect(4, 8, 16, 32)) == Rect(8, 16, 32, 64)


class TestPixelToTile:
    """Test resolving pointer positions to tiles."""

    def test_scaled_click(self) -> None:
        """Cell size on screen follows the display scale."""
        transform = DisplayTransform.fit(64, 64, 128, 128)
        tile = pixel_to_tile(70, 10, 0, 0, make_grid(), transform)
        assert tile == TileCoordinate(1, 0)

    def test_container_origin_is_subtracted(self) -> None:
        """Pointer coordinates are made relative to the canvas corner."""
        transform = DisplayTransform.fit(64, 64, 128, 128)
        tile = pixel_to_tile(75, 85, 10, 20, make_grid(), transform)
        assert tile == TileCoordinate(1, 1)

    def test_offset_is_scaled(self) -> None:
        """The image-space offset is converted to screen space before use."""
        transform = DisplayTransform.fit(64, 64, 128, 128)
        grid = make_grid(offset_x=8)
        # 70 - 8 * 2 = 54, which is still inside the first 64px column
        assert pixel_to_tile(70, 0, 0, 0, grid, transform) == TileCoordinate(0, 0)
        assert pixel_to_tile(90, 0, 0, 0, grid, transform) == TileCoordinate(1, 0)

    def test_negative_offset(self) -> None:
        """Negative offsets shift the grid left and up."""
        transform = DisplayTransform(1.0, 64, 64)
        grid = make_grid(offset_x=-16, offset_y=-16)
        assert pixel_to_tile(20, 20, 0, 0, grid, transform) == TileCoordinate(1, 1)

    def test_outside_clicks_are_not_clamped(self) -> None:
        """Clicks past the grid resolve to out-of-range indices."""
        transform = DisplayTransform(1.0, 64, 64)
        grid = make_grid()
        assert pixel_to_tile(-5, 0, 0, 0, grid, transform) == TileCoordinate(-1, 0)
        assert pixel_to_tile(70, 130, 0, 0, grid, transform) == TileCoordinate(2, 4)

    def test_cell_width_is_scaled_tile_width(self) -> None:
        """Cells are one scaled tile wide even when the image has a partial column."""
        # 100px wide image holds 3 whole 32px tiles plus a 4px remainder
        transform = DisplayTransform(1.0, 100, 64)
        grid = make_grid(image_width=100)
        assert pixel_to_tile(31, 0, 0, 0, grid, transform) == TileCoordinate(0, 0)
        assert pixel_to_tile(32, 0, 0, 0, grid, transform) == TileCoordinate(1, 0)
        assert pixel_to_tile(95, 0, 0, 0, grid, transform) == TileCoordinate(2, 0)

    @pytest.mark.parametrize(
        "pointer",
        [(float("nan"), 10.0), (10.0, float("inf")), (float("-inf"), 0.0)],
    )
    def test_non_finite_pointer_resolves_nothing(
        self, pointer: tuple[float, float]
    ) -> None:
        """NaN or infinite pointer positions do not raise."""
        transform = DisplayTransform(1.0, 64, 64)
        assert pixel_to_tile(*pointer, 0, 0, make_grid(), transform) is None

    @pytest.mark.parametrize(
        "overrides",
        [dict(tile_width=0), dict(tile_height=0), dict(image_width=16)],
    )
    def test_empty_grid_resolves_nothing(self, overrides: dict[str, int]) -> None:
        """A grid without columns or rows cannot be hit."""
        transform = DisplayTransform(1.0, 64, 64)
        assert pixel_to_tile(10, 10, 0, 0, make_grid(**overrides), transform) is None


class TestTileToPixelRect:
    """Test tile rectangles used for drawing."""

    def test_rect_includes_offset(self) -> None:
        """Tile rectangles are placed by index and shifted by the offset."""
        grid = make_grid(tile_width=32, tile_height=16, offset_x=4, offset_y=-3)
        assert tile_to_pixel_rect(TileCoordinate(2, 1), grid) == Rect(68, 13, 32, 16)

    def test_round_trip_through_display(self) -> None:
        """Clicking the center of a drawn tile resolves back to that tile."""
        grid = make_grid(
            tile_width=16, tile_height=16, offset_x=5, offset_y=3,
            image_width=64, image_height=48,
        )
        transform = DisplayTransform.fit(64, 48, 200, 150)
        origin_x, origin_y = 12.0, 30.0

        for tile in grid.tiles():
            rect = transform.to_display(tile_to_pixel_rect(tile, grid))
            center_x = origin_x + rect.x + rect.width / 2
            center_y = origin_y + rect.y + rect.height / 2
            assert pixel_to_tile(
                center_x, center_y, origin_x, origin_y, grid, transform
            ) == tile

    @pytest.mark.parametrize("scale", [1.0, 0.75, 2.5])
    def test_round_trip_on_partial_tile_sheet(self, scale: float) -> None:
        """Drawn tiles and clicked tiles agree when the sheet is not tile-aligned."""
        grid = make_grid(image_width=351, image_height=70, offset_x=3, offset_y=-2)
        transform = DisplayTransform(scale, 351, 70)

        resolved = []
        for tile in grid.tiles():
            rect = transform.to_display(tile_to_pixel_rect(tile, grid))
            resolved.append(
                pixel_to_tile(
                    rect.x + rect.width / 2, rect.y + rect.height / 2, 0, 0,
                    grid, transform,
                )
            )

        assert resolved == list(grid.tiles())
