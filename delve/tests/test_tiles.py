"""
Tests for tiles, items and what digging produces.
"""

import pytest

from ..engine_core.items import Item
from ..engine_core.tiles import (
    Tile, TileKind, BreakKind, BreakResult,
    EMPTY, WALL_FULL, WALL_HALF, WALL_LOW, WOOD_MAX_STAGE,
)


class TestBreaksInto:
    """Tests for the dig progression of each tile."""

    def test_full_wall_becomes_half_wall(self):
        assert WALL_FULL.breaks_into() == BreakResult.next_tile(WALL_HALF)

    def test_half_wall_becomes_low_wall(self):
        assert WALL_HALF.breaks_into() == BreakResult.next_tile(WALL_LOW)

    def test_low_wall_yields_wall_item(self):
        result = WALL_LOW.breaks_into()
        assert result.kind == BreakKind.YIELDS_ITEM
        assert result.item == Item.WALL

    def test_wood_loses_a_stage(self):
        assert Tile.wood(2).breaks_into() == BreakResult.next_tile(Tile.wood(1))

    def test_last_wood_stage_yields_wood(self):
        assert Tile.wood(0).breaks_into() == BreakResult.yields(Item.WOOD)

    def test_empty_is_unbreakable(self):
        assert EMPTY.breaks_into().kind == BreakKind.UNBREAKABLE


class TestTileValues:
    """Tests for tile construction and naming."""

    def test_tiles_compare_by_value(self):
        assert Tile(TileKind.WALL_FULL) == WALL_FULL
        assert Tile.wood(1) != Tile.wood(2)
        assert len({Tile.wood(1), Tile.wood(1), EMPTY}) == 2

    def test_wood_stage_out_of_range(self):
        with pytest.raises(ValueError):
            Tile.wood(WOOD_MAX_STAGE + 1)
        with pytest.raises(ValueError):
            Tile.wood(-1)

    def test_stage_only_for_wood(self):
        with pytest.raises(ValueError):
            Tile(TileKind.WALL_FULL, stage=1)

    def test_names(self):
        assert WALL_FULL.name == "wall"
        assert WALL_HALF.name == "broken wall"
        assert WALL_LOW.name == "very broken wall"
        assert Tile.wood().name == "wood"
        assert EMPTY.is_empty
        assert not WALL_LOW.is_empty


class TestItems:
    """Tests for item placement rules."""

    def test_wall_is_placeable(self):
        assert Item.WALL.to_tile() == WALL_FULL
        assert Item.WALL.is_placeable

    def test_wood_is_not_placeable(self):
        assert Item.WOOD.to_tile() is None
        assert not Item.WOOD.is_placeable

    def test_display_names(self):
        assert Item.WALL.display_name == "wall"
        assert Item.WOOD.display_name == "wood"
