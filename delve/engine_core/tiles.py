"""
Tiles - Terrain cells and what they break into.

Each tile kind encodes its own breakdown order: walls crumble in three
hits, wood loses one stage per hit. The last hit turns the tile into an
item and leaves the cell empty.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .items import Item

WOOD_MAX_STAGE = 3


class TileKind(Enum):
    """The kinds of terrain a cell can hold."""
    EMPTY = "empty"
    WALL_FULL = "wall_full"
    WALL_HALF = "wall_half"
    WALL_LOW = "wall_low"
    WOOD = "wood"


_TILE_NAMES = {
    TileKind.EMPTY: "empty",
    TileKind.WALL_FULL: "wall",
    TileKind.WALL_HALF: "broken wall",
    TileKind.WALL_LOW: "very broken wall",
    TileKind.WOOD: "wood",
}


@dataclass(frozen=True)
class Tile:
    """
    A single cell's terrain.

    Only WOOD uses `stage` (how many hits it takes before it yields an
    item). For every other kind the stage is always 0.
    """
    kind: TileKind
    stage: int = 0

    def __post_init__(self):
        if self.kind == TileKind.WOOD:
            if not 0 <= self.stage <= WOOD_MAX_STAGE:
                raise ValueError(
                    f"Wood stage must be between 0 and {WOOD_MAX_STAGE}, got {self.stage}"
                )
        elif self.stage != 0:
            raise ValueError(f"Tile {self.kind.value} has no stages")

    @classmethod
    def wood(cls, stage: int = WOOD_MAX_STAGE) -> Tile:
        """Factory for a wood tile."""
        return cls(kind=TileKind.WOOD, stage=stage)

    @property
    def name(self) -> str:
        return _TILE_NAMES[self.kind]

    @property
    def is_empty(self) -> bool:
        return self.kind == TileKind.EMPTY

    def breaks_into(self) -> BreakResult:
        """What does one dig on this tile produce?"""
        from .items import Item

        if self.kind == TileKind.WALL_FULL:
            return BreakResult.next_tile(WALL_HALF)
        if self.kind == TileKind.WALL_HALF:
            return BreakResult.next_tile(WALL_LOW)
        if self.kind == TileKind.WALL_LOW:
            return BreakResult.yields(Item.WALL)
        if self.kind == TileKind.WOOD:
            if self.stage == 0:
                return BreakResult.yields(Item.WOOD)
            return BreakResult.next_tile(Tile.wood(self.stage - 1))
        return BreakResult.unbreakable()


EMPTY = Tile(TileKind.EMPTY)
WALL_FULL = Tile(TileKind.WALL_FULL)
WALL_HALF = Tile(TileKind.WALL_HALF)
WALL_LOW = Tile(TileKind.WALL_LOW)


class BreakKind(Enum):
    """Outcomes of digging a tile."""
    NEXT_TILE = "next_tile"
    YIELDS_ITEM = "yields_item"
    UNBREAKABLE = "unbreakable"


@dataclass(frozen=True)
class BreakResult:
    """
    Result of digging one tile.

    NEXT_TILE carries the weaker tile left behind, YIELDS_ITEM carries
    the item collected when the tile is used up.
    """
    kind: BreakKind
    tile: Tile | None = None
    item: Item | None = None

    @classmethod
    def next_tile(cls, tile: Tile) -> BreakResult:
        return cls(kind=BreakKind.NEXT_TILE, tile=tile)

    @classmethod
    def yields(cls, item: Item) -> BreakResult:
        return cls(kind=BreakKind.YIELDS_ITEM, item=item)

    @classmethod
    def unbreakable(cls) -> BreakResult:
        return cls(kind=BreakKind.UNBREAKABLE)
