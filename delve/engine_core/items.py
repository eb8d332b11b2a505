"""
Items - Collectible things the player carries.

Items come out of dug tiles. Some can be placed back into the world
as a tile, others are only resources.
"""

from __future__ import annotations
from enum import Enum

from .tiles import Tile, WALL_FULL


class Item(Enum):
    """Collectible items, in inventory display order."""
    WALL = "wall"
    WOOD = "wood"

    @property
    def display_name(self) -> str:
        return _ITEM_NAMES[self]

    def to_tile(self) -> Tile | None:
        """The tile this item becomes when built, or None if not placeable."""
        return _PLACED_TILES.get(self)

    @property
    def is_placeable(self) -> bool:
        return self in _PLACED_TILES


_ITEM_NAMES = {
    Item.WALL: "wall",
    Item.WOOD: "wood",
}

_PLACED_TILES: dict[Item, Tile] = {
    Item.WALL: WALL_FULL,
}

# Declaration order, used for stable inventory iteration
ITEM_ORDER: dict[Item, int] = {item: idx for idx, item in enumerate(Item)}
