"""
World State - Everything the game knows at one point in time.

Design principles:
- Turn transitions return a new state (the resolver works on a clone)
- Serializable: the persistent part round-trips through a save file
- Transient UI state (menu, message, selection) is rebuilt on load
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum

from .geometry import Direction, Pos, ORIGIN, step
from .generator import DEFAULT_SEED
from .inventory import Inventory
from .items import Item
from .tiles import Tile
from .world import WorldStore


class Menu(Enum):
    """Which modal overlay, if any, intercepts directional input."""
    NONE = "none"
    INVENTORY = "inventory"


@dataclass
class WorldState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the turn resolver.
    """
    player_pos: Pos = ORIGIN
    player_dir: Direction = Direction.DOWN
    world: WorldStore = field(default_factory=WorldStore)
    inventory: Inventory = field(default_factory=Inventory)

    # Transient, never persisted
    menu: Menu = Menu.NONE
    message: str = ""
    selected_item: Item | None = None

    @classmethod
    def new(cls, seed: int = DEFAULT_SEED) -> WorldState:
        """Fresh game: player at the origin facing down, nothing changed."""
        return cls(world=WorldStore(seed=seed))

    @property
    def seed(self) -> int:
        return self.world.seed

    def target(self) -> Pos:
        """The cell directly in front of the player."""
        return step(self.player_pos, self.player_dir)

    def tile_in_front(self) -> Tile:
        return self.world.get(self.target())

    def clone(self) -> WorldState:
        """Deep copy the state."""
        return deepcopy(self)
