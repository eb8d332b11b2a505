"""
Engine Core - Deterministic world state and turn resolution.

The engine is the runtime that:
1. Generates default terrain from a seed
2. Tracks player changes in a sparse world store
3. Manages WorldState (player, inventory, menus)
4. Resolves one input per turn via the TurnResolver
"""

from .geometry import Pos, Direction, step
from .tiles import Tile, TileKind, BreakResult, BreakKind, EMPTY, WALL_FULL, WALL_HALF, WALL_LOW
from .items import Item
from .inventory import Inventory, HasNone
from .generator import DEFAULT_SEED, generate_tile
from .world import WorldStore
from .action import Input, InputType
from .state import WorldState, Menu
from .reducer import TurnResolver, resolve_turn

__all__ = [
    "Pos",
    "Direction",
    "step",
    "Tile",
    "TileKind",
    "BreakResult",
    "BreakKind",
    "EMPTY",
    "WALL_FULL",
    "WALL_HALF",
    "WALL_LOW",
    "Item",
    "Inventory",
    "HasNone",
    "DEFAULT_SEED",
    "generate_tile",
    "WorldStore",
    "Input",
    "InputType",
    "WorldState",
    "Menu",
    "TurnResolver",
    "resolve_turn",
]
