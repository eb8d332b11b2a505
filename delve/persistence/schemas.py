"""
Save File Schemas - Pydantic models for the on-disk game layout.

The world store is written as a list of (position, tile) pairs rather
than a map, since JSON objects only take string keys. Menu, message and
item selection are turn-local UI state and are not saved.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from ..engine_core.geometry import Direction
from ..engine_core.inventory import Inventory
from ..engine_core.state import WorldState
from ..engine_core.tiles import Tile, TileKind
from ..engine_core.world import WorldStore

SAVE_FORMAT_VERSION = 1


class TileModel(BaseModel):
    """A tile: kind plus wood stage."""
    kind: TileKind
    stage: int = Field(0, ge=0)

    def to_tile(self) -> Tile:
        return Tile(kind=self.kind, stage=self.stage)

    @classmethod
    def from_tile(cls, tile: Tile) -> TileModel:
        return cls(kind=tile.kind, stage=tile.stage)


class TileEntry(BaseModel):
    """One overridden cell."""
    pos: tuple[int, int]
    tile: TileModel


class SaveFile(BaseModel):
    """Everything persisted about a game."""
    version: int = SAVE_FORMAT_VERSION
    seed: int
    player_pos: tuple[int, int] = (0, 0)
    player_dir: Direction = Direction.DOWN
    tiles: list[TileEntry] = Field(default_factory=list)
    inventory: dict[str, int] = Field(
        default_factory=dict,
        description="Item name -> count",
    )
    saved_at: Optional[float] = None

    @classmethod
    def from_state(cls, state: WorldState, saved_at: float | None = None) -> SaveFile:
        return cls(
            seed=state.world.seed,
            player_pos=state.player_pos,
            player_dir=state.player_dir,
            tiles=[
                TileEntry(pos=pos, tile=TileModel.from_tile(tile))
                for pos, tile in state.world.entries()
            ],
            inventory=state.inventory.to_counts(),
            saved_at=saved_at,
        )

    def to_state(self) -> WorldState:
        """
        Rebuild a WorldState.

        Raises ValueError on tiles or items the engine does not know.
        """
        world = WorldStore.from_entries(
            self.seed,
            ((tuple(entry.pos), entry.tile.to_tile()) for entry in self.tiles),
        )
        return WorldState(
            player_pos=tuple(self.player_pos),
            player_dir=self.player_dir,
            world=world,
            inventory=Inventory.from_counts(self.inventory),
        )
