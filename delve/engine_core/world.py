"""
World Store - Sparse overrides on top of the generated terrain.

The world is infinite, so only the difference between what the player
did and what the generator produces is kept. Invariant: for every stored
(pos, tile), `tile != generate_tile(pos, seed)`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

from .geometry import Pos
from .generator import DEFAULT_SEED, generate_tile
from .tiles import Tile


@dataclass
class WorldStore:
    """
    Position -> Tile overrides for one seeded world.

    Reads never write: a missing position falls through to the generator
    without being cached.
    """
    seed: int = DEFAULT_SEED
    tiles: dict[Pos, Tile] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.tiles)

    def __contains__(self, pos: Pos) -> bool:
        return pos in self.tiles

    def generated(self, pos: Pos) -> Tile:
        return generate_tile(pos, self.seed)

    def get(self, pos: Pos) -> Tile:
        tile = self.tiles.get(pos)
        if tile is None:
            return self.generated(pos)
        return tile

    def set(self, pos: Pos, tile: Tile) -> None:
        """Set the tile at `pos`, dropping the override if it matches the default."""
        if tile == self.generated(pos):
            self.tiles.pop(pos, None)
        else:
            self.tiles[pos] = tile

    def entries(self) -> list[tuple[Pos, Tile]]:
        """Overrides as a position-sorted list of pairs."""
        return sorted(self.tiles.items())

    @classmethod
    def from_entries(
        cls, seed: int, entries: Iterable[tuple[Pos, Tile]]
    ) -> WorldStore:
        """Rebuild a store; entries equal to the generated tile are dropped."""
        store = cls(seed=seed)
        for pos, tile in entries:
            store.set(pos, tile)
        return store
