"""
Geometry - Positions and directions on the infinite grid.

Positions are plain (x, y) integer tuples. The y axis grows downwards,
so moving UP decreases y.
"""

from __future__ import annotations
from enum import Enum

Pos = tuple[int, int]

ORIGIN: Pos = (0, 0)


class Direction(Enum):
    """Directions the player can face and move in."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Pos:
        return _OFFSETS[self]

    @property
    def is_forward(self) -> bool:
        """Whether this direction advances a menu cursor (down/right)."""
        return self in (Direction.DOWN, Direction.RIGHT)


_OFFSETS: dict[Direction, Pos] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def step(pos: Pos, direction: Direction) -> Pos:
    """Return the position adjacent to `pos` in `direction`."""
    dx, dy = direction.offset
    return (pos[0] + dx, pos[1] + dy)
