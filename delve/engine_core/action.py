"""
Input System - The actions a turn can be driven by.

Inputs are not key presses: a platform translates whatever its device
produces (keys, HTTP requests, a script) into one of these. Exactly one
input resolves one turn.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .geometry import Direction


class InputType(Enum):
    """Types of input the turn resolver understands."""
    DIR = "dir"
    BUILD = "build"
    QUIT = "quit"
    OPEN_INVENTORY = "open_inventory"
    CLOSE_MENU = "close_menu"


@dataclass(frozen=True)
class Input:
    """
    A single game input.

    DIR inputs carry a direction and whether shift was held. Shift moves
    straight away instead of turning first.
    """
    input_type: InputType
    direction: Direction | None = None
    shifted: bool = False

    def __post_init__(self):
        if self.input_type == InputType.DIR and self.direction is None:
            raise ValueError("Directional input needs a direction")

    @classmethod
    def dir(cls, direction: Direction, shifted: bool = False) -> Input:
        """Factory for directional input."""
        return cls(input_type=InputType.DIR, direction=direction, shifted=shifted)

    @classmethod
    def build(cls) -> Input:
        return cls(input_type=InputType.BUILD)

    @classmethod
    def quit(cls) -> Input:
        return cls(input_type=InputType.QUIT)

    @classmethod
    def open_inventory(cls) -> Input:
        return cls(input_type=InputType.OPEN_INVENTORY)

    @classmethod
    def close_menu(cls) -> Input:
        return cls(input_type=InputType.CLOSE_MENU)
