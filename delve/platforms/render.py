"""
Text Rendering - Turns a world state into lines of text.

Each tile is drawn as two characters because most fonts are taller
than they are wide. The view is centred on the player.
"""

from __future__ import annotations

from ..engine_core.geometry import Direction
from ..engine_core.state import Menu, WorldState
from ..engine_core.tiles import Tile, TileKind

TILE_CHARS = {
    TileKind.EMPTY: "  ",
    TileKind.WALL_FULL: "██",
    TileKind.WALL_HALF: "▓▓",
    TileKind.WALL_LOW: "▒▒",
}

WOOD_CHARS = "░1", "░2", "░3", "░4"

PLAYER_CHARS = {
    Direction.UP: "▀▀",
    Direction.DOWN: "▄▄",
    Direction.LEFT: "█ ",
    Direction.RIGHT: " █",
}

# Frame
TL, T, TR = "┏", "━", "┓"
L, R = "┃", "┃"
BL, B, BR = "┗", "━", "┛"

HELP = (
    "Controls:",
    "w/a/s/d - turn, then move or dig",
    "W/A/S/D - move without turning",
    "b - build selected item",
    "i - inventory, x - close menu",
    "q - quit",
)

MIN_WIDTH = 4
MIN_HEIGHT = 3


def tile_chars(tile: Tile) -> str:
    if tile.kind == TileKind.WOOD:
        return WOOD_CHARS[tile.stage]
    return TILE_CHARS[tile.kind]


def render_view(state: WorldState, width: int, height: int) -> list[str]:
    """
    Framed map around the player.

    `width` and `height` are the outer size in characters, frame
    included. The width is rounded down to an even number.
    """
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        raise ValueError(f"View must be at least {MIN_WIDTH}x{MIN_HEIGHT}, got {width}x{height}")

    outer_width = width & ~1
    inner_width = outer_width - 2
    rows = height - 2
    cells_in_a_row = inner_width // 2
    px, py = state.player_pos

    lines = [TL + T * inner_width + TR]
    for row in range(rows):
        chars = []
        for col in range(cells_in_a_row):
            pos = (px + col - cells_in_a_row // 2, py + row - rows // 2)
            if pos == state.player_pos:
                chars.append(PLAYER_CHARS[state.player_dir])
            else:
                chars.append(tile_chars(state.world.get(pos)))
        lines.append(L + "".join(chars) + R)
    lines.append(BL + B * inner_width + BR)
    return lines


def render_inventory(state: WorldState) -> list[str]:
    lines = ["Inventory:"]
    if state.inventory.is_empty:
        lines.append("  (empty)")
        return lines
    for item, count in state.inventory.items():
        marker = ">" if item == state.selected_item else " "
        lines.append(f"{marker} {item.display_name} x{count}")
    return lines


def render_status(state: WorldState) -> list[str]:
    """Message line, inventory panel (while open) and key help."""
    lines = [state.message]
    if state.menu == Menu.INVENTORY:
        lines.extend(render_inventory(state))
    elif state.selected_item is not None:
        lines.append(f"Selected: {state.selected_item.display_name}")
    lines.extend(HELP)
    return lines


def render(state: WorldState, width: int, height: int) -> str:
    return "\n".join(render_view(state, width, height) + render_status(state))
