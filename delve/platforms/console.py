"""
Console Platform - Plays the game in a terminal, one line per input.

Keys (first character of each line):
    w/a/s/d     turn, then move or dig
    W/A/S/D     move without turning
    b           build the selected item
    i           open the inventory
    x           close the menu
    q           quit

End of input (Ctrl-D) quits as well.
"""

from __future__ import annotations
import logging
import sys
from typing import Callable, TextIO

from ..config import Config
from ..engine_core.action import Input
from ..engine_core.geometry import Direction
from ..engine_core.state import WorldState
from ..persistence.store import SaveStore
from ..session.game_loop import Platform
from .render import render_status, render_view

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

_DIRECTION_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_ACTION_KEYS = {
    "b": Input.build,
    "i": Input.open_inventory,
    "x": Input.close_menu,
    "q": Input.quit,
}


def parse_key(key: str) -> Input | None:
    """Translate one key into a game input. Unknown keys give None."""
    if not key:
        return None
    direction = _DIRECTION_KEYS.get(key.lower())
    if direction is not None:
        return Input.dir(direction, shifted=key.isupper())
    factory = _ACTION_KEYS.get(key)
    return factory() if factory else None


class ConsolePlatform(Platform):
    """
    Line-based terminal platform.

    Saving and loading go through an optional SaveStore; without one the
    game is not persisted.
    """

    def __init__(
        self,
        store: SaveStore | None = None,
        width: int = Config.VIEW_WIDTH,
        height: int = Config.VIEW_HEIGHT,
        read_line: Callable[[str], str] = input,
        output: TextIO | None = None,
        use_ansi: bool | None = None,
    ):
        self.store = store
        self.width = width
        self.height = height
        self.read_line = read_line
        self.output = output or sys.stdout
        self.use_ansi = not Config.plain_terminal() if use_ansi is None else use_ansi

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def init(self) -> None:
        if self.use_ansi:
            self._write(HIDE_CURSOR + CLEAR_SCREEN)

    def cleanup(self) -> None:
        if self.use_ansi:
            self._write(SHOW_CURSOR)
        self._write("\n")

    def ask_for_input(self) -> Input | None:
        try:
            line = self.read_line("> ")
        except EOFError:
            return Input.quit()
        inp = parse_key(line.strip()[:1])
        if inp is None:
            logger.debug("Ignoring unknown input %r", line)
        return inp

    def draw(self, state: WorldState) -> None:
        lines = render_view(state, self.width, self.height) + render_status(state)
        prefix = CLEAR_SCREEN if self.use_ansi else ""
        self._write(prefix + "\n".join(lines) + "\n")

    def save(self, state: WorldState) -> None:
        if self.store is not None:
            self.store.save(state)

    def load(self) -> WorldState | None:
        if self.store is None:
            return None
        return self.store.load()
