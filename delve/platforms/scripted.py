"""
Scripted Platform - A headless platform driven by a list of inputs.

Useful for replays and for exercising the game loop without a terminal.
`None` entries in the script stand for polls where no input was ready.
"""

from __future__ import annotations
from typing import Iterable

from ..engine_core.action import Input
from ..engine_core.state import WorldState
from ..session.game_loop import Platform


class ScriptedPlatform(Platform):
    """
    Feeds inputs from a script and records everything the loop does.

    Once the script runs out the platform answers with quit.
    """

    def __init__(
        self,
        inputs: Iterable[Input | None] = (),
        saved: WorldState | None = None,
    ):
        self.inputs = list(inputs)
        self.saved = saved
        self.frames: list[WorldState] = []
        self.saves: list[WorldState] = []
        self.calls: list[str] = []

    def init(self) -> None:
        self.calls.append("init")

    def cleanup(self) -> None:
        self.calls.append("cleanup")

    def ask_for_input(self) -> Input | None:
        self.calls.append("ask_for_input")
        if not self.inputs:
            return Input.quit()
        return self.inputs.pop(0)

    def draw(self, state: WorldState) -> None:
        self.calls.append("draw")
        self.frames.append(state)

    def save(self, state: WorldState) -> None:
        self.calls.append("save")
        self.saves.append(state)
        self.saved = state

    def load(self) -> WorldState | None:
        self.calls.append("load")
        return self.saved
