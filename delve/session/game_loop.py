"""
Game Loop - Drives the engine against a platform.

The loop:
1. Platform prepares its device
2. Saved state is loaded (or a fresh world is created)
3. Current state is drawn
4. One input is read; no input means poll again without a turn
5. The input is resolved; quit ends the loop
6. The new state is saved
7. Repeat from 3

The platform is cleaned up exactly once, however the loop ends.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum

from ..engine_core.action import Input
from ..engine_core.generator import DEFAULT_SEED
from ..engine_core.reducer import TurnResolver
from ..engine_core.state import WorldState

logger = logging.getLogger(__name__)


class Platform(ABC):
    """
    How the game talks to the outside world.

    A platform covers input, drawing and persistence. The loop only
    depends on this interface; any implementation is interchangeable.
    Errors raised by a platform are not interpreted by the engine, they
    simply end the loop.
    """

    @abstractmethod
    def init(self) -> None:
        """Prepare the display/input device. Called once before the loop."""

    @abstractmethod
    def cleanup(self) -> None:
        """Restore the device. Called once, always, when the loop exits."""

    @abstractmethod
    def ask_for_input(self) -> Input | None:
        """The next game input, or None if nothing actionable is available yet."""

    @abstractmethod
    def draw(self, state: WorldState) -> None:
        """Render the current state."""

    @abstractmethod
    def save(self, state: WorldState) -> None:
        """Persist the state."""

    @abstractmethod
    def load(self) -> WorldState | None:
        """Retrieve a saved state, or None to start a fresh game."""


class LoopState(Enum):
    """State of the game loop."""
    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(platform)
        turns = loop.run()
    """

    def __init__(
        self,
        platform: Platform,
        seed: int = DEFAULT_SEED,
        resolver: TurnResolver | None = None,
    ):
        self.platform = platform
        self.seed = seed
        self.resolver = resolver or TurnResolver()
        self.state = LoopState.CREATED
        self.world_state: WorldState | None = None
        self.turns = 0

    def run(self) -> int:
        """
        Run until quit or a platform error.

        Returns the number of turns resolved. If the loop raised and
        cleanup raised too, the loop's exception wins.
        """
        try:
            self._run_turns()
        except BaseException:
            self.state = LoopState.FAILED
            try:
                self.platform.cleanup()
            except Exception:
                logger.warning("Platform cleanup failed after loop error", exc_info=True)
            raise
        try:
            self.platform.cleanup()
        except BaseException:
            self.state = LoopState.FAILED
            raise
        self.state = LoopState.STOPPED
        return self.turns

    def _run_turns(self) -> None:
        platform = self.platform
        platform.init()
        self.state = LoopState.RUNNING

        state = platform.load()
        if state is None:
            logger.info("No saved game, starting a new world (seed=%d)", self.seed)
            state = WorldState.new(self.seed)
        self.world_state = state

        while True:
            platform.draw(state)
            inp = platform.ask_for_input()
            if inp is None:
                continue
            next_state = self.resolver.resolve(state, inp)
            if next_state is None:
                break
            state = next_state
            self.world_state = state
            self.turns += 1
            platform.save(state)


def start_game(platform: Platform, seed: int = DEFAULT_SEED) -> int:
    """
    Convenience function to play a game on a platform.

    Creates a GameLoop and runs it.
    """
    return GameLoop(platform, seed=seed).run()
