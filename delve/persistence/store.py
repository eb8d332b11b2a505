"""
Save Store - File-based persistence for a single game.

The store:
- Keeps one JSON save file per game
- Writes atomically (temp file, then rename)
- Treats a missing file as "no saved game"
- Refuses files it cannot read instead of silently starting over
"""

from __future__ import annotations
import logging
import os
import time
from pathlib import Path

from pydantic import ValidationError

from ..engine_core.state import WorldState
from .schemas import SaveFile, SAVE_FORMAT_VERSION

logger = logging.getLogger(__name__)


class SaveFileError(Exception):
    """A save file exists but cannot be turned back into a game."""


class SaveStore:
    """
    JSON save file on local disk.

    Usage:
        store = SaveStore("~/.delve/save.json")

        state = store.load() or WorldState.new()
        ...
        store.save(state)
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, state: WorldState) -> None:
        save_file = SaveFile.from_state(state, saved_at=time.time())
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(save_file.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logger.debug("Saved game to %s (%d tiles)", self.path, len(save_file.tiles))

    def load(self) -> WorldState | None:
        """Load the saved game, or None if there is none."""
        if not self.path.exists():
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
            save_file = SaveFile.model_validate_json(raw)
        except (OSError, ValidationError) as e:
            raise SaveFileError(f"Cannot read save file {self.path}: {e}") from e

        if save_file.version != SAVE_FORMAT_VERSION:
            raise SaveFileError(
                f"Unsupported save format version {save_file.version} in {self.path}"
            )

        try:
            state = save_file.to_state()
        except ValueError as e:
            raise SaveFileError(f"Invalid save file {self.path}: {e}") from e

        logger.info("Loaded game from %s", self.path)
        return state

    def delete(self) -> bool:
        """Remove the save file. Returns False if there was none."""
        if not self.path.exists():
            return False
        self.path.unlink()
        return True
