"""
Persistence Module - Saving and loading games.

Only player-caused change is saved: the overridden cells, the player
and the inventory. Everything else is regenerated from the seed.
"""

from .schemas import SaveFile, TileEntry, TileModel, SAVE_FORMAT_VERSION
from .store import SaveStore, SaveFileError

__all__ = [
    "SaveFile",
    "TileEntry",
    "TileModel",
    "SAVE_FORMAT_VERSION",
    "SaveStore",
    "SaveFileError",
]
