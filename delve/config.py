"""
Delve Configuration

Loads configuration from environment variables with sensible defaults.
Command-line flags override these values.
"""

import os
from pathlib import Path

from .engine_core.generator import DEFAULT_SEED


class Config:
    """Application configuration loaded from environment variables."""

    # World
    SEED: int = int(os.getenv("DELVE_SEED", str(DEFAULT_SEED)))

    # Persistence
    SAVE_PATH: Path = Path(os.getenv("DELVE_SAVE_PATH", "~/.delve/save.json")).expanduser()

    # Console view, in characters (frame included)
    VIEW_WIDTH: int = int(os.getenv("DELVE_VIEW_WIDTH", "60"))
    VIEW_HEIGHT: int = int(os.getenv("DELVE_VIEW_HEIGHT", "20"))

    # API server
    HOST: str = os.getenv("DELVE_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("DELVE_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("DELVE_LOG_LEVEL", "WARNING")

    @staticmethod
    def plain_terminal() -> bool:
        """Screen clearing and cursor escapes are disabled when DELVE_PLAIN is set."""
        return bool(os.getenv("DELVE_PLAIN"))

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Delve Configuration:",
            f"  Seed: {cls.SEED}",
            f"  Save path: {cls.SAVE_PATH}",
            f"  View: {cls.VIEW_WIDTH}x{cls.VIEW_HEIGHT}",
            f"  API: {cls.HOST}:{cls.PORT}",
            f"  Log level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
