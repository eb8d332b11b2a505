"""
Platforms - Concrete implementations of the Platform contract.

- ConsolePlatform: line-based terminal play with JSON save files
- ScriptedPlatform: headless, input from a list (replays, tests)
"""

from .console import ConsolePlatform, parse_key
from .render import render, render_view, render_status
from .scripted import ScriptedPlatform

__all__ = [
    "ConsolePlatform",
    "parse_key",
    "render",
    "render_view",
    "render_status",
    "ScriptedPlatform",
]
