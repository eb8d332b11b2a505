"""
Session Module - Runs games.

Two ways to drive the engine:
- GameLoop: pulls input from a Platform and pushes draws/saves to it
- SessionManager: hosts in-memory sessions that are fed one input at a time
"""

from .game_loop import Platform, GameLoop, LoopState, start_game
from .manager import SessionManager, Session

__all__ = [
    "Platform",
    "GameLoop",
    "LoopState",
    "start_game",
    "SessionManager",
    "Session",
]
