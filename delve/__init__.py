"""
Delve - Grid World Digging Engine

A deterministic, turn-based engine for a single-player grid world.
The engine provides:
- Procedural terrain with a sparse store of player changes
- Digging, building and an inventory
- Turn resolution as a pure state transition
- A platform contract for input, rendering and persistence
"""

__version__ = "0.1.0"
