"""
Pytest fixtures for Delve tests.
"""

import pytest

from ..engine_core.items import Item
from ..engine_core.state import WorldState
from ..engine_core.tiles import EMPTY

TEST_SEED = 4242


def clear_area(state: WorldState, radius: int = 3) -> WorldState:
    """Make every cell within `radius` of the player empty."""
    px, py = state.player_pos
    for x in range(px - radius, px + radius + 1):
        for y in range(py - radius, py + radius + 1):
            state.world.set((x, y), EMPTY)
    return state


@pytest.fixture
def fresh_state() -> WorldState:
    """A brand new world with the test seed."""
    return WorldState.new(TEST_SEED)


@pytest.fixture
def open_state() -> WorldState:
    """Player at the origin facing down, with empty cells all around."""
    return clear_area(WorldState.new(TEST_SEED))


@pytest.fixture
def state_with_items(open_state: WorldState) -> WorldState:
    """Open area, two walls and one wood in the inventory."""
    open_state.inventory.insert(Item.WALL)
    open_state.inventory.insert(Item.WALL)
    open_state.inventory.insert(Item.WOOD)
    return open_state

