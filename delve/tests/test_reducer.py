"""
Tests for the turn resolver (state transitions).

Tests:
- Turning, moving and digging
- Inventory menu navigation
- Building
- Status messages
- Quit
"""

from ..engine_core.action import Input
from ..engine_core.geometry import Direction
from ..engine_core.items import Item
from ..engine_core.reducer import (
    TurnResolver, resolve_turn, MSG_BUILD_OCCUPIED, MSG_INVENTORY_EMPTY,
)
from ..engine_core.state import Menu, WorldState
from ..engine_core.tiles import EMPTY, WALL_FULL, WALL_HALF, WALL_LOW, Tile

UP = Input.dir(Direction.UP)
DOWN = Input.dir(Direction.DOWN)
LEFT = Input.dir(Direction.LEFT)
RIGHT = Input.dir(Direction.RIGHT)


def play(state: WorldState, *inputs: Input) -> WorldState:
    for inp in inputs:
        state = resolve_turn(state, inp)
        assert state is not None
    return state


def select_first_item(state: WorldState) -> WorldState:
    return play(state, Input.open_inventory(), DOWN, Input.close_menu())


class TestMovement:
    """Tests for turning and moving."""

    def test_new_direction_only_turns(self, open_state):
        """Pressing a new direction turns in place."""
        state = play(open_state, LEFT)

        assert state.player_pos == (0, 0)
        assert state.player_dir == Direction.LEFT

    def test_second_press_moves(self, open_state):
        """Pressing the faced direction again moves."""
        state = play(open_state, LEFT, LEFT)

        assert state.player_pos == (-1, 0)
        assert state.player_dir == Direction.LEFT

    def test_facing_direction_moves_at_once(self, open_state):
        """The player starts facing down, so down moves straight away."""
        state = play(open_state, DOWN)
        assert state.player_pos == (0, 1)

    def test_shift_moves_without_turning(self, open_state):
        state = play(open_state, Input.dir(Direction.RIGHT, shifted=True))

        assert state.player_pos == (1, 0)
        assert state.player_dir == Direction.DOWN

    def test_up_decreases_y(self, open_state):
        state = play(open_state, UP, UP)
        assert state.player_pos == (0, -1)

    def test_blocked_move_without_facing_only_turns(self, open_state):
        open_state.world.set((1, 0), WALL_FULL)
        state = play(open_state, RIGHT)

        assert state.player_pos == (0, 0)
        assert state.player_dir == Direction.RIGHT
        assert state.world.get((1, 0)) == WALL_FULL

    def test_input_state_not_mutated(self, open_state):
        before = open_state.clone()
        resolve_turn(open_state, LEFT)
        assert open_state == before


class TestDigging:
    """Tests for breaking tiles."""

    def test_dig_progression(self, open_state):
        """Three digs turn a full wall into an empty cell and a wall item."""
        open_state.world.set((0, 1), WALL_FULL)

        state = play(open_state, DOWN)
        assert state.world.get((0, 1)) == WALL_HALF
        state = play(state, DOWN)
        assert state.world.get((0, 1)) == WALL_LOW
        assert state.inventory.count_of(Item.WALL) == 0
        state = play(state, DOWN)
        assert state.world.get((0, 1)) == EMPTY
        assert state.inventory.count_of(Item.WALL) == 1
        assert state.player_pos == (0, 0)

    def test_press_after_digging_through_does_not_collect(self, open_state):
        open_state.world.set((0, 1), WALL_LOW)
        state = play(open_state, DOWN, DOWN)

        assert state.inventory.count_of(Item.WALL) == 1
        assert state.world.get((0, 1)) == EMPTY
        assert state.player_pos == (0, 1)

    def test_no_dig_on_turn(self, open_state):
        """The turn that first faces a tile never digs it."""
        open_state.world.set((-1, 0), WALL_FULL)
        state = play(open_state, LEFT)
        assert state.world.get((-1, 0)) == WALL_FULL

        state = play(state, LEFT)
        assert state.world.get((-1, 0)) == WALL_HALF

    def test_shift_does_not_dig_a_new_direction(self, open_state):
        """Shift skips the turn for moving, not for digging."""
        open_state.world.set((-1, 0), WALL_FULL)
        state = play(open_state, Input.dir(Direction.LEFT, shifted=True))

        assert state.world.get((-1, 0)) == WALL_FULL
        assert state.player_pos == (0, 0)
        assert state.player_dir == Direction.DOWN

    def test_shift_digs_the_faced_direction(self, open_state):
        open_state.world.set((0, 1), WALL_FULL)
        state = play(open_state, Input.dir(Direction.DOWN, shifted=True))
        assert state.world.get((0, 1)) == WALL_HALF

    def test_wood_stages(self, open_state):
        open_state.world.set((0, 1), Tile.wood(1))

        state = play(open_state, DOWN)
        assert state.world.get((0, 1)) == Tile.wood(0)
        state = play(state, DOWN)
        assert state.world.get((0, 1)) == EMPTY
        assert state.inventory.count_of(Item.WOOD) == 1


class TestInventoryMenu:
    """Tests for menu navigation."""

    def test_open_and_close(self, open_state):
        state = play(open_state, Input.open_inventory())
        assert state.menu == Menu.INVENTORY
        state = play(state, Input.close_menu())
        assert state.menu == Menu.NONE

    def test_first_press_selects_first_item(self, state_with_items):
        state = play(state_with_items, Input.open_inventory(), UP)
        assert state.selected_item == Item.WALL

    def test_cursor_cycles(self, state_with_items):
        state = play(state_with_items, Input.open_inventory(), DOWN)
        assert state.selected_item == Item.WALL
        state = play(state, RIGHT)
        assert state.selected_item == Item.WOOD
        state = play(state, DOWN)
        assert state.selected_item == Item.WALL
        state = play(state, LEFT)
        assert state.selected_item == Item.WOOD
        state = play(state, UP)
        assert state.selected_item == Item.WALL

    def test_menu_input_leaves_world_alone(self, state_with_items):
        state = play(state_with_items, Input.open_inventory(), LEFT, LEFT, UP)

        assert state.player_pos == (0, 0)
        assert state.player_dir == Direction.DOWN
        assert state.world.tiles == state_with_items.world.tiles

    def test_empty_inventory(self, open_state):
        state = play(open_state, Input.open_inventory(), DOWN)

        assert state.selected_item is None
        assert state.message == MSG_INVENTORY_EMPTY

    def test_selection_survives_closing_menu(self, state_with_items):
        state = select_first_item(state_with_items)
        assert state.menu == Menu.NONE
        assert state.selected_item == Item.WALL


class TestBuild:
    """Tests for placing items."""

    def test_build_consumes_item(self, open_state):
        open_state.inventory.insert(Item.WALL)
        state = select_first_item(open_state)

        state = play(state, Input.build())

        assert state.inventory.count_of(Item.WALL) == 0
        assert state.world.get((0, 1)) == WALL_FULL
        assert state.selected_item is None

    def test_build_again_has_no_selection(self, open_state):
        open_state.inventory.insert(Item.WALL)
        state = play(select_first_item(open_state), Input.build())
        tiles_before = dict(state.world.tiles)

        state = play(state, Input.build())

        assert "no item selected" in state.message
        assert state.world.tiles == tiles_before

    def test_selection_kept_while_items_remain(self, state_with_items):
        state = play(select_first_item(state_with_items), Input.build())

        assert state.inventory.count_of(Item.WALL) == 1
        assert state.selected_item == Item.WALL

    def test_cannot_build_on_existing_tiles(self, state_with_items):
        state_with_items.world.set((0, 1), WALL_LOW)
        state = play(select_first_item(state_with_items), Input.build())

        assert state.message == MSG_BUILD_OCCUPIED
        assert state.world.get((0, 1)) == WALL_LOW
        assert state.inventory.count_of(Item.WALL) == 2

    def test_cannot_build_unplaceable_item(self, open_state):
        open_state.inventory.insert(Item.WOOD)
        state = play(select_first_item(open_state), Input.build())

        assert state.message == "You cannot build a wood."
        assert state.world.get((0, 1)) == EMPTY
        assert state.inventory.count_of(Item.WOOD) == 1

    def test_build_ignored_while_menu_open(self, state_with_items):
        state = play(state_with_items, Input.open_inventory(), DOWN, Input.build())

        assert state.world.get((0, 1)) == EMPTY
        assert state.inventory.count_of(Item.WALL) == 2

    def test_build_then_dig_back(self, open_state):
        open_state.inventory.insert(Item.WALL)
        state = play(select_first_item(open_state), Input.build(), DOWN, DOWN, DOWN)

        assert state.world.get((0, 1)) == EMPTY
        assert state.inventory.count_of(Item.WALL) == 1


class TestMessages:
    """Tests for the status message."""

    def test_facing_message(self, open_state):
        open_state.world.set((1, 0), WALL_HALF)
        state = play(open_state, RIGHT)
        assert state.message == "You are facing a broken wall."

    def test_message_cleared_each_turn(self, open_state):
        open_state.world.set((1, 0), WALL_FULL)
        state = play(open_state, RIGHT)
        assert state.message
        state = play(state, LEFT)
        assert state.message == ""

    def test_failure_message_wins_over_facing(self, open_state):
        open_state.world.set((0, 1), WALL_FULL)
        state = play(open_state, Input.build())
        assert "no item selected" in state.message

    def test_facing_message_after_opening_menu(self, open_state):
        open_state.world.set((0, 1), WALL_FULL)
        state = play(open_state, Input.open_inventory())
        assert state.message == "You are facing a wall."


class TestQuit:
    """Tests for ending the game."""

    def test_quit_returns_none(self, fresh_state):
        assert resolve_turn(fresh_state, Input.quit()) is None

    def test_quit_from_any_state(self, state_with_items):
        state = play(state_with_items, Input.open_inventory(), DOWN)
        assert TurnResolver().resolve(state, Input.quit()) is None
