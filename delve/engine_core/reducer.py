"""
Turn Resolver - Applies one input to the world state.

The resolver is the single point of state mutation.
All state changes go through resolve().

Design principles:
- Pure transition: (state, input) -> new state, or None to stop the game
- Invalid player actions never raise: they leave a message and no-op
- The message is cleared every turn, then possibly refilled
"""

from __future__ import annotations
import logging
from typing import Callable

from .action import Input, InputType
from .geometry import Direction, step
from .state import Menu, WorldState
from .tiles import BreakKind, EMPTY

logger = logging.getLogger(__name__)

MSG_BUILD_OCCUPIED = "You cannot build on existing tiles."
MSG_NO_SELECTION = "You have no item selected to build."
MSG_INVENTORY_EMPTY = "Your inventory is empty."


class TurnResolver:
    """
    Resolves one turn at a time.

    Stateless - all state is in WorldState.
    """

    def resolve(self, state: WorldState, inp: Input) -> WorldState | None:
        """
        Apply an input to the state.

        Returns the next state, or None when the input ends the game.
        The given state is left untouched.
        """
        if inp.input_type == InputType.QUIT:
            logger.debug("quit requested")
            return None

        new_state = state.clone()
        new_state.message = ""

        handler = self._get_handler(inp.input_type)
        handler(new_state, inp)

        self._tick(new_state)
        logger.debug(
            "resolved %s: pos=%s dir=%s menu=%s",
            inp.input_type.value,
            new_state.player_pos,
            new_state.player_dir.value,
            new_state.menu.value,
        )
        return new_state

    def _get_handler(self, input_type: InputType) -> Callable[[WorldState, Input], None]:
        """Get the handler function for an input type."""
        handlers = {
            InputType.DIR: self._handle_dir,
            InputType.BUILD: self._handle_build,
            InputType.OPEN_INVENTORY: self._handle_open_inventory,
            InputType.CLOSE_MENU: self._handle_close_menu,
        }
        return handlers[input_type]

    def _handle_open_inventory(self, state: WorldState, inp: Input) -> None:
        state.menu = Menu.INVENTORY

    def _handle_close_menu(self, state: WorldState, inp: Input) -> None:
        state.menu = Menu.NONE

    def _handle_dir(self, state: WorldState, inp: Input) -> None:
        if state.menu == Menu.INVENTORY:
            self._navigate_inventory(state, inp.direction)
        else:
            self._move_or_dig(state, inp.direction, inp.shifted)

    def _move_or_dig(self, state: WorldState, direction: Direction, shifted: bool) -> None:
        """
        World interaction.

        An unshifted press first turns the player; pressing the same
        direction again moves into an empty cell or digs a solid one.
        A shifted press moves at once without turning, but still only
        digs in the direction already faced.
        """
        facing_unchanged = state.player_dir == direction
        if not shifted:
            state.player_dir = direction

        target = step(state.player_pos, direction)
        tile = state.world.get(target)

        if tile.is_empty:
            if shifted or facing_unchanged:
                state.player_pos = target
            return

        if not facing_unchanged:
            return

        result = tile.breaks_into()
        if result.kind == BreakKind.NEXT_TILE:
            state.world.set(target, result.tile)
        elif result.kind == BreakKind.YIELDS_ITEM:
            state.inventory.insert(result.item)
            state.world.set(target, EMPTY)
            logger.debug("collected %s at %s", result.item.value, target)

    def _navigate_inventory(self, state: WorldState, direction: Direction) -> None:
        inventory = state.inventory
        if inventory.is_empty:
            state.selected_item = None
            state.message = MSG_INVENTORY_EMPTY
            return

        selected = state.selected_item
        if selected is None or selected not in inventory:
            state.selected_item = inventory.first()
        elif direction.is_forward:
            state.selected_item = inventory.next(selected)
        else:
            state.selected_item = inventory.prev(selected)

    def _handle_build(self, state: WorldState, inp: Input) -> None:
        if state.menu != Menu.NONE:
            return

        item = state.selected_item
        if item is None:
            state.message = MSG_NO_SELECTION
            return

        target = state.target()
        if not state.world.get(target).is_empty:
            state.message = MSG_BUILD_OCCUPIED
            return

        tile = item.to_tile()
        if tile is None:
            state.message = f"You cannot build a {item.display_name}."
            return

        # A selected item is always in the inventory
        state.inventory.remove(item)
        state.world.set(target, tile)
        if item not in state.inventory:
            state.selected_item = None

    def _tick(self, state: WorldState) -> None:
        """End-of-turn housekeeping: describe what the player is facing."""
        if state.message:
            return
        tile = state.tile_in_front()
        if not tile.is_empty:
            state.message = f"You are facing a {tile.name}."


def resolve_turn(state: WorldState, inp: Input) -> WorldState | None:
    """
    Convenience function to resolve one turn.

    Creates a TurnResolver and applies the input.
    """
    return TurnResolver().resolve(state, inp)
