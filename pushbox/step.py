from dataclasses import replace
from typing import Optional, Tuple
from pyrsistent import pvector
from pushbox.actions import ACTION_DIRECTIONS, Action, MOVE_ACTIONS
from pushbox.components import Direction, EntityKind
from pushbox.state import State
from pushbox.systems.push import BASE_DEPTH, attempt_move
from pushbox.systems.reset import reset_system
from pushbox.systems.terminal import win_system
from pushbox.types import EntityID
from pushbox.utils.ecs import entities_by_kind


def step(state: State, action: Action, player_id: Optional[EntityID] = None) -> State:
    """
    Apply an action to the current state, returning the updated state.

    If `player_id` is not provided, the first player in the state will be used.

    Args:
        state (State): The current state of the board.
        action (Action): The action to be applied.
        player_id (Optional[EntityID]): The ID of the player performing the action.
    Returns:
        State: The updated state after applying the action. ``moved`` lists the
            entities displaced by this action only.
    Raises:
        ValueError: If the action is unknown, or no player_id is provided and
            the state holds no player.
    """
    if player_id is None:
        players = entities_by_kind(state, [EntityKind.PLAYER]).get(EntityKind.PLAYER)
        if not players:
            raise ValueError("State contains no player")
        player_id = players[0]

    state = replace(state, moved=pvector())

    if action in MOVE_ACTIONS:
        state = _step_move(state, action, player_id)
    elif action == Action.RESET:
        return reset_system(state)
    else:
        raise ValueError("Action is not valid")

    return win_system(state)


def _step_move(state: State, action: Action, player_id: EntityID) -> State:
    next_state, _ = move_player(state, player_id, ACTION_DIRECTIONS[action])
    return next_state


def move_player(
    state: State, player_id: EntityID, direction: Direction
) -> Tuple[State, bool]:
    """Move the player one step and count the turn.

    A refused move still consumes a turn but leaves every position unchanged.
    Moves made after the board is solved are applied but do not count.

    Returns:
        Tuple[State, bool]: The next state and whether the player moved.
    """
    next_state = attempt_move(state, player_id, direction, BASE_DEPTH)
    moved = next_state is not None
    if next_state is None:
        next_state = state
    if state.win:
        return next_state, moved
    return replace(next_state, turn=next_state.turn + 1), moved
