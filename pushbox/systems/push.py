"""Push interaction system.

A move request travels from the mover into the cell it wants to enter.
Every entity already in that cell is asked to make the same move first,
so a push chain is resolved recursively from the far end back to the
entity that started it:

* walls refuse every move,
* target spots accept every move without moving,
* boxes refuse once the chain already holds ``PUSH_LIMIT`` pushed
  entities, otherwise they move if their own destination lets them,
* players behave like boxes without the chain limit.

The system is pure: it threads an immutable ``State`` through the
recursion and returns ``None`` on refusal, so a refused move never leaves
a partial update behind.
"""

import logging
from dataclasses import replace
from typing import Optional

from pushbox.components import (
    CARDINAL_DIRECTIONS,
    Direction,
    EntityKind,
    is_moveable,
    is_tangible,
)
from pushbox.state import State
from pushbox.types import EntityID
from pushbox.utils.ecs import entities_at

logger = logging.getLogger(__name__)


BASE_DEPTH = 0
"""Push depth the player starts a move with."""

PUSH_LIMIT = 1
"""Largest push depth at which a box still agrees to move (one box per action)."""


def attempt_move(
    state: State, eid: EntityID, direction: Direction, depth: int = BASE_DEPTH
) -> Optional[State]:
    """Try to move ``eid`` one step towards ``direction``.

    Args:
        state (State): Current immutable state.
        eid (EntityID): Entity asked to move.
        direction (Direction): One of the four cardinal unit steps.
        depth (int): Number of entities already committed to this action.

    Returns:
        Optional[State]: State with every pushed entity and ``eid`` moved, or
            ``None`` if the move is refused.

    Raises:
        ValueError: If ``direction`` is not cardinal or ``depth`` is negative.
    """
    if direction not in CARDINAL_DIRECTIONS:
        raise ValueError(f"Direction must be a cardinal unit step, got {direction!r}")
    if not isinstance(depth, int) or depth < 0:
        raise ValueError(f"Push depth must be a non-negative int, got {depth!r}")

    next_state = allows_move(state, eid, direction, depth)
    if next_state is None:
        return None

    if is_moveable(state.kind[eid]):
        current_pos = next_state.position[eid]
        next_state = replace(
            next_state,
            position=next_state.position.set(eid, current_pos.offset(direction)),
            moved=next_state.moved.append(eid),
        )
    return next_state


def allows_move(
    state: State, eid: EntityID, direction: Direction, depth: int
) -> Optional[State]:
    """Decide whether ``eid`` may move, resolving the cell it moves into.

    Occupants of the destination are moved as part of the decision, so the
    returned state already holds their new positions.

    Returns:
        Optional[State]: State after all occupants moved, or ``None`` if any
            part of the chain refuses.
    """
    kind = state.kind[eid]
    if is_tangible(kind) and not is_moveable(kind):
        logger.debug("Move refused: %s is immovable", eid)
        return None
    if not is_tangible(kind):
        return state
    if kind == EntityKind.BOX and depth > PUSH_LIMIT:
        logger.debug("Move refused: %s would exceed push limit %d", eid, PUSH_LIMIT)
        return None

    depth += 1
    destination = state.position[eid].offset(direction)
    occupants = entities_at(state, destination)
    if not occupants:
        return state

    for occupant_id in occupants:
        result = attempt_move(state, occupant_id, direction, depth)
        if result is None:
            logger.debug(
                "Move refused: %s blocked by %s at (%d, %d)",
                eid,
                occupant_id,
                destination.x,
                destination.y,
            )
            return None
        state = result
    return state
