"""Reset system.

Teleports entities back to their spawn positions. No collision rules apply,
so a reset succeeds from any state, including overlapping ones.
"""

from dataclasses import replace

from pushbox.state import State
from pushbox.types import EntityID


def reset_entity(state: State, eid: EntityID) -> State:
    """Move a single entity back to its spawn position."""
    spawn = state.spawn[eid]
    if state.position.get(eid) == spawn:
        return state
    return replace(
        state,
        position=state.position.set(eid, spawn),
        moved=state.moved.append(eid),
    )


def reset_system(state: State) -> State:
    """
    Put every entity, player included, back at its spawn (idempotent).

    Args:
        state (State): Current immutable state.
    Returns:
        State: State with ``position`` equal to ``spawn`` for every entity and
            ``win`` cleared.
    """
    for eid in sorted(state.spawn.keys()):
        state = reset_entity(state, eid)
    return replace(state, win=False, message=None)
