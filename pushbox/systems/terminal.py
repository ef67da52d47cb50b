"""
Terminal state management.

Sets the ``win`` flag once the objective function is satisfied.
"""

import logging
from dataclasses import replace
from pushbox.state import State

logger = logging.getLogger(__name__)


def win_system(state: State) -> State:
    """
    Set ``win`` flag if the board meets its objective function (idempotent).

    Args:
        state (State): Current immutable state.
    Returns:
        State: Updated state with ``win`` flag set if objective met.
    """
    if state.win:
        return state

    if state.objective_fn(state):
        logger.info("Board solved after %d turns", state.turn)
        return replace(state, win=True, message="You win")
    return state
