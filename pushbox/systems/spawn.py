"""Player spawn system."""

import logging
from dataclasses import replace

from pushbox.components import EntityKind
from pushbox.state import State
from pushbox.systems.reset import reset_entity
from pushbox.types import EntityID

logger = logging.getLogger(__name__)


def spawn_player(state: State, player_id: EntityID) -> State:
    """
    Attach the player to a board at the board's player spawn.

    The player's spawn is reassigned to ``state.player_spawn`` and the player
    is reset onto it. Spawning an already attached player just moves it back.

    Args:
        state (State): Board to attach the player to.
        player_id (EntityID): ID of the long-lived player entity.
    Returns:
        State: State holding the player at its new spawn.
    """
    state = replace(
        state,
        kind=state.kind.set(player_id, EntityKind.PLAYER),
        spawn=state.spawn.set(player_id, state.player_spawn),
    )
    logger.debug(
        "Spawning %s at (%d, %d)", player_id, state.player_spawn.x, state.player_spawn.y
    )
    return reset_entity(state, player_id)
