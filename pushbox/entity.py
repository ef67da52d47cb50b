"""Entity ID utilities.

Entity IDs are stable strings derived from the entity kind and the
coordinate it was created at, e.g. ``box-3_2``. The same map text always
yields the same IDs, which keeps render bridges and tests deterministic.
"""

from pushbox.components import EntityKind, Position
from pushbox.types import EntityID


PLAYER_CREATION_POSITION = Position(-1, -1)
"""Coordinate the persistent player is created at before its first spawn."""


def make_entity_id(kind: EntityKind, pos: Position) -> EntityID:
    """Return the ID for an entity of ``kind`` created at ``pos``."""
    return f"{kind}-{pos.x}_{pos.y}"


def new_player_id() -> EntityID:
    """Return the ID of the long-lived player entity."""
    return make_entity_id(EntityKind.PLAYER, PLAYER_CREATION_POSITION)
