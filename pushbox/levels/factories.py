"""Convenience factory functions for building ``Entity`` blueprints.

Each helper returns a fresh mutable blueprint that can be placed on a
`pushbox.levels.grid.Level` and converted into an immutable
`pushbox.state.State` via `pushbox.levels.convert.to_state`.

There is no player factory: the player is a long-lived entity spawned
into a state with `pushbox.systems.spawn.spawn_player`.
"""

from __future__ import annotations

from pushbox.components import EntityKind
from .entity import Entity


def create_wall() -> Entity:
    """Immovable wall tile."""
    return Entity(kind=EntityKind.WALL)


def create_target_spot() -> Entity:
    """Goal tile a box must cover."""
    return Entity(kind=EntityKind.TARGET_SPOT)


def create_box() -> Entity:
    """Pushable box."""
    return Entity(kind=EntityKind.BOX)
