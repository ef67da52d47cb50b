"""Conversion utilities between mutable ``Level`` and runtime ``State``.

Two primary operations:

* ``to_state``: Materialize the immutable board from a grid of ``Entity`` blueprints.
* ``from_state``: Reconstruct a mutable ``Level`` from a runtime state.

Entity IDs are derived from kind and spawn cell, so converting the same
level twice yields identical states.
"""

from __future__ import annotations

from typing import Dict

from pyrsistent import pmap, pvector

from pushbox.components import EntityKind, Position as PositionComp
from pushbox.entity import make_entity_id
from pushbox.state import State
from pushbox.types import EntityID
from .entity import Entity
from .grid import Level


def to_state(level: Level) -> State:
    """
    Convert a ``Level`` into an immutable ``State``.

    Every blueprint's cell becomes both its position and its spawn. The
    player is not part of a level; spawn it with
    `pushbox.systems.spawn.spawn_player`.

    Raises:
        ValueError: If two blueprints of the same kind share a cell.
    """
    kind: Dict[EntityID, EntityKind] = {}
    position: Dict[EntityID, PositionComp] = {}

    for y in range(level.height):
        for x in range(level.width):
            pos = PositionComp(x, y)
            for obj in level.grid[y][x]:
                eid = make_entity_id(obj.kind, pos)
                if eid in kind:
                    raise ValueError(f"Duplicate {obj.kind} at {(x, y)}")
                kind[eid] = obj.kind
                position[eid] = pos

    return State(
        width=level.width,
        height=level.height,
        objective_fn=level.objective_fn,
        kind=pmap(kind),
        position=pmap(position),
        spawn=pmap(position),
        player_spawn=PositionComp(*level.player_spawn),
        box_spawns=pvector(PositionComp(x, y) for x, y in level.box_spawns),
        turn=level.turn,
        win=level.win,
        message=level.message,
    )


def from_state(state: State) -> Level:
    """
    Convert an immutable ``State`` into a mutable ``Level`` blueprint.

    Entities are placed at their current positions. The player's current
    position becomes the level's player spawn; entities outside the board
    rectangle are dropped.
    """
    level = Level(
        width=state.width,
        height=state.height,
        objective_fn=state.objective_fn,
        player_spawn=(state.player_spawn.x, state.player_spawn.y),
        turn=state.turn,
        win=state.win,
        message=state.message,
    )
    for eid in sorted(state.position.keys()):
        pos = state.position[eid]
        kind = state.kind[eid]
        if kind == EntityKind.PLAYER:
            level.player_spawn = (pos.x, pos.y)
            continue
        if not (0 <= pos.x < level.width and 0 <= pos.y < level.height):
            continue
        level.add((pos.x, pos.y), Entity(kind=kind))
    return level
