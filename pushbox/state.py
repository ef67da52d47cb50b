from dataclasses import dataclass
from typing import Optional
from pyrsistent import PMap, PVector, pmap, pvector

from pushbox.components import EntityKind, Position
from pushbox.types import EntityID, ObjectiveFn


@dataclass(frozen=True)
class State:
    """Immutable board state for one level.

    Attributes:
        width (int): Board width in tiles (widest recognized map row).
        height (int): Board height in tiles (last recognized map row + 1).
        objective_fn (ObjectiveFn): Objective function determining win condition.
        kind (PMap[EntityID, EntityKind]): Kind of every entity on the board.
        position (PMap[EntityID, Position]): Current position of every entity.
        spawn (PMap[EntityID, Position]): Position each entity returns to on reset.
        player_spawn (Position): Coordinate the player is spawned at.
        box_spawns (PVector[Position]): Coordinates of every box in the map text,
            in parse order.
        moved (PVector[EntityID]): Entities displaced by the current action,
            destination first, pusher last.
        turn (int): Number of directional actions processed.
        win (bool): True if objective met.
        message (str | None): Optional status message for display.
    """

    # Level
    width: int
    height: int
    objective_fn: "ObjectiveFn"

    # Entities
    kind: PMap[EntityID, EntityKind] = pmap()
    position: PMap[EntityID, Position] = pmap()
    spawn: PMap[EntityID, Position] = pmap()

    # Spawns
    player_spawn: Position = Position(1, 1)
    box_spawns: PVector[Position] = pvector()

    # Per-action bookkeeping
    moved: PVector[EntityID] = pvector()

    # Status
    turn: int = 0
    win: bool = False
    message: Optional[str] = None
