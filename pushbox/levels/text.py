"""Map text codec.

Map text is plain text with one board row per line. Recognized characters:

===========  =============================  =========
Character    Entities                       Spawn
===========  =============================  =========
``X``        wall
``O``        target spot
``B``        box                            box
``8``        target spot + box (stacked)    box
``P``        none                           player
===========  =============================  =========

Every other character (space included) is empty floor. The board is as
wide as the widest run up to a recognized character and as tall as the
last row holding one, so trailing blank rows and columns never count.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from pushbox.components import EntityKind
from pushbox.objectives import default_objective_fn
from pushbox.state import State
from pushbox.types import ObjectiveFn
from .convert import to_state
from .entity import Entity
from .factories import create_box, create_target_spot, create_wall
from .grid import DEFAULT_PLAYER_SPAWN, Level, Position

WALL_CHAR = "X"
TARGET_SPOT_CHAR = "O"
BOX_CHAR = "B"
BOX_ON_TARGET_CHAR = "8"
PLAYER_CHAR = "P"
FLOOR_CHAR = " "

CHAR_FACTORIES: Dict[str, Tuple[Callable[[], Entity], ...]] = {
    WALL_CHAR: (create_wall,),
    TARGET_SPOT_CHAR: (create_target_spot,),
    BOX_CHAR: (create_box,),
    BOX_ON_TARGET_CHAR: (create_target_spot, create_box),
    PLAYER_CHAR: (),
}
"""Blueprints created for each recognized character, bottom layer first."""


def parse_level(
    text: str, objective_fn: ObjectiveFn = default_objective_fn
) -> Level:
    """Parse map text into a mutable ``Level``.

    Args:
        text (str): Raw map text; rows are separated by ``\\n``.
        objective_fn (ObjectiveFn): Win condition stored on the level.

    Returns:
        Level: Level sized to the recognized characters. Text without any
            recognized character yields a ``0 x 0`` level.
    """
    placements: List[Tuple[Position, Entity]] = []
    player_spawn: Position = DEFAULT_PLAYER_SPAWN
    width = 0
    height = 0

    for y, row in enumerate(text.split("\n")):
        row_width = 0
        for x, char in enumerate(row):
            factories = CHAR_FACTORIES.get(char)
            if factories is None:
                continue
            row_width = x + 1
            if char == PLAYER_CHAR:
                player_spawn = (x, y)
            for factory in factories:
                placements.append(((x, y), factory()))
        width = max(width, row_width)
        if row_width:
            height = y + 1

    level = Level(
        width=width,
        height=height,
        objective_fn=objective_fn,
        player_spawn=player_spawn,
    )
    level.add_many(placements)
    return level


def load_from_text(
    text: str, objective_fn: ObjectiveFn = default_objective_fn
) -> State:
    """Parse map text straight into a runtime ``State`` (without a player)."""
    return to_state(parse_level(text, objective_fn=objective_fn))


def _cell_char(kinds: set[EntityKind]) -> str:
    if EntityKind.PLAYER in kinds:
        return PLAYER_CHAR
    if EntityKind.BOX in kinds:
        return BOX_ON_TARGET_CHAR if EntityKind.TARGET_SPOT in kinds else BOX_CHAR
    if EntityKind.TARGET_SPOT in kinds:
        return TARGET_SPOT_CHAR
    if EntityKind.WALL in kinds:
        return WALL_CHAR
    return FLOOR_CHAR


def format_level(state: State, player_pos: Optional[Position] = None) -> str:
    """Write the current board back to map text.

    Entities are written at their current positions. A player standing on a
    target spot is written as ``P``; the format has no glyph for that pair.
    If the state holds no player, ``player_pos`` (default: the state's player
    spawn) is written as ``P`` instead. Entities outside the board rectangle
    are left out.

    Args:
        state (State): State to serialize.
        player_pos (Position | None): Player coordinate to use when the state
            has no player entity.

    Returns:
        str: Map text, rows joined with ``\\n`` and right-stripped.
    """
    cells: Dict[Position, set[EntityKind]] = {}
    for eid, pos in state.position.items():
        cells.setdefault((pos.x, pos.y), set()).add(state.kind[eid])

    if EntityKind.PLAYER not in state.kind.values():
        if player_pos is None:
            player_pos = (state.player_spawn.x, state.player_spawn.y)
        cells.setdefault(player_pos, set()).add(EntityKind.PLAYER)

    rows: List[str] = []
    for y in range(state.height):
        row = "".join(
            _cell_char(cells.get((x, y), set())) for x in range(state.width)
        )
        rows.append(row.rstrip())
    return "\n".join(rows)
