"""Mutable grid/level representation.

The `pushbox.levels.grid.Level` dataclass is an alternative, mutable
representation of a `pushbox.state.State`. It provides a simple grid
editing API (add/remove/move) and stores the configuration needed to
build a runtime state.

Use `pushbox.levels.factories` to create blueprints conveniently,
`pushbox.levels.text` to read map text into a ``Level``, and
`pushbox.levels.convert` to convert between this representation and the
immutable runtime `pushbox.state.State`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from pushbox.components import EntityKind
from pushbox.types import ObjectiveFn
from pushbox.objectives import default_objective_fn
from .entity import Entity

# Grid coordinate alias (x, y)
Position = Tuple[int, int]

DEFAULT_PLAYER_SPAWN: Position = (1, 1)
"""Player spawn used when the map text has no ``P``."""


@dataclass
class Level:
    """
    Grid-centric, mutable level representation.

    - ``grid[y][x]`` is a list of `pushbox.levels.entity.Entity` blueprints at that cell.
    - ``player_spawn`` is where the player will be spawned; players are never
      stored in the grid.
    - ``box_spawns`` records every box coordinate in the order the map listed them.
    """

    width: int
    height: int
    objective_fn: ObjectiveFn = default_objective_fn
    player_spawn: Position = DEFAULT_PLAYER_SPAWN
    box_spawns: List[Position] = field(default_factory=list)

    # 2D array of cells: each cell holds a list of Entity
    grid: List[List[List[Entity]]] = field(init=False)

    # Optional meta (carried through conversion)
    turn: int = 0
    win: bool = False
    message: Optional[str] = None

    def __post_init__(self) -> None:
        # Initialize empty grid
        self.grid = [[[] for _ in range(self.width)] for _ in range(self.height)]

    # -------- Grid editing API --------

    def add(self, pos: Position, obj: Entity) -> None:
        """
        Place an `pushbox.levels.entity.Entity` into the cell at pos (x, y).
        Boxes are recorded in ``box_spawns``.
        """
        x, y = pos
        self._check_bounds(x, y)
        if obj.kind == EntityKind.PLAYER:
            raise ValueError("Players are spawned, not placed; set player_spawn instead")
        self.grid[y][x].append(obj)
        if obj.kind == EntityKind.BOX:
            self.box_spawns.append((x, y))

    def add_many(self, items: List[Tuple[Position, Entity]]) -> None:
        """
        Place multiple entities. Each entry is ``(pos, obj)``.
        """
        for pos, obj in items:
            self.add(pos, obj)

    def remove(self, pos: Position, obj: Entity) -> bool:
        """
        Remove a specific entity (by identity) from the cell at pos.
        Returns True if the object was found and removed, False otherwise.
        """
        x, y = pos
        self._check_bounds(x, y)
        cell = self.grid[y][x]
        for i, o in enumerate(cell):
            if o is obj:
                del cell[i]
                if obj.kind == EntityKind.BOX:
                    self.box_spawns.remove((x, y))
                return True
        return False

    def remove_if(self, pos: Position, predicate: Callable[[Entity], bool]) -> int:
        """
        Remove all objects in the cell at pos for which predicate(obj) is True.
        Returns the number of removed objects.
        """
        x, y = pos
        self._check_bounds(x, y)
        doomed = [o for o in self.grid[y][x] if predicate(o)]
        for obj in doomed:
            self.remove(pos, obj)
        return len(doomed)

    def move_obj(self, from_pos: Position, obj: Entity, to_pos: Position) -> bool:
        """
        Move a specific entity (by identity) from one cell to another.
        Returns True if moved (i.e., it was found in the source cell), False otherwise.
        """
        if not self.remove(from_pos, obj):
            return False
        self.add(to_pos, obj)
        return True

    def clear_cell(self, pos: Position) -> int:
        """
        Remove all objects from the cell at pos. Returns the number of removed objects.
        """
        return self.remove_if(pos, lambda _: True)

    def objects_at(self, pos: Position) -> List[Entity]:
        """
        Return a shallow copy of the list of objects at pos.
        """
        x, y = pos
        self._check_bounds(x, y)
        return list(self.grid[y][x])

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
