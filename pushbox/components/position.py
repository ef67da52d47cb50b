from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """
    Grid position component.

    Attributes:
        x: X-coordinate on the grid (column).
        y: Y-coordinate on the grid (row, growing downward).
    """

    x: int
    y: int

    def offset(self, direction: "Direction") -> "Position":
        """Return the neighbouring position one step towards ``direction``."""
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass(frozen=True)
class Direction:
    """
    Unit step on the grid.

    Attributes:
        dx: Horizontal delta (-1, 0 or 1).
        dy: Vertical delta (-1, 0 or 1).
    """

    dx: int
    dy: int


UP = Direction(0, -1)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
RIGHT = Direction(1, 0)

CARDINAL_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
"""The only directions a move may be requested in."""
