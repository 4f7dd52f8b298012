"""
Park grid geometry.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Optional, Tuple
from enum import Enum, auto


class Direction(Enum):
    """Cardinal directions."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Position:
    """A cell on the grid. x is the column, y is the row."""
    x: int
    y: int

    def offset(self, direction: Direction) -> 'Position':
        """The unbounded neighbour in the given direction."""
        dx, dy = direction.delta()
        return Position(self.x + dx, self.y + dy)


class Grid:
    """
    The park where Lucy, the treats and the people live.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right
    - y increases downward

    Lucy wraps around the edges (the park is a torus for her).
    People do not: for them the edge is a wall.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid extent must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def in_bounds(self, position: Position) -> bool:
        """Check if a position is within grid bounds."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def wrap(self, position: Position) -> Position:
        """Fold any position back onto the grid."""
        return Position(position.x % self.width, position.y % self.height)

    def wrapped_neighbor(self, position: Position, direction: Direction) -> Position:
        """Neighbour in the given direction, wrapping around the edges."""
        return self.wrap(position.offset(direction))

    def bounded_neighbor(self, position: Position, direction: Direction) -> Optional[Position]:
        """Neighbour in the given direction, or None past the edge."""
        target = position.offset(direction)
        if not self.in_bounds(target):
            return None
        return target

    @property
    def center(self) -> Position:
        return Position(self.width // 2, self.height // 2)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
