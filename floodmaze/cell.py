"""Maze cells, directions and cell types."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import TextIO

SIZE = 5
"""Width and height of the square maze grid."""

UNREACHABLE = 2_147_483_647
"""Distance given to cells that the flood has not reached."""


class CellType(Enum):
    """Role of a cell in the maze."""

    PATH = auto()
    CORNER = auto()
    JUNCTION3 = auto()
    JUNCTION4 = auto()
    DEAD_END = auto()
    START = auto()
    TARGET = auto()
    UNEXPLORED = auto()
    EXPLORED = auto()


class Direction(IntEnum):
    """The four compass directions, usable as indexes into wall and neighbour lists."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return Direction((self + 2) % 4)

    @staticmethod
    def from_letter(letter: str) -> Direction:
        """Parse one of the letters U, D, L, R."""
        try:
            return _LETTERS[letter]
        except KeyError:
            raise ValueError(f"invalid direction letter: {letter!r}") from None


_LETTERS = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


@dataclass(eq=False)
class Cell:
    """One square of the maze with its walls, neighbours and search state."""

    x: int = 0
    y: int = 0
    type: CellType = CellType.UNEXPLORED
    walls: list[bool] = field(default_factory=lambda: [False] * 4)
    neighbors: list[Cell | None] = field(
        default_factory=lambda: [None] * 4, repr=False
    )
    distance: int = 0
    visited: bool = False
    in_perimeter: bool = False
    previous: Cell | None = field(default=None, repr=False)

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def reset(self) -> None:
        """Clear search state and inner walls; START and TARGET keep their type."""
        if self.type not in (CellType.START, CellType.TARGET):
            self.type = CellType.UNEXPLORED
        self.distance = 0
        self.visited = False
        self.previous = None
        for direction in Direction:
            if not self.in_perimeter or not self.is_boundary_wall(direction):
                self.walls[direction] = False

    def set_wall(self, direction: Direction, exists: bool) -> None:
        self.walls[direction] = exists

    def is_wall(self, direction: Direction) -> bool:
        return self.walls[direction]

    def is_boundary_wall(self, direction: Direction) -> bool:
        """Whether the wall on this side lies on the outer edge of the maze."""
        if direction is Direction.UP:
            return self.y == 0
        if direction is Direction.DOWN:
            return self.y == SIZE - 1
        if direction is Direction.LEFT:
            return self.x == 0
        return self.x == SIZE - 1

    def opposite_dir(self, direction: Direction) -> Direction:
        return Direction(direction).opposite()

    def mark_visited(self) -> None:
        """Turn an unexplored cell into an explored, visited one."""
        if self.type is CellType.UNEXPLORED:
            self.type = CellType.EXPLORED
            self.visited = True

    def can_move(self, direction: Direction) -> bool:
        """True if a neighbour exists that way and no wall is in between."""
        return self.neighbors[direction] is not None and not self.is_wall(direction)

    def neighbors_report(self) -> str:
        """Describe each neighbour and wall, one line per direction."""
        lines = [f"Neighbors of cell ({self.x}, {self.y}):"]
        for direction in Direction:
            neighbor = self.neighbors[direction]
            where = (
                f"Neighbor at ({neighbor.x}, {neighbor.y})"
                if neighbor is not None
                else "No neighbor"
            )
            wall = " [WALL PRESENT]" if self.is_wall(direction) else " [NO WALL]"
            lines.append(f"Direction {direction.name}: {where}{wall}")
        return "\n".join(lines) + "\n"

    def print_neighbors(self, out: TextIO | None = None) -> None:
        (out or sys.stdout).write(self.neighbors_report())