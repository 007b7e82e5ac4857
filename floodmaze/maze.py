"""The maze grid: cells, walls, start, target and robot position."""

from __future__ import annotations

import sys
from typing import TextIO

from .cell import SIZE, UNREACHABLE, Cell, CellType, Direction


class Maze:
    """A SIZE x SIZE grid of linked cells with a start corner and a central target."""

    size = SIZE

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.grid: list[list[Cell]] = []
        self.start: Cell | None = None
        self.target: Cell | None = None
        self.robot: Cell | None = None
        self.init_maze()

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    def init_maze(self) -> None:
        """Create the cells, link neighbours, set distances and outer walls."""
        start_x, start_y = 0, 0
        center = SIZE // 2
        self.grid = []
        for y in range(SIZE):
            row = []
            for x in range(SIZE):
                if (x, y) == (start_x, start_y):
                    cell_type = CellType.START
                elif (x, y) == (center, center):
                    cell_type = CellType.TARGET
                else:
                    cell_type = CellType.UNEXPLORED
                cell = Cell(x, y, cell_type)
                cell.distance = abs(x - center) + abs(y - center)
                row.append(cell)
            self.grid.append(row)

        self.start = self.grid[start_y][start_x]
        self.target = self.grid[center][center]

        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if y > 0:
                    cell.neighbors[Direction.UP] = self.grid[y - 1][x]
                if x < SIZE - 1:
                    cell.neighbors[Direction.RIGHT] = self.grid[y][x + 1]
                if y < SIZE - 1:
                    cell.neighbors[Direction.DOWN] = self.grid[y + 1][x]
                if x > 0:
                    cell.neighbors[Direction.LEFT] = self.grid[y][x - 1]

        self.set_perimeter_walls()

    def set_perimeter_walls(self) -> None:
        """Wall off the outer edge and drop neighbour links beyond it."""
        for row in self.grid:
            for cell in row:
                for direction in Direction:
                    if cell.is_boundary_wall(direction):
                        cell.set_wall(direction, True)
                        cell.neighbors[direction] = None
                        cell.in_perimeter = True

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y); IndexError outside the grid."""
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise IndexError(f"cell ({x}, {y}) is outside the maze")
        return self.grid[y][x]

    def set_wall(self, x: int, y: int, direction: Direction, exists: bool) -> None:
        """Add or remove a wall, keeping the neighbour's side in step."""
        direction = Direction(direction)
        here = self.cell(x, y)
        here.set_wall(direction, exists)
        neighbor = here.neighbors[direction]
        if neighbor is None:
            return
        back = direction.opposite()
        neighbor.set_wall(back, exists)
        if exists:
            print(
                f"Breaking connection between ({x}, {y}) and its neighbor "
                f"in direction {int(direction)}",
                file=self.out,
            )
            here.neighbors[direction] = None
            neighbor.neighbors[back] = None
        else:
            here.neighbors[direction] = neighbor
            neighbor.neighbors[back] = here

    def is_wall(self, x: int, y: int, direction: Direction) -> bool:
        return self.cell(x, y).is_wall(direction)

    def reset_visits(self) -> None:
        for row in self.grid:
            for cell in row:
                cell.visited = False

    def mark_goal_as_visited(self) -> None:
        self.target.type = CellType.TARGET
        self.target.visited = True

    def set_robot_position(self, cell: Cell) -> None:
        self.robot = cell
        cell.mark_visited()

    def _content(self, cell: Cell) -> str:
        if cell is self.robot:
            return " R "
        if cell is self.start:
            return " S "
        if cell is self.target:
            return " T "
        if cell.distance != UNREACHABLE:
            return f" {cell.distance} "
        return "   "

    def render(self) -> str:
        """Draw the maze with walls, robot, start, target and distances."""
        lines = ["+---" * SIZE + "+"]
        for y, row in enumerate(self.grid):
            parts = ["|"]
            for x, cell in enumerate(row):
                parts.append(self._content(cell))
                parts.append(
                    "|" if x < SIZE - 1 and cell.is_wall(Direction.RIGHT) else " "
                )
            parts.append("|")
            lines.append("".join(parts))
            if y < SIZE - 1:
                lines.append(
                    "".join(
                        "+---" if cell.is_wall(Direction.DOWN) else "+   "
                        for cell in row
                    )
                    + "+"
                )
        lines.append("+" + "---+" * SIZE)
        return "\n".join(lines) + "\n"

    def display(self) -> None:
        self.out.write(self.render())