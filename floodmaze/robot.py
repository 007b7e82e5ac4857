"""A robot that walks a maze to its target and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from .cell import Cell
from .maze import Maze

if TYPE_CHECKING:
    from .floodfill import Floodfill


class Robot:
    """Tracks its cell in a maze and follows flood-fill guidance."""

    def __init__(self, maze: Maze, out: TextIO | None = None) -> None:
        self.maze = maze
        self._out = out
        self._position: Cell = maze.start
        maze.set_robot_position(self._position)
        self.out.write(
            f"Robot initialized at ({self._position.x}, {self._position.y})\n"
        )

    @property
    def out(self) -> TextIO:
        return self._out or self.maze.out

    @property
    def position(self) -> Cell:
        return self._position

    @position.setter
    def position(self, cell: Cell | None) -> None:
        if cell is None:
            self.out.write("Invalid position: Cell is null.\n")
            return
        self._position = cell
        self.maze.set_robot_position(cell)

    def move(self, next_cell: Cell | None) -> None:
        """Step to the given cell and redraw the maze."""
        if next_cell is None:
            self.out.write("Invalid move: No next cell available.\n")
            return
        self._position = next_cell
        self.maze.set_robot_position(next_cell)
        self.out.write(f"Robot moved to ({next_cell.x}, {next_cell.y})\n")
        self.maze.display()

    def solve_maze(self, floodfill: Floodfill) -> bool:
        """Go to the target, then back to the start; False if the way is blocked."""
        floodfill.clear_path()
        current = self.position
        self.out.write(f"Current Robot position: ({current.x}, {current.y})\n")
        if not floodfill.compute_path(self, current):
            self.out.write(
                "Navigation failed: Robot is trapped or no valid path found.\n"
            )
            return False
        self.maze.mark_goal_as_visited()
        self.out.write("Goal reached!\n")
        self.return_to_start(floodfill)
        return True

    def return_to_start(self, floodfill: Floodfill) -> None:
        """Retrace the recorded path in reverse until the start cell."""
        self.out.write("Returning to start...\n")
        for cell in reversed(floodfill.path):
            self.move(cell)
            if cell is self.maze.start:
                self.out.write("Robot returned back to the start cell\n")
                break
        floodfill.display_path()