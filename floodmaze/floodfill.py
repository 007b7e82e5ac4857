"""Flood-fill distances from the target and step-by-step guidance of a robot."""

from __future__ import annotations

import sys
import time
from typing import TYPE_CHECKING, TextIO

from .cell import SIZE, UNREACHABLE, Cell, Direction
from .maze import Maze
from .node_queue import NodeQueue

if TYPE_CHECKING:
    from .robot import Robot

PATH_CAPACITY = 256
"""Largest number of cells a computed path may hold."""

_STEPS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Floodfill:
    """Keeps flood distances on a maze and drives a robot towards the target."""

    def __init__(
        self,
        maze: Maze,
        *,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        delay: float = 1.5,
    ) -> None:
        self.maze = maze
        self.path: list[Cell] = []
        self.delay = delay
        self._stdin = stdin
        self._out = out
        self._pending = ""
        self.update_flood_values()

    @property
    def out(self) -> TextIO:
        return self._out or self.maze.out

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    def reset_flood_values(self) -> None:
        """Mark every cell unreachable and forget its predecessor."""
        for row in self.maze.grid:
            for cell in row:
                cell.distance = UNREACHABLE
                cell.previous = None

    def reflood(self, start: Cell | None) -> None:
        """Recompute all distances after the walls have changed."""
        self.update_flood_values()

    def is_trapped(self, current: Cell) -> bool:
        """True if no open neighbour has been reached by the flood."""
        for direction in Direction:
            if current.is_wall(direction):
                continue
            neighbor = current.neighbors[direction]
            if neighbor is not None and neighbor.distance < UNREACHABLE:
                return False
        return True

    def update_flood_values(self) -> None:
        """Breadth-first flood of distances outward from the target."""
        self.reset_flood_values()
        goal = self.maze.target
        goal.distance = 0
        queue = NodeQueue()
        queue.push(goal.x, goal.y, goal.distance)
        while not queue.is_empty():
            node = queue.pop()
            current = self.maze.cell(node.x, node.y)
            for direction in Direction:
                dx, dy = _STEPS[direction]
                nx, ny = current.x + dx, current.y + dy
                if not (0 <= nx < SIZE and 0 <= ny < SIZE):
                    continue
                if current.is_wall(direction):
                    continue
                neighbor = self.maze.cell(nx, ny)
                if neighbor.distance > current.distance + 1:
                    neighbor.distance = current.distance + 1
                    neighbor.previous = current
                    queue.push(nx, ny, neighbor.distance)

    def best_move(self, current: Cell) -> Cell | None:
        """The first open neighbour with a lower distance than the lowest seen so far."""
        next_cell = None
        min_distance = current.distance
        for direction in Direction:
            if current.is_wall(direction):
                continue
            neighbor = current.neighbors[direction]
            if neighbor is not None and neighbor.distance < min_distance:
                min_distance = neighbor.distance
                next_cell = neighbor
        return next_cell

    def _record(self, cell: Cell) -> None:
        if len(self.path) >= PATH_CAPACITY:
            raise OverflowError(f"path longer than {PATH_CAPACITY} cells")
        self.path.append(cell)

    def compute_path(self, robot: Robot, current: Cell) -> bool:
        """Walk the robot to the target; False if it gets stuck."""
        while current is not self.maze.target:
            self._record(current)
            next_cell = self.best_move(current)
            if next_cell is None:
                if self.is_trapped(current):
                    return False
                self.reflood(current)
                next_cell = self.best_move(current)
                if next_cell is None:
                    return False
            robot.move(next_cell)
            current = robot.position
            if self.delay > 0:
                time.sleep(self.delay)
            self.handle_user_input(current)
            self.maze.display()
        self._record(current)
        return True

    def clear_path(self) -> None:
        self.path.clear()

    def format_path(self) -> str:
        cells = "".join(f"({cell.x}, {cell.y}) " for cell in self.path)
        return f"Path from start to goal:\n{cells}\n"

    def display_path(self) -> None:
        self.out.write(self.format_path())

    def _getc(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self.stdin.read(1)

    def _read_char(self) -> str:
        """Next non-blank character, or "" at end of input."""
        while True:
            char = self._getc()
            if char == "" or not char.isspace():
                return char

    def _read_int(self) -> int | None:
        char = self._read_char()
        if char == "":
            return None
        sign = ""
        if char in "+-":
            sign = char
            char = self._getc()
        digits = ""
        while char.isdigit():
            digits += char
            char = self._getc()
        if char:
            self._pending = char
        return int(sign + digits) if digits else None

    def handle_user_input(self, current: Cell) -> None:
        """Let the user continue or add walls, then reflood if walls were added."""
        out = self.out
        out.write("Press 'l' to continue or 'w' to add walls: ")
        choice = self._read_char()

        if choice == "w":
            out.write("How many walls do you want to add? (1–4): ")
            count = self._read_int()
            if count is None or not 1 <= count <= 4:
                out.write(
                    "Invalid number of walls. Please enter a number between 1 and 4.\n"
                )
                return

            for number in range(1, count + 1):
                out.write(f"\nWall #{number}:\n")
                out.write("Enter x coordinate: ")
                x = self._read_int()
                out.write("Enter y coordinate: ")
                y = self._read_int()
                out.write("Enter direction (U/D/L/R): ")
                letter = self._read_char()
                try:
                    direction = Direction.from_letter(letter)
                except ValueError:
                    out.write("Invalid direction! Skipping this wall.\n")
                    continue
                if x is None or y is None:
                    out.write("Error: Invalid cell coordinates.\n")
                    continue
                try:
                    self.maze.set_wall(x, y, direction, True)
                except IndexError:
                    out.write("Error: Invalid cell coordinates.\n")
                    continue
                out.write(f"Wall added at ({x}, {y}) in direction {letter}\n")
                out.write(self.maze.cell(x, y).neighbors_report())

            self.reflood(self.maze.robot)
            out.write("After reflooding, distances updated.\n")
        elif choice != "l":
            out.write("Invalid input. Press 'l' to continue or 'w' to add walls.\n")