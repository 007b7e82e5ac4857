"""Command line entry: solve the default maze interactively."""

from __future__ import annotations

import argparse

from .floodfill import Floodfill
from .maze import Maze
from .robot import Robot


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="floodmaze",
        description="Guide a robot through a maze with flood fill.",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=1.5,
        help="seconds to pause after each step (default: 1.5)",
    )
    args = parser.parse_args(argv)

    maze = Maze()
    robot = Robot(maze)
    maze.display()
    floodfill = Floodfill(maze, delay=args.delay)
    robot.solve_maze(floodfill)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())