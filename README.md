# floodmaze

A small terminal simulation of a maze-solving robot. A robot starts in the
top-left corner `(0, 0)` of a 5x5 maze and uses flood fill to reach the
target cell in the centre `(2, 2)`, then walks its recorded path back to the
start.

Between steps you can add walls to the maze. Distances are then recomputed
from the target and the robot picks a new route.

## Installing

```
pip install .
```

## Running

```
floodmaze
floodmaze --delay 0
```

`--delay` sets how many seconds to pause after each step (default `1.5`).

The maze is drawn after each move. `R` marks the robot, `S` the start,
`T` the target, and every other cell shows its flood-fill distance to the
target; cells the flood cannot reach are left blank. After each step you
are asked:

```
Press 'l' to continue or 'w' to add walls:
```

- `l` lets the robot take its next step.
- `w` asks how many walls to add (1 to 4), then for each wall its `x` and `y`
  coordinates and a direction `U`, `D`, `L` or `R`. A wall is shared by both
  cells on either side of it. An unknown direction skips that wall, and
  coordinates outside the grid are reported as invalid. After the walls are
  added, distances are recomputed.
- Any other answer prints a reminder and the robot carries on.

If walls leave the robot with no route to the target, the run stops with a
message saying navigation failed. Once the target is reached the robot
returns to the start and the path taken is printed.

## Using it as a library

```python
from floodmaze.maze import Maze
from floodmaze.cell import Direction
from floodmaze.floodfill import Floodfill

maze = Maze()
maze.set_wall(1, 2, Direction.RIGHT, True)
floodfill = Floodfill(maze)
print(maze.render())
print(floodfill.best_move(maze.cell(0, 0)))
```

- `floodmaze.cell` has `Cell`, `CellType` and `Direction`
  (`Direction.opposite()`, `Direction.from_letter("U")`).
- `floodmaze.maze.Maze` holds the grid. `cell(x, y)` raises `IndexError`
  outside the grid; `set_wall`, `is_wall`, `render` and `display` work on it.
  Pass `out=` to send its printed output to another stream.
- `floodmaze.floodfill.Floodfill` computes distances from the target
  (`update_flood_values`), chooses moves (`best_move`, `is_trapped`) and
  records the path (`path`, `format_path`, `display_path`). It takes
  keyword arguments `stdin=`, `out=` and `delay=`, so a run can be scripted
  with an `io.StringIO` and no pause.
- `floodmaze.robot.Robot` drives a full run with `solve_maze(floodfill)`,
  which returns `False` when the robot is trapped.
- `floodmaze.node_queue.NodeQueue` is the first-in, first-out queue used by
  the flood; `pop()` on an empty queue raises `IndexError`.

## What it does not do

The maze is always 5x5 with the start at `(0, 0)` and the target in the
centre. There is no way to load or save mazes, and walls can only be added
during a run, not removed.

## Tests

```
pip install .[test]
pytest
```