import io

import pytest

from floodmaze.cell import SIZE, UNREACHABLE, CellType, Direction
from floodmaze.maze import Maze


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def maze(out):
    return Maze(out=out)


def test_start_and_target(maze):
    assert maze.start is maze.cell(0, 0)
    assert maze.start.type is CellType.START
    center = SIZE // 2
    assert maze.target is maze.cell(center, center)
    assert maze.target.type is CellType.TARGET
    assert maze.target.distance == 0
    assert maze.robot is None
    assert maze.size == SIZE


def test_initial_distances_step_by_one(maze):
    for y in range(SIZE):
        for x in range(SIZE):
            cell = maze.cell(x, y)
            for direction in Direction:
                neighbor = cell.neighbors[direction]
                if neighbor is not None:
                    assert abs(neighbor.distance - cell.distance) == 1


def test_neighbors_are_symmetric(maze):
    for y in range(SIZE):
        for x in range(SIZE):
            cell = maze.cell(x, y)
            for direction in Direction:
                neighbor = cell.neighbors[direction]
                if neighbor is not None:
                    assert neighbor.neighbors[direction.opposite()] is cell


def test_perimeter_walls(maze):
    for i in range(SIZE):
        assert maze.is_wall(i, 0, Direction.UP)
        assert maze.cell(i, 0).neighbors[Direction.UP] is None
        assert maze.is_wall(i, SIZE - 1, Direction.DOWN)
        assert maze.is_wall(0, i, Direction.LEFT)
        assert maze.is_wall(SIZE - 1, i, Direction.RIGHT)
        assert maze.cell(SIZE - 1, i).neighbors[Direction.RIGHT] is None
    assert not maze.is_wall(2, 2, Direction.UP)
    assert maze.cell(0, 0).in_perimeter
    assert not maze.cell(2, 2).in_perimeter


def test_set_wall_syncs_and_breaks_link(maze, out):
    maze.set_wall(1, 1, Direction.RIGHT, True)
    assert maze.is_wall(1, 1, Direction.RIGHT)
    assert maze.is_wall(2, 1, Direction.LEFT)
    assert maze.cell(1, 1).neighbors[Direction.RIGHT] is None
    assert maze.cell(2, 1).neighbors[Direction.LEFT] is None
    assert out.getvalue() == (
        "Breaking connection between (1, 1) and its neighbor in direction 1\n"
    )


def test_set_wall_on_boundary_touches_only_cell(maze, out):
    maze.set_wall(0, 0, Direction.UP, False)
    assert not maze.is_wall(0, 0, Direction.UP)
    assert out.getvalue() == ""


def test_removing_wall_after_break_keeps_link_broken(maze):
    maze.set_wall(1, 1, Direction.DOWN, True)
    maze.set_wall(1, 1, Direction.DOWN, False)
    assert not maze.is_wall(1, 1, Direction.DOWN)
    assert maze.is_wall(1, 2, Direction.UP)
    assert maze.cell(1, 1).neighbors[Direction.DOWN] is None


def test_cell_out_of_range(maze):
    with pytest.raises(IndexError):
        maze.cell(SIZE, 0)
    with pytest.raises(IndexError):
        maze.cell(0, -1)
    with pytest.raises(IndexError):
        maze.set_wall(-1, 2, Direction.UP, True)


def test_set_robot_position_marks_visited(maze):
    cell = maze.cell(1, 0)
    maze.set_robot_position(cell)
    assert maze.robot is cell
    assert cell.visited
    assert cell.type is CellType.EXPLORED


def test_reset_visits(maze):
    maze.set_robot_position(maze.cell(1, 0))
    maze.mark_goal_as_visited()
    maze.reset_visits()
    assert not any(cell.visited for row in maze.grid for cell in row)


def test_mark_goal_as_visited(maze):
    maze.target.type = CellType.EXPLORED
    maze.mark_goal_as_visited()
    assert maze.target.visited
    assert maze.target.type is CellType.TARGET


def test_render_borders(maze):
    lines = maze.render().splitlines()
    assert lines[0] == "+---" * SIZE + "+"
    assert lines[-1] == "+" + "---+" * SIZE
    assert len(lines) == 2 * SIZE + 1
    assert lines[1].startswith("| S ")
    assert all(line.startswith("|") and line.endswith("|") for line in lines[1::2])


def test_render_marks_robot_and_target(maze):
    maze.set_robot_position(maze.cell(1, 0))
    lines = maze.render().splitlines()
    assert " R " in lines[1]
    center = SIZE // 2
    assert " T " in lines[1 + 2 * center]


def test_render_shows_added_walls(maze):
    before = maze.render()
    assert "|" not in before.splitlines()[3][1:-1]
    maze.set_wall(0, 1, Direction.RIGHT, True)
    maze.set_wall(0, 0, Direction.DOWN, True)
    lines = maze.render().splitlines()
    assert "|" in lines[3][1:-1]
    assert lines[2].startswith("+---")


def test_render_blank_for_unreachable(maze):
    maze.cell(4, 4).distance = UNREACHABLE
    row = maze.render().splitlines()[1 + 2 * (SIZE - 1)]
    assert row.endswith("    |")


def test_display_writes_render(maze, out):
    maze.display()
    assert out.getvalue() == maze.render()