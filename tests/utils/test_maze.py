# tests/utils/test_maze.py

import random

import pytest

from grid_pathfinder.grid import Grid
from grid_pathfinder.search import PathSearch
from grid_pathfinder.types import SearchMode
from grid_pathfinder.utils.maze import generate_perfect_maze, maze_mask, maze_walls
from tests.test_utils import (
    is_unit_step_path,
    make_grid,
    shortest_route,
    thin_walls,
    to_cells,
)


def test_perfect_maze_covers_grid_and_opens_carve_cells() -> None:
    maze = generate_perfect_maze(9, 7, random.Random(0))
    assert len(maze) == 63
    assert all(maze[(x, y)] for x in range(0, 9, 2) for y in range(0, 7, 2))
    # Odd/odd cells are never carved
    assert not any(maze[(x, y)] for x in range(1, 9, 2) for y in range(1, 7, 2))


def test_maze_is_deterministic_for_seed() -> None:
    assert generate_perfect_maze(11, 11, random.Random(7)) == generate_perfect_maze(
        11, 11, random.Random(7)
    )


def test_maze_walls_and_mask_agree() -> None:
    maze = generate_perfect_maze(7, 5, random.Random(3))
    walls = maze_walls(maze)
    mask = maze_mask(maze, 7, 5)
    assert mask.shape == (5, 7)
    assert int(mask.sum()) == len(walls)
    assert all(mask[y, x] == 1 for x, y in walls)
    assert walls == sorted(walls, key=lambda p: (p[1], p[0]))
    assert make_grid(7, 5, walls=walls).walls == Grid.from_mask(mask).walls


def test_thin_walls_extremes() -> None:
    maze = generate_perfect_maze(9, 9, random.Random(1))
    assert thin_walls(maze, 1.0, random.Random(0)) == maze
    assert all(thin_walls(maze, 0.0, random.Random(0)).values())
    half = thin_walls(maze, 0.5, random.Random(0))
    assert len(maze_walls(half)) == len(maze_walls(maze)) // 2


def test_shortest_route_edge_cases() -> None:
    maze = {(0, 0): True, (1, 0): False, (2, 0): True}
    assert shortest_route(maze, (0, 0), (0, 0)) == [(0, 0)]
    assert shortest_route(maze, (0, 0), (2, 0)) == []


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_dijkstra_matches_unique_route_in_perfect_maze(seed: int) -> None:
    maze = generate_perfect_maze(9, 9, random.Random(seed))
    grid = Grid.from_mask(maze_mask(maze, 9, 9), spacing=10.0)
    path = PathSearch(grid).find_path((0, 0), (8, 8))
    assert to_cells(path, spacing=10.0) == shortest_route(maze, (0, 0), (8, 8))


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_search_modes_on_maze_with_loops(seed: int) -> None:
    rng = random.Random(seed)
    maze = thin_walls(generate_perfect_maze(15, 15, rng), 0.6, rng)
    grid = Grid.from_mask(maze_mask(maze, 15, 15))
    shortest = shortest_route(maze, (0, 0), (14, 14))
    assert shortest

    dijkstra = to_cells(PathSearch(grid, SearchMode.DIJKSTRA).find_path((0, 0), (14, 14)))
    greedy = to_cells(PathSearch(grid, SearchMode.GREEDY).find_path((0, 0), (14, 14)))

    assert len(dijkstra) == len(shortest)
    assert len(greedy) >= len(shortest)
    for cells in (dijkstra, greedy):
        assert cells[0] == (0, 0) and cells[-1] == (14, 14)
        assert is_unit_step_path(cells)
        assert set(cells).isdisjoint(grid.walls)
