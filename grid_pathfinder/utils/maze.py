"""Maze layouts for scenario setup.

Mazes are plain ``{(x, y): is_open}`` dicts. :func:`maze_walls` and
:func:`maze_mask` convert them into the forms accepted by
:meth:`grid_pathfinder.grid.Grid.set_walls` and
:meth:`grid_pathfinder.grid.Grid.from_mask`.
"""

import random

import numpy as np
import numpy.typing as npt

from grid_pathfinder.types import NEIGHBOR_OFFSETS, Coord

# Type aliases for clarity
MazeGrid = dict[Coord, bool]  # True = open/floor; False = wall


def generate_perfect_maze(
    width: int, height: int, rng: random.Random, open_edge: bool = True,
) -> MazeGrid:
    """Carve a perfect maze (exactly one route between open cells).

    Uses depth-first backtracking from ``(0, 0)`` over every other cell. With
    ``open_edge`` the last column/row is opened next to open cells so even
    dimensions do not leave a solid border.
    """
    maze: MazeGrid = {(x, y): False for x in range(width) for y in range(height)}

    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height

    maze[(0, 0)] = True
    stack: list[Coord] = [(0, 0)]
    while stack:
        x, y = stack[-1]
        candidates = [
            (dx, dy)
            for dx, dy in NEIGHBOR_OFFSETS
            if in_bounds(x + dx * 2, y + dy * 2) and not maze[(x + dx * 2, y + dy * 2)]
        ]
        if not candidates:
            stack.pop()
            continue
        dx, dy = rng.choice(candidates)
        maze[(x + dx, y + dy)] = True
        maze[(x + dx * 2, y + dy * 2)] = True
        stack.append((x + dx * 2, y + dy * 2))

    if open_edge:
        for y in range(height):
            if maze.get((width - 2, y), False):
                maze[(width - 1, y)] = True
        for x in range(width):
            if maze.get((x, height - 2), False):
                maze[(x, height - 1)] = True

    return maze


def maze_walls(maze: MazeGrid) -> list[Coord]:
    """Wall coordinates of ``maze`` in row-major order."""
    walls = [pos for pos, is_open in maze.items() if not is_open]
    return sorted(walls, key=lambda p: (p[1], p[0]))


def maze_mask(maze: MazeGrid, width: int, height: int) -> npt.NDArray[np.uint8]:
    """Occupancy mask indexed ``[y, x]``: ``1`` for walls, ``0`` for floor."""
    mask = np.ones((height, width), dtype=np.uint8)
    for (x, y), is_open in maze.items():
        if is_open:
            mask[y, x] = 0
    return mask
