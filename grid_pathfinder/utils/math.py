"""Distance and index helpers used by the search heuristics and the follower."""

import math
from typing import Any, Sequence

from grid_pathfinder.types import Coord, CoordLike, WorldPosition


def argmin(x: Sequence[Any]) -> int:
    """Return index of minimum value in ``x`` (first in tie)."""
    return min(range(len(x)), key=lambda i: x[i])


def manhattan_distance(a: Coord, b: Coord) -> int:
    """Return ``|a.x - b.x| + |a.y - b.y|`` for two lattice coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def world_distance(a: WorldPosition, b: WorldPosition) -> float:
    """Euclidean distance between two world-space points."""
    return math.dist(a, b)


def round_to_cell(coord: CoordLike) -> Coord:
    """Round a continuous 2D coordinate to the nearest lattice cell.

    Halves round up (``2.5 -> 3``, ``-0.5 -> 0``), unlike Python's banker's
    rounding in :func:`round`.
    """
    return (math.floor(coord[0] + 0.5), math.floor(coord[1] + 0.5))
