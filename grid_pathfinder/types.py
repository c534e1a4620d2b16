"""Common type aliases, constants and enumerations.

``Coord`` addresses a lattice cell, ``WorldPosition`` is the world-space point
cached on every node, and ``Path`` is the immutable result handed to callers
of :func:`grid_pathfinder.search.find_path`.
"""

from enum import StrEnum, auto
from typing import Tuple, Union

from pyrsistent.typing import PVector

Coord = Tuple[int, int]  # (x, y)

# Continuous 2D input, rounded onto the lattice before lookup
CoordLike = Tuple[Union[int, float], Union[int, float]]

WorldPosition = Tuple[float, float, float]

Path = PVector[WorldPosition]

# Cost of a node the active search has not reached yet
UNVISITED: int = 10000

# Upper bound on backtracking iterations before giving up on a reconstruction
BACKTRACK_LIMIT: int = 30000

# Neighbor expansion order: right, left, down, up
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class SearchMode(StrEnum):
    """Open-list selection rule used by :class:`PathSearch`."""

    DIJKSTRA = auto()
    GREEDY = auto()


class SearchOutcome(StrEnum):
    """How the last ``find_path`` call ended (reflected in ``SearchStats``)."""

    FOUND = auto()
    SAME_CELL = auto()
    END_IS_WALL = auto()
    UNREACHABLE = auto()
    SAFETY_LIMIT = auto()
