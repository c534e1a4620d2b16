"""grid_pathfinder
=================

Shortest-path search on a fixed rectangular lattice with impassable cells.

Typical use::

    from grid_pathfinder import Grid, GridConfig, PathSearch

    grid = Grid(GridConfig(width=5, height=5, spacing=100.0))
    grid.set_walls([(1, 1), (1, 2)])
    path = PathSearch.from_config(grid).find_path((0, 0), (4, 4))

``path`` is an immutable sequence of world positions, empty when no path
exists. Library logging is disabled by default; see
:func:`grid_pathfinder.utils.log.configure_logging`.
"""

from loguru import logger

from .config import GridConfig
from .follower import WaypointFollower
from .grid import Grid, GridNode, OutOfRangeError
from .search import EMPTY_PATH, OpenEntry, PathSearch, SearchStats, find_path
from .types import (
    BACKTRACK_LIMIT,
    UNVISITED,
    Coord,
    CoordLike,
    Path,
    SearchMode,
    SearchOutcome,
    WorldPosition,
)

logger.disable("grid_pathfinder")

__all__ = [
    # Configuration
    "GridConfig",
    # Grid
    "Grid",
    "GridNode",
    "OutOfRangeError",
    # Search
    "EMPTY_PATH",
    "OpenEntry",
    "PathSearch",
    "SearchStats",
    "find_path",
    # Consumers
    "WaypointFollower",
    # Types
    "BACKTRACK_LIMIT",
    "UNVISITED",
    "Coord",
    "CoordLike",
    "Path",
    "SearchMode",
    "SearchOutcome",
    "WorldPosition",
]
