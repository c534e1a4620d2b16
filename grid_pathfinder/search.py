"""Single-source path search over a :class:`~grid_pathfinder.grid.Grid`.

``PathSearch.find_path`` propagates unit costs outward from the start cell
through the grid's per-node ``value`` buffer, then walks back from the end
cell along strictly decreasing costs to recover the route.

Two open-list selection rules are supported (see :class:`SearchMode`):

* ``DIJKSTRA`` picks the candidate with the smallest cost, so the recovered
  path is a shortest one.
* ``GREEDY`` picks the candidate with the smallest Manhattan distance to the
  end cell, ignoring the cost already paid. This is greedy best-first, not
  A*: it usually expands fewer nodes but may return a longer path.

Both rules scan the open list linearly and keep the first minimum on ties.
The open list is not de-duplicated: a node whose cost drops is appended
again, and each entry expands with the cost it was appended with, even if
the node has since been reached more cheaply.

Every failure (same cell, walled end, unreachable end, reconstruction limit)
returns an empty ``PVector``. Only coordinates outside the grid raise, with
:class:`~grid_pathfinder.grid.OutOfRangeError`.

The search writes into the grid it was given, so two searches must never run
against the same grid at the same time.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger
from pyrsistent import pvector

from grid_pathfinder.config import GridConfig
from grid_pathfinder.grid import Grid, GridNode
from grid_pathfinder.types import (
    BACKTRACK_LIMIT,
    UNVISITED,
    CoordLike,
    Path,
    SearchMode,
    SearchOutcome,
    WorldPosition,
)
from grid_pathfinder.utils.math import argmin, manhattan_distance, round_to_cell

EMPTY_PATH: Path = pvector()


@dataclass(frozen=True)
class OpenEntry:
    """A node queued for expansion with the cost it was queued at."""

    node: GridNode
    value: int


@dataclass(frozen=True)
class SearchStats:
    """Diagnostics for one ``find_path`` call.

    Attributes:
        outcome: How the call ended.
        expanded: Nodes moved from the open list to the closed list.
        inserted: Open-list insertions, counting repeats of the same node.
        backtrack_steps: Iterations spent walking back from the end node.
    """

    outcome: SearchOutcome
    expanded: int = 0
    inserted: int = 0
    backtrack_steps: int = 0


class PathSearch:
    """Finds paths between grid cells using the grid's cost buffer."""

    def __init__(self, grid: Grid, mode: SearchMode = SearchMode.DIJKSTRA) -> None:
        self.grid = grid
        self.mode = SearchMode(mode)
        self.last_stats: Optional[SearchStats] = None

    @classmethod
    def from_config(
        cls, grid: Grid, config: Optional[GridConfig] = None
    ) -> "PathSearch":
        """Pick the selection rule from ``config`` (defaults to the grid's)."""
        config = config if config is not None else grid.config
        return cls(grid, config.search_mode)

    def heuristic(self, node: GridNode, end_node: GridNode) -> int:
        return manhattan_distance(node.coord, end_node.coord)

    def find_best_index(
        self, open_list: Sequence[OpenEntry], end_node: GridNode
    ) -> int:
        """Index of the open-list entry to expand next (first minimum wins)."""
        if self.mode == SearchMode.DIJKSTRA:
            scores = [entry.value for entry in open_list]
        else:
            scores = [self.heuristic(entry.node, end_node) for entry in open_list]
        return argmin(scores)

    def find_path(self, start: CoordLike, end: CoordLike) -> Path:
        """Return world positions from ``start`` to ``end`` inclusive.

        ``start`` and ``end`` may be continuous; both are rounded to the
        nearest cell. An empty result means there is no path.

        Raises:
            OutOfRangeError: A rounded endpoint lies outside the grid.
        """
        self.last_stats = None
        grid = self.grid
        start_node = grid.get_node(*round_to_cell(start))
        end_node = grid.get_node(*round_to_cell(end))
        grid.reset_values()

        if start_node is end_node:
            self._record(SearchOutcome.SAME_CELL)
            return EMPTY_PATH
        if end_node.is_wall:
            self._record(SearchOutcome.END_IS_WALL)
            return EMPTY_PATH
        if start_node.is_wall:
            # A walled start is never expanded, so nothing is reachable from it
            self._record(SearchOutcome.UNREACHABLE)
            return EMPTY_PATH

        start_node.value = 0
        open_list: List[OpenEntry] = [OpenEntry(start_node, 0)]
        closed_list: List[OpenEntry] = []
        inserted = 1

        while open_list:
            current = open_list.pop(self.find_best_index(open_list, end_node))
            closed_list.append(current)

            step_cost = current.value + 1
            for neighbor in grid.neighbors(current.node):
                if not neighbor.is_wall and neighbor.value > step_cost:
                    neighbor.value = step_cost
                    open_list.append(OpenEntry(neighbor, step_cost))
                    inserted += 1

            if current.node is end_node:
                return self._reconstruct(
                    start_node, end_node, len(closed_list), inserted
                )

        logger.debug(
            f"No path from {start_node.coord} to {end_node.coord} "
            f"after expanding {len(closed_list)} nodes"
        )
        self._record(SearchOutcome.UNREACHABLE, len(closed_list), inserted)
        return EMPTY_PATH

    def backtrack(
        self, start_node: GridNode, end_node: GridNode
    ) -> Tuple[Optional[Path], int]:
        """Walk from ``end_node`` to ``start_node`` along decreasing costs.

        Each iteration moves to the non-wall neighbor whose cost is the
        smallest below a threshold that starts at ``UNVISITED`` and only ever
        decreases over the whole walk. Returns the start-to-end path (``None``
        once ``BACKTRACK_LIMIT`` iterations pass without reaching the start)
        and the number of iterations used.
        """
        current = end_node
        threshold = UNVISITED
        positions: List[WorldPosition] = [end_node.position]
        steps = 0

        while True:
            candidates = self.grid.neighbors(current)
            for neighbor in candidates:
                if neighbor.value < threshold and not neighbor.is_wall:
                    current = neighbor
                    threshold = neighbor.value

            if positions[-1] != current.position:
                positions.append(current.position)

            if current is start_node:
                positions.reverse()
                return pvector(positions), steps

            steps += 1
            if steps > BACKTRACK_LIMIT:
                return None, steps

    def _reconstruct(
        self, start_node: GridNode, end_node: GridNode, expanded: int, inserted: int
    ) -> Path:
        path, steps = self.backtrack(start_node, end_node)
        if path is None:
            logger.warning(
                f"Backtracking from {end_node.coord} to {start_node.coord} exceeded "
                f"{BACKTRACK_LIMIT} steps; cost buffer is inconsistent"
            )
            self._record(SearchOutcome.SAFETY_LIMIT, expanded, inserted, steps)
            return EMPTY_PATH

        self._record(SearchOutcome.FOUND, expanded, inserted, steps)
        logger.debug(
            f"Found {len(path)}-point path from {start_node.coord} to {end_node.coord} "
            f"({self.mode}, {expanded} expanded)"
        )
        return path

    def _record(
        self,
        outcome: SearchOutcome,
        expanded: int = 0,
        inserted: int = 0,
        backtrack_steps: int = 0,
    ) -> None:
        self.last_stats = SearchStats(
            outcome=outcome,
            expanded=expanded,
            inserted=inserted,
            backtrack_steps=backtrack_steps,
        )


def find_path(
    grid: Grid,
    start: CoordLike,
    end: CoordLike,
    mode: Optional[SearchMode] = None,
) -> Path:
    """One-shot search; ``mode`` defaults to the grid config's search mode."""
    if mode is None:
        return PathSearch.from_config(grid).find_path(start, end)
    return PathSearch(grid, mode).find_path(start, end)
