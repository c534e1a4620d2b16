"""Fixed-size rectangular lattice of search nodes.

The grid owns every :class:`GridNode`, indexed ``nodes[x][y]``. Each node
carries persistent attributes (``is_wall`` and the cached world ``position``)
next to ``value``, the per-search cost buffer that
:class:`grid_pathfinder.search.PathSearch` resets at the start of every call.

All accessors and mutators check coordinates before touching any node. They
accept integers (including numpy integers), raise ``TypeError`` for anything
else and :class:`OutOfRangeError` for cells outside
``[0, width) x [0, height)``.
"""

import operator
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional

import numpy as np
import numpy.typing as npt
from loguru import logger
from pyrsistent import pset
from pyrsistent.typing import PSet

from grid_pathfinder.config import GridConfig
from grid_pathfinder.types import (
    NEIGHBOR_OFFSETS,
    UNVISITED,
    Coord,
    WorldPosition,
)

IntArray = npt.NDArray[np.int64]
BoolArray = npt.NDArray[np.bool_]


class OutOfRangeError(IndexError):
    """Coordinates fall outside the generated lattice."""


@dataclass
class GridNode:
    """One addressable lattice cell.

    Attributes:
        x: Column index.
        y: Row index.
        position: World-space point ``(x * spacing, y * spacing, 0)``.
        value: Best-known cost from the active search's start node.
        is_wall: Walls are never expanded nor chosen as path steps.
    """

    x: int
    y: int
    position: WorldPosition
    value: int = UNVISITED
    is_wall: bool = False

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


class Grid:
    """Rectangular collection of :class:`GridNode` built from a ``GridConfig``."""

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config: GridConfig = config if config is not None else GridConfig()
        self.nodes: List[List[GridNode]] = []
        self.generate(self.config.width, self.config.height, self.config.spacing)

    @classmethod
    def from_mask(
        cls,
        mask: npt.ArrayLike,
        spacing: float = 1.0,
        use_single_source_mode: bool = True,
    ) -> "Grid":
        """Build a grid whose walls come from an occupancy mask.

        ``mask`` is indexed ``[y, x]``; zero cells are free, anything else is a
        wall.
        """
        array = np.asarray(mask)
        if array.ndim != 2:
            raise ValueError(f"mask must be 2D, got shape {array.shape}")
        height, width = array.shape
        grid = cls(
            GridConfig(
                width=int(width),
                height=int(height),
                spacing=spacing,
                use_single_source_mode=use_single_source_mode,
            )
        )
        grid.set_walls_from_mask(array)
        return grid

    # -------- Shape --------

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def spacing(self) -> float:
        return self.config.spacing

    def generate(self, width: int, height: int, spacing: float) -> None:
        """Allocate ``width * height`` fresh nodes, replacing all prior state.

        Paths produced before regeneration keep their world positions but no
        longer correspond to this lattice.
        """
        # replace() re-runs GridConfig validation
        self.config = replace(self.config, width=width, height=height, spacing=spacing)
        self.nodes = [
            [
                GridNode(
                    x=x,
                    y=y,
                    position=(float(spacing * x), float(spacing * y), 0.0),
                )
                for y in range(height)
            ]
            for x in range(width)
        ]
        logger.debug(f"Generated {width}x{height} grid with spacing {spacing}")

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def iter_nodes(self) -> Iterator[GridNode]:
        for column in self.nodes:
            yield from column

    # -------- Point accessors --------

    def get_node(self, x: int, y: int) -> GridNode:
        x, y = self._check_bounds(x, y)
        return self.nodes[x][y]

    def get_position(self, x: int, y: int) -> WorldPosition:
        """Return the world-space point of cell ``(x, y)``."""
        return self.get_node(x, y).position

    def neighbors(self, node: GridNode) -> List[GridNode]:
        """Return the in-bounds 4-neighbors of ``node`` (right, left, down, up)."""
        result: List[GridNode] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = node.x + dx, node.y + dy
            if self.is_in_bounds(nx, ny):
                result.append(self.nodes[nx][ny])
        return result

    # -------- Mutators --------

    def set_value(self, x: int, y: int, value: int) -> None:
        self.get_node(x, y).value = value

    def reset_values(self) -> None:
        """Set every node's cost back to ``UNVISITED``."""
        for node in self.iter_nodes():
            node.value = UNVISITED

    def set_wall(self, x: int, y: int) -> None:
        self.get_node(x, y).is_wall = True

    def clear_wall(self, x: int, y: int) -> None:
        self.get_node(x, y).is_wall = False

    def set_walls(self, coords: Iterable[Coord]) -> None:
        """Mark every coordinate in ``coords`` as a wall.

        All coordinates are checked before any node changes, so an
        out-of-range or non-integer entry leaves the grid untouched.
        """
        targets = [self._check_bounds(x, y) for x, y in coords]
        for x, y in targets:
            self.nodes[x][y].is_wall = True
        logger.debug(f"Marked {len(targets)} wall cells")

    def set_walls_from_mask(self, mask: npt.ArrayLike) -> None:
        """Add walls for every non-zero cell of a ``[y, x]`` indexed mask."""
        array = np.asarray(mask)
        if array.shape != (self.height, self.width):
            raise ValueError(
                f"mask shape {array.shape} does not match grid "
                f"{self.width}x{self.height} (expected ({self.height}, {self.width}))"
            )
        ys, xs = np.nonzero(array)
        self.set_walls(zip(xs.tolist(), ys.tolist()))

    def clear_walls(self) -> None:
        """Make every node passable again."""
        for node in self.iter_nodes():
            node.is_wall = False

    # -------- Snapshots --------

    @property
    def walls(self) -> PSet[Coord]:
        """Coordinates of all walled nodes."""
        return pset(node.coord for node in self.iter_nodes() if node.is_wall)

    def values_array(self) -> IntArray:
        """Copy of the cost buffer as an ``[y, x]`` indexed array."""
        return np.array(
            [
                [self.nodes[x][y].value for x in range(self.width)]
                for y in range(self.height)
            ],
            dtype=np.int64,
        )

    def walls_array(self) -> BoolArray:
        """Wall flags as an ``[y, x]`` indexed boolean array."""
        return np.array(
            [
                [self.nodes[x][y].is_wall for x in range(self.width)]
                for y in range(self.height)
            ],
            dtype=np.bool_,
        )

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> Coord:
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            raise TypeError(
                f"Grid coordinates must be integers, got {(x, y)}"
            ) from None
        if not self.is_in_bounds(x, y):
            raise OutOfRangeError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
        return (x, y)
