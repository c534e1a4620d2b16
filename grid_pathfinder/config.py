"""Grid configuration.

Dimensions, spacing and the search-mode flag are supplied once, before the
lattice is generated and before any search runs. ``GridConfig.from_dict``
accepts both the camelCase keys used by host environments and the
snake_case field names.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from grid_pathfinder.types import SearchMode


_KEY_ALIASES = {
    "useSingleSourceMode": "use_single_source_mode",
    "gridSizeX": "width",
    "gridSizeY": "height",
    "gridDisplacement": "spacing",
}


@dataclass(frozen=True)
class GridConfig:
    """Grid shape and search configuration.

    Attributes:
        width: Number of columns (``x`` range), must be positive.
        height: Number of rows (``y`` range), must be positive.
        spacing: World-space distance between adjacent cell centers.
        use_single_source_mode: ``True`` selects Dijkstra selection,
            ``False`` the greedy Manhattan-heuristic selection.
    """

    width: int = 1
    height: int = 1
    spacing: float = 1.0
    use_single_source_mode: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError(f"width must be an int, got {self.width!r}")
        if isinstance(self.height, bool) or not isinstance(self.height, int):
            raise ValueError(f"height must be an int, got {self.height!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if not isinstance(self.spacing, (int, float)) or self.spacing <= 0:
            raise ValueError(f"spacing must be positive, got {self.spacing!r}")
        if not isinstance(self.use_single_source_mode, bool):
            raise ValueError("use_single_source_mode must be a bool")

    @property
    def search_mode(self) -> SearchMode:
        return (
            SearchMode.DIJKSTRA if self.use_single_source_mode else SearchMode.GREEDY
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridConfig":
        """Build a config from a plain mapping.

        Unknown keys raise ``ValueError`` rather than being dropped.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown grid config key: {key!r}")
            if name in kwargs:
                raise ValueError(f"Grid config key given twice: {name!r}")
            kwargs[name] = value
        return cls(**kwargs)
