"""Waypoint follower consuming search results.

A host calls :meth:`WaypointFollower.tick` once per frame with the actor's
current world position and steers toward the returned target. Targets are
popped off the pending queue one at a time; the next one is taken on the
tick after the current one comes within ``reach_radius``.
"""

from collections import deque
from typing import Deque, Iterable, Optional

from loguru import logger

from grid_pathfinder.types import WorldPosition
from grid_pathfinder.utils.math import world_distance


class WaypointFollower:
    """Queue of world positions with a reach-radius arrival test."""

    def __init__(self, reach_radius: float = 100.0) -> None:
        if reach_radius < 0:
            raise ValueError(f"reach_radius must be non-negative, got {reach_radius}")
        self.reach_radius = reach_radius
        self.pending: Deque[WorldPosition] = deque()
        self.target: Optional[WorldPosition] = None
        self.need_new_destination = True

    def set_path(self, path: Iterable[WorldPosition]) -> None:
        """Replace the pending waypoints; the next tick takes the first one."""
        self.pending = deque(path)
        self.need_new_destination = True

    def add_to_path(self, path: Iterable[WorldPosition]) -> None:
        self.pending.extend(path)

    def tick(self, position: WorldPosition) -> Optional[WorldPosition]:
        """Advance the follower and return the current target (if any)."""
        if self.need_new_destination:
            if self.pending:
                self.target = self.pending.popleft()
                self.need_new_destination = False
        elif (
            self.target is not None
            and world_distance(position, self.target) <= self.reach_radius
        ):
            self.need_new_destination = True
            if not self.pending:
                logger.debug(f"Destination {self.target} reached")
        return self.target

    @property
    def arrived(self) -> bool:
        """No waypoints left and the last target (if any) has been reached."""
        return self.need_new_destination and not self.pending
