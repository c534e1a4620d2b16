# tests/unit/test_follower.py

import pytest

from grid_pathfinder.follower import WaypointFollower
from grid_pathfinder.search import PathSearch
from tests.test_utils import make_grid


def test_new_follower_has_nothing_to_do() -> None:
    follower = WaypointFollower()
    assert follower.arrived
    assert follower.tick((0.0, 0.0, 0.0)) is None


def test_negative_radius_raises() -> None:
    with pytest.raises(ValueError):
        WaypointFollower(reach_radius=-1.0)


def test_tick_pops_next_waypoint_only_after_reaching_current() -> None:
    follower = WaypointFollower(reach_radius=10.0)
    follower.set_path([(0.0, 0.0, 0.0), (100.0, 0.0, 0.0)])

    assert follower.tick((50.0, 50.0, 0.0)) == (0.0, 0.0, 0.0)
    # Far away: keep the same target
    assert follower.tick((50.0, 50.0, 0.0)) == (0.0, 0.0, 0.0)
    # Within radius: flag arrival, the next tick takes the next waypoint
    assert follower.tick((5.0, 5.0, 0.0)) == (0.0, 0.0, 0.0)
    assert follower.tick((5.0, 5.0, 0.0)) == (100.0, 0.0, 0.0)
    assert not follower.arrived


def test_reach_radius_is_inclusive() -> None:
    follower = WaypointFollower(reach_radius=3.0)
    follower.set_path([(0.0, 0.0, 0.0)])
    follower.tick((3.0, 4.0, 0.0))
    follower.tick((0.0, 3.0, 0.0))
    assert follower.arrived


def test_set_path_replaces_and_add_to_path_appends() -> None:
    follower = WaypointFollower(reach_radius=1.0)
    follower.set_path([(1.0, 0.0, 0.0), (2.0, 0.0, 0.0)])
    follower.tick((0.0, 0.0, 0.0))
    follower.set_path([(9.0, 0.0, 0.0)])
    follower.add_to_path([(10.0, 0.0, 0.0)])
    assert list(follower.pending) == [(9.0, 0.0, 0.0), (10.0, 0.0, 0.0)]
    assert follower.tick((1.0, 0.0, 0.0)) == (9.0, 0.0, 0.0)


def test_follows_search_result_to_destination() -> None:
    grid = make_grid(spacing=100.0, walls=[(1, 0), (1, 1), (1, 2), (1, 3)])
    path = PathSearch(grid).find_path((0, 0), (2, 0))
    follower = WaypointFollower(reach_radius=10.0)
    follower.set_path(path)

    position = path[0]
    visited = []
    for _ in range(100):
        target = follower.tick(position)
        if follower.arrived:
            break
        if target is not None:
            # Teleport onto the target; arrival is detected on the next tick
            position = target
            if not visited or visited[-1] != target:
                visited.append(target)
    assert follower.arrived
    assert visited == list(path)
    assert position == grid.get_position(2, 0)
