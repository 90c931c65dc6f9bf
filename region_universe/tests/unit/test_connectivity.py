"""
Unit tests for region_core/connectivity.py.

- Tracker is insert-only, insertion-ordered
- is_connected: each of the four connection rules in isolation
- Already-accepted points never reconnect
- None arguments are precondition errors
"""

import pytest

from region_core.connectivity import ConnectivityTracker, is_connected
from region_core.errors import PreconditionError
from region_core.types import Point


def tracker_with(*points) -> ConnectivityTracker:
    tracker = ConnectivityTracker()
    for p in points:
        tracker.add(p)
    return tracker


# =============================================================================
# Tracker
# =============================================================================

class TestTracker:
    """Test tracker set semantics."""

    def test_TR01_empty(self):
        """TR-01: New tracker is empty"""
        tracker = ConnectivityTracker()
        assert len(tracker) == 0
        assert Point(0, 0) not in tracker

    def test_TR02_insertion_order(self):
        """TR-02: Iteration follows insertion order"""
        points = [Point(1, 0), Point(1, 1), Point(2, 0), Point(2, 1)]
        tracker = tracker_with(*points)
        assert list(tracker) == points

    def test_TR03_structural_membership(self):
        """TR-03: Membership uses value equality"""
        tracker = tracker_with(Point(4, 5))
        assert Point(4, 5) in tracker

    def test_TR04_double_insert_rejected(self):
        """TR-04: A point is accepted at most once"""
        tracker = tracker_with(Point(1, 1))
        with pytest.raises(PreconditionError, match="already accepted"):
            tracker.add(Point(1, 1))

    def test_TR05_none_rejected(self):
        """TR-05: None cannot be added"""
        with pytest.raises(PreconditionError):
            ConnectivityTracker().add(None)

    def test_TR06_clear(self):
        """TR-06: clear() empties the tracker"""
        tracker = tracker_with(Point(1, 0), Point(2, 0))
        tracker.clear()
        assert len(tracker) == 0
        assert list(tracker) == []


# =============================================================================
# is_connected
# =============================================================================

class TestIsConnected:
    """Test the local connectivity rules (Quadrant 1 directions unless noted)."""

    def test_IC01_already_present(self):
        """IC-01: Accepted point is never newly connected"""
        tracker = tracker_with(Point(1, 0))
        assert is_connected(Point(1, 0), 1, 1, tracker) is False

    def test_IC02_previous_column(self):
        """IC-02: (x - step_x, y) accepted → connected"""
        tracker = tracker_with(Point(4, 7))
        assert is_connected(Point(5, 7), 1, 1, tracker) is True

    def test_IC03_previous_row(self):
        """IC-03: (x, y - step_y) accepted → connected"""
        tracker = tracker_with(Point(5, 6))
        assert is_connected(Point(5, 7), 1, 1, tracker) is True

    def test_IC04_next_to_y_axis(self):
        """IC-04: x - step_x == 0 and (0, y) not accepted → connected"""
        tracker = ConnectivityTracker()
        assert is_connected(Point(1, 12), 1, 1, tracker) is True

    def test_IC05_next_to_x_axis(self):
        """IC-05: y - step_y == 0 and (x, 0) not accepted → connected"""
        tracker = ConnectivityTracker()
        assert is_connected(Point(7, 1), 1, 1, tracker) is True

    def test_IC06_isolated(self):
        """IC-06: No accepted neighbour and away from the axes → not connected"""
        tracker = tracker_with(Point(3, 3))
        assert is_connected(Point(10, 10), 1, 1, tracker) is False

    def test_IC07_forward_neighbours_ignored(self):
        """IC-07: Only the points one step back count"""
        tracker = tracker_with(Point(6, 7), Point(5, 8))
        assert is_connected(Point(5, 7), 1, 1, tracker) is False

    def test_IC08_axis_rule_blocked_when_axis_point_recorded(self):
        """IC-08: Axis rule needs the axis point to be absent from the tracker"""
        # Quadrant 2 directions: column x = 0 is scanned, so (0, y) can be present
        tracker = tracker_with(Point(0, 3))
        # Connected through the previous column instead
        assert is_connected(Point(-1, 3), -1, 1, tracker) is True

        tracker = tracker_with(Point(0, 4))
        # (0, 3) absent → axis rule applies
        assert is_connected(Point(-1, 3), -1, 1, tracker) is True

    def test_IC09_negative_directions(self):
        """IC-09: Quadrant 3 directions look back toward the origin"""
        tracker = tracker_with(Point(-4, -2))
        assert is_connected(Point(-5, -2), -1, -1, tracker) is True
        assert is_connected(Point(-4, -3), -1, -1, tracker) is True
        assert is_connected(Point(-3, -2), -1, -1, tracker) is False

    def test_IC10_zero_step_skips_that_rule(self):
        """IC-10: A zero step never looks back along that axis"""
        tracker = tracker_with(Point(5, 5))
        # step_x = 0: (x - 0, y) is the point itself, never a connection
        assert is_connected(Point(5, 6), 0, 1, tracker) is True
        assert is_connected(Point(6, 5), 0, 1, tracker) is False

    def test_IC11_method_matches_function(self):
        """IC-11: Tracker.is_connected delegates to is_connected"""
        tracker = tracker_with(Point(2, 2))
        for p in [Point(3, 2), Point(2, 3), Point(9, 9), Point(2, 2)]:
            assert tracker.is_connected(p, 1, 1) == is_connected(p, 1, 1, tracker)

    def test_IC12_none_arguments(self):
        """IC-12: None point or tracker is a programming error"""
        with pytest.raises(PreconditionError):
            is_connected(None, 1, 1, ConnectivityTracker())
        with pytest.raises(PreconditionError):
            is_connected(Point(1, 1), 1, 1, None)
