"""
Connectivity tracking for one quadrant scan.

The tracker is the set of points already accepted in the current quadrant.
Because quadrants are scanned column-major away from the origin, a new
admissible point is reachable iff it touches an accepted point one step back
along either scan direction, or sits next to an axis whose point has not been
recorded in this quadrant (axis points are reachable through the origin,
which every quadrant leaves out).

O(1) per test, no search.
"""

from typing import Iterator, Optional

from .errors import PreconditionError
from .types import Point


class ConnectivityTracker:
    """
    Insert-only set of accepted points for one quadrant scan.

    Iteration yields points in insertion (column-major scan) order.
    """

    def __init__(self):
        # dict keeps insertion order
        self._points: dict[Point, None] = {}

    def __contains__(self, point: Point) -> bool:
        return point in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def add(self, point: Point) -> None:
        """Record an accepted point. Each point may be added once."""
        if point is None:
            raise PreconditionError("Cannot add None to tracker")
        if point in self._points:
            raise PreconditionError(f"{point} already accepted in this scan")
        self._points[point] = None

    def clear(self) -> None:
        self._points.clear()

    def is_connected(self, point: Point, step_x: int, step_y: int) -> bool:
        return is_connected(point, step_x, step_y, self)


def is_connected(
    point: Point,
    step_x: int,
    step_y: int,
    tracker: Optional[ConnectivityTracker],
) -> bool:
    """
    Check whether point newly joins the accepted region.

    Args:
        point: Candidate point (already known to be admissible)
        step_x: Horizontal scan direction of the quadrant
        step_y: Vertical scan direction of the quadrant
        tracker: Points accepted so far in this quadrant

    Returns:
        False if point is already accepted. Otherwise True when any of:
        - (x - step_x, y) accepted (previous column, same row)
        - (x, y - step_y) accepted (same column, previous row)
        - x - step_x == 0 and (0, y) not accepted (adjacent to the y axis)
        - y - step_y == 0 and (x, 0) not accepted (adjacent to the x axis)
    """
    if point is None:
        raise PreconditionError("point must not be None")
    if tracker is None:
        raise PreconditionError("tracker must not be None")

    if point in tracker:
        return False

    x, y = point

    if step_x != 0 and Point(x - step_x, y) in tracker:
        return True
    if step_y != 0 and Point(x, y - step_y) in tracker:
        return True
    if x - step_x == 0 and Point(0, y) not in tracker:
        return True
    if y - step_y == 0 and Point(x, 0) not in tracker:
        return True

    return False
