"""
Region counting over the digit-sum lattice.

Counts the points reachable from the origin by unit horizontal/vertical
steps whose score (digit_sum(|x|) + digit_sum(|y|)) is ≤ threshold.

Algorithm:
1. bound = point_limit(threshold): no reachable coordinate exceeds it
2. Scan each quadrant column-major away from the origin with a fresh
   ConnectivityTracker; accept admissible points that pass is_connected
3. Cut an inner loop once a run of inadmissible points exceeds skip_threshold
4. Symmetry path: Quadrant 1 × 4. Reference path: sum of all four quadrants
5. Add 1 for the origin (never scanned)

Memory is bounded by the accepted points of a single quadrant.
"""

import logging
from typing import Optional

from .connectivity import ConnectivityTracker, is_connected
from .digits import point_limit, point_score, safe_skip_threshold, validate_threshold
from .errors import PreconditionError
from .types import (
    DEFAULT_SKIP_THRESHOLD,
    CountConfig,
    Point,
    QUADRANTS,
    Quadrant,
    QuadrantScan,
    RegionCount,
)


logger = logging.getLogger(__name__)


# Multiplier applied to Quadrant 1 on the symmetry path
SYMMETRY_FACTOR = len(QUADRANTS)


def _axis_positions(start: int, step: int, bound: int):
    """Positions start, start+step, ... while |pos| ≤ bound (single position if step is 0)."""
    if step == 0:
        if abs(start) <= bound:
            yield start
        return

    pos = start
    while abs(pos) <= bound:
        yield pos
        pos += step


def scan_quadrant(
    quadrant: Quadrant,
    threshold: int,
    bound: int,
    skip_threshold: int = DEFAULT_SKIP_THRESHOLD,
    tracker: Optional[ConnectivityTracker] = None,
) -> QuadrantScan:
    """
    Traverse one quadrant in column-major order and count accepted points.

    Args:
        quadrant: Traversal descriptor
        threshold: Admissibility ceiling
        bound: Coordinate magnitude ceiling (from point_limit)
        skip_threshold: Inner loop stops once more than this many consecutive
            inadmissible points were seen in the current column
        tracker: Empty tracker to fill (a fresh one is created if None);
            callers pass their own to inspect the accepted points afterwards

    Returns:
        QuadrantScan with count = number of accepted points
    """
    if quadrant is None:
        raise PreconditionError("quadrant must not be None")
    if tracker is None:
        tracker = ConnectivityTracker()
    elif len(tracker) != 0:
        raise PreconditionError(f"{quadrant}: tracker must start empty, has {len(tracker)} points")

    step_x, step_y = quadrant.step_x, quadrant.step_y
    columns = 0
    early_exits = 0

    for x in _axis_positions(quadrant.start_x, step_x, bound):
        columns += 1
        invalid_run = 0

        for y in _axis_positions(quadrant.start_y, step_y, bound):
            if point_score(x, y) <= threshold:
                invalid_run = 0
                point = Point(x, y)
                if is_connected(point, step_x, step_y, tracker):
                    tracker.add(point)
            else:
                invalid_run += 1
                if invalid_run > skip_threshold:
                    early_exits += 1
                    break

    return QuadrantScan(
        quadrant=quadrant,
        count=len(tracker),
        columns=columns,
        early_exits=early_exits,
    )


def resolve_skip_threshold(skip_threshold: Optional[int], bound: int) -> int:
    """
    Resolve the configured skip threshold against the bound.

    None derives the safe value. A value below the safe one is honoured but
    logged, since it can cut a column before its last admissible point.
    """
    safe = safe_skip_threshold(bound)

    if skip_threshold is None:
        return safe

    if isinstance(skip_threshold, bool) or not isinstance(skip_threshold, int):
        raise PreconditionError(
            f"skip_threshold must be an int or None, got {type(skip_threshold).__name__}"
        )
    if skip_threshold < 0:
        raise PreconditionError(f"skip_threshold must be non-negative, got {skip_threshold}")

    if skip_threshold < safe:
        logger.warning(
            f"skip_threshold={skip_threshold} is below the safe value {safe} "
            f"for bound {bound}; count may be too low"
        )

    return skip_threshold


def count_region(
    threshold: int,
    use_symmetry: bool = True,
    skip_threshold: Optional[int] = DEFAULT_SKIP_THRESHOLD,
) -> RegionCount:
    """
    Count reachable admissible points, origin included.

    Args:
        threshold: Non-negative admissibility ceiling
        use_symmetry: Scan Quadrant 1 only and multiply by 4. False runs
            the four-quadrant reference path
        skip_threshold: Early-exit run length; None derives the safe value

    Returns:
        RegionCount with per-quadrant scans and total

    Raises:
        InvalidThresholdError: threshold negative or not an int
        CoordinateOverflowError: bound beyond the coordinate range
    """
    validate_threshold(threshold)
    bound = point_limit(threshold)
    skip = resolve_skip_threshold(skip_threshold, bound)

    logger.debug(
        f"Counting threshold={threshold} bound={bound} skip={skip} symmetry={use_symmetry}"
    )

    if use_symmetry:
        scan = scan_quadrant(QUADRANTS[0], threshold, bound, skip)
        scans = (scan,)
        total = 1 + scan.count * SYMMETRY_FACTOR
    else:
        # Fresh tracker per quadrant
        scans = tuple(
            scan_quadrant(quadrant, threshold, bound, skip)
            for quadrant in QUADRANTS
        )
        total = 1 + sum(scan.count for scan in scans)

    for scan in scans:
        logger.debug(
            f"{scan.quadrant}: count={scan.count} columns={scan.columns} "
            f"early_exits={scan.early_exits}"
        )
    logger.info(f"Threshold {threshold}: {total} reachable points")

    return RegionCount(
        threshold=threshold,
        bound=bound,
        skip_threshold=skip,
        use_symmetry=use_symmetry,
        scans=scans,
        total=total,
    )


def compute(
    threshold: int,
    use_symmetry: bool = True,
    skip_threshold: Optional[int] = DEFAULT_SKIP_THRESHOLD,
) -> int:
    """
    Number of points reachable from the origin (origin included).

    Examples:
        >>> compute(0)
        1
        >>> compute(25)
        1033841
    """
    return count_region(threshold, use_symmetry, skip_threshold).total


def compute_config(config: CountConfig) -> int:
    """compute() driven by a CountConfig."""
    if config is None:
        raise PreconditionError("config must not be None")
    return compute(config.threshold, config.use_symmetry, config.skip_threshold)
