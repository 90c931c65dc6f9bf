"""
Brute-force reachability oracles.

Independent of the column-major scan; used to validate it:
- bfs_count: BFS from the origin over the admissibility predicate
- admissible_mask: numpy boolean mask of admissible points in the bound box
- label_count: 4-connected labelling (scipy.ndimage) of that mask

Every reachable point lies in the box |x|, |y| ≤ point_limit(threshold):
a path to (x, y) passes through every column between 0 and x, and each of
those columns needs an admissible point, so every magnitude up to |x| has
digit sum ≤ threshold.

Memory is O(bound²); intended for small thresholds.
"""

from collections import deque

import numpy as np

from .digits import point_limit, point_score, validate_threshold
from .types import Point


ORIGIN = Point(0, 0)


def _neighbors4(point: Point) -> list[Point]:
    """4-connected neighbors in fixed order: right, up, left, down."""
    x, y = point
    return [
        Point(x + 1, y),
        Point(x, y + 1),
        Point(x - 1, y),
        Point(x, y - 1),
    ]


def reachable_points(threshold: int) -> set[Point]:
    """
    All points reachable from the origin (origin included) by BFS.

    Args:
        threshold: Admissibility ceiling

    Returns:
        Set of reachable points
    """
    validate_threshold(threshold)
    bound = point_limit(threshold)

    visited = {ORIGIN}
    queue = deque([ORIGIN])

    while queue:
        current = queue.popleft()

        for neighbor in _neighbors4(current):
            if neighbor in visited:
                continue
            nx, ny = neighbor
            if abs(nx) > bound or abs(ny) > bound:
                continue
            if point_score(nx, ny) <= threshold:
                visited.add(neighbor)
                queue.append(neighbor)

    return visited


def bfs_count(threshold: int) -> int:
    """Number of points reachable from the origin, by BFS."""
    return len(reachable_points(threshold))


def _digit_sum_array(values: np.ndarray) -> np.ndarray:
    """Elementwise digit sum of |values|."""
    remaining = np.abs(values).astype(np.int64)
    sums = np.zeros_like(remaining)

    while remaining.any():
        sums += remaining % 10
        remaining //= 10

    return sums


def admissible_mask(threshold: int) -> np.ndarray:
    """
    Boolean mask of admissible points in the bound box.

    Index [i, j] corresponds to the point (x, y) = (i - bound, j - bound),
    so the origin sits at [bound, bound].
    """
    validate_threshold(threshold)
    bound = point_limit(threshold)

    coords = np.arange(-bound, bound + 1, dtype=np.int64)
    axis_sums = _digit_sum_array(coords)

    # score[i, j] = digit_sum(x_i) + digit_sum(y_j)
    scores = axis_sums[:, np.newaxis] + axis_sums[np.newaxis, :]

    return scores <= threshold


def label_count(threshold: int) -> int:
    """
    Size of the 4-connected component of admissible points containing the origin.

    Uses scipy.ndimage.label with the cross-shaped structuring element.
    """
    try:
        from scipy import ndimage
    except ImportError:
        raise ImportError("scipy is required for component labelling. Install with: pip install scipy")

    mask = admissible_mask(threshold)
    bound = (mask.shape[0] - 1) // 2

    structure = ndimage.generate_binary_structure(2, 1)  # 4-connectivity
    labels, _ = ndimage.label(mask, structure=structure)

    origin_label = labels[bound, bound]
    return int(np.count_nonzero(labels == origin_label))
