"""
Core type definitions for the region counter.

Point is a value type (structural equality/hash). Quadrant descriptors are
immutable and built once at import time.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import PreconditionError


# Default inadmissible-run length before an inner loop is cut (tuned for 25)
DEFAULT_SKIP_THRESHOLD = 99


@dataclass(frozen=True, order=True)
class Point:
    """Lattice point (x, y)."""
    x: int
    y: int

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Quadrant:
    """
    Traversal descriptor for one quadrant.

    The scan starts adjacent to the origin at (start_x, start_y) and walks
    away from it in column-major order:
    - outer loop over x, stepping by step_x
    - inner loop over y, stepping by step_y

    step_x, step_y ∈ {-1, 0, +1}, never both zero.
    start_x, start_y ∈ {-1, 0, +1}.
    """
    label: str
    start_x: int
    start_y: int
    step_x: int
    step_y: int

    def __post_init__(self):
        for name in ("start_x", "start_y", "step_x", "step_y"):
            value = getattr(self, name)
            if value not in (-1, 0, 1):
                raise PreconditionError(f"{self.label}: {name} must be in {{-1, 0, 1}}, got {value}")
        if self.step_x == 0 and self.step_y == 0:
            raise PreconditionError(f"{self.label}: step_x and step_y cannot both be zero")

    @property
    def start(self) -> Point:
        return Point(self.start_x, self.start_y)

    def to_canonical(self, point: Point) -> Point:
        """
        Map a point of this quadrant onto the Quadrant 1 frame.

        Quadrants starting on the x axis are reflections of Quadrant 1;
        quadrants starting on the y axis are rotations that swap the axes:

            Q1 (x≥1, y≥0)  → ( x,  y)
            Q2 (x≤0, y≥1)  → ( y, -x)
            Q3 (x≤-1, y≤0) → (-x, -y)
            Q4 (x≥0, y≤-1) → (-y,  x)

        Connectivity rules map onto each other under these images, so every
        quadrant's accepted set lands on the same Quadrant 1 shape.
        """
        x, y = point
        if self.start_x != 0:
            # Quadrant starts on the x axis: columns run along x
            return Point(x * self.step_x, y * self.step_y)
        # Quadrant starts on the y axis: rotate so its y axis becomes Q1's x axis
        return Point(y * self.step_y, x * self.step_x)

    def __str__(self) -> str:
        return self.label


# The four quadrants, each starting adjacent to the origin (origin counted separately)
QUADRANTS: Tuple[Quadrant, ...] = (
    Quadrant("Quadrant 1", 1, 0, 1, 1),
    Quadrant("Quadrant 2", 0, 1, -1, 1),
    Quadrant("Quadrant 3", -1, 0, -1, -1),
    Quadrant("Quadrant 4", 0, -1, 1, -1),
)


@dataclass(frozen=True)
class CountConfig:
    """
    Configuration for one count request.

    - threshold: inclusive ceiling on the admissibility score
    - use_symmetry: scan Quadrant 1 only and multiply by 4
    - skip_threshold: inadmissible run length that cuts an inner loop;
      None derives the safe value from the bound
    """
    threshold: int
    use_symmetry: bool = True
    skip_threshold: Optional[int] = DEFAULT_SKIP_THRESHOLD


@dataclass(frozen=True)
class QuadrantScan:
    """
    Result of scanning one quadrant.

    - count: accepted points (tracker size)
    - columns: outer-loop columns visited
    - early_exits: inner loops cut by the skip heuristic
    """
    quadrant: Quadrant
    count: int
    columns: int
    early_exits: int


@dataclass(frozen=True)
class RegionCount:
    """Full result of a count request (origin included in total)."""
    threshold: int
    bound: int
    skip_threshold: int
    use_symmetry: bool
    scans: Tuple[QuadrantScan, ...] = field(default_factory=tuple)
    total: int = 1
