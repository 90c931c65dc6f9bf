"""
region_core: Digit-sum lattice region counter.

Provides:
- types: Point, Quadrant, QUADRANTS, CountConfig and result records
- errors: InvalidThresholdError, CoordinateOverflowError, PreconditionError
- digits: digit_sum, point_score, point_limit, safe_skip_threshold
- connectivity: ConnectivityTracker and the local is_connected test
- region: scan_quadrant, count_region, compute
- flood: brute-force BFS and labelling oracles
- order_hash: deterministic hashing and quadrant fingerprints
"""

from .errors import (
    CoordinateOverflowError,
    InvalidThresholdError,
    PreconditionError,
    RegionError,
)
from .region import compute, compute_config, count_region
from .types import CountConfig, Point, QUADRANTS

__all__ = [
    "compute",
    "compute_config",
    "count_region",
    "CountConfig",
    "Point",
    "QUADRANTS",
    "RegionError",
    "InvalidThresholdError",
    "CoordinateOverflowError",
    "PreconditionError",
]
