"""
Error taxonomy for the region counter.

- InvalidThresholdError: bad user input (negative / non-integer threshold)
- CoordinateOverflowError: bound beyond the supported coordinate range
- PreconditionError: a component was called incorrectly (defect in the core)

Input errors subclass ValueError/OverflowError so generic handlers still work;
PreconditionError subclasses AssertionError so it reads as a programming error.
"""


class RegionError(Exception):
    """Base class for all region counter errors."""


class InvalidThresholdError(RegionError, ValueError):
    """Threshold is negative or not an integer."""


class CoordinateOverflowError(RegionError, OverflowError):
    """Coordinate bound does not fit the supported integer range."""


class PreconditionError(RegionError, AssertionError):
    """Internal precondition violated (None point, bad quadrant, double insert)."""
