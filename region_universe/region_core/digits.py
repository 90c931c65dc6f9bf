"""
Digit sums, admissibility scores and per-axis bounds.

Provides:
- digit_sum(n): sum of decimal digits of |n|
- point_score(x, y): digit_sum(x) + digit_sum(y)
- point_limit(threshold): last value of the run 0, 1, 2, ... whose digit sums
  stay ≤ threshold (loop ceiling for a single coordinate)
- point_limit_scan(threshold): the same bound found by incrementing
- safe_skip_threshold(bound): inadmissible run length that can never hide a
  later admissible value below bound

All integer arithmetic.
"""

from .errors import CoordinateOverflowError, InvalidThresholdError, PreconditionError


# Signed 32-bit coordinate range
COORDINATE_LIMIT = 2**31 - 1


def _require_int(value, name: str) -> None:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionError(f"{name} must be an int, got {type(value).__name__}")


def validate_threshold(threshold) -> int:
    """
    Validate a user-supplied threshold.

    Raises:
        InvalidThresholdError: threshold is not an int or is negative
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise InvalidThresholdError(
            f"Threshold must be a non-negative int, got {type(threshold).__name__}"
        )
    if threshold < 0:
        raise InvalidThresholdError(f"Threshold must be non-negative, got {threshold}")
    return threshold


def digit_sum(n: int) -> int:
    """
    Sum of the decimal digits of |n|.

    Examples:
        >>> digit_sum(0)
        0
        >>> digit_sum(-59)
        14
    """
    _require_int(n, "n")

    total = 0
    num = abs(n)
    while num > 0:
        num, rem = divmod(num, 10)
        total += rem

    return total


def point_score(x: int, y: int) -> int:
    """
    Admissibility score of (x, y).

    Examples:
        >>> point_score(59, 79)
        30
        >>> point_score(-5, -7)
        12
    """
    return digit_sum(x) + digit_sum(y)


def point_limit_scan(threshold: int) -> int:
    """
    Bound by direct search: increment while digit_sum(limit + 1) ≤ threshold.

    Linear in the bound; only practical for small thresholds.
    """
    validate_threshold(threshold)

    limit = 0
    while digit_sum(limit + 1) <= threshold:
        limit += 1

    return limit


def point_limit(threshold: int) -> int:
    """
    Largest L such that 0..L is the leading run reached before the first
    value whose digit sum exceeds threshold.

    Going from k to k+1 raises the digit sum by at most one, so the first
    value past the run has digit sum exactly threshold + 1 and is the smallest
    such number: the digit (threshold + 1) mod 9 followed by
    (threshold + 1) // 9 nines.

    Examples:
        limit(5)  = 5
        limit(10) = 28   (29 ends the run)
        limit(25) = 898

    Raises:
        InvalidThresholdError: negative threshold
        CoordinateOverflowError: bound beyond COORDINATE_LIMIT
    """
    validate_threshold(threshold)

    target = threshold + 1
    nines, lead = divmod(target, 9)

    # Check the magnitude before building the number
    digits = nines + (1 if lead else 0)
    if digits > len(str(COORDINATE_LIMIT)):
        raise CoordinateOverflowError(
            f"Bound for threshold {threshold} has {digits} digits, "
            f"exceeds coordinate limit {COORDINATE_LIMIT}"
        )

    first_over = (lead + 1) * 10**nines - 1
    limit = first_over - 1

    if limit > COORDINATE_LIMIT:
        raise CoordinateOverflowError(
            f"Bound {limit} for threshold {threshold} exceeds coordinate limit {COORDINATE_LIMIT}"
        )

    return limit


def safe_skip_threshold(bound: int) -> int:
    """
    Inadmissible run length that cannot precede another admissible value.

    For a remaining budget r, the admissible values below 10**d lie in the
    leading-digit blocks 0..r (block size 10**(d-1)), each starting with an
    admissible value. A run of consecutive inadmissible values followed by
    an admissible one is therefore shorter than 10**(d-1).

    Examples:
        safe_skip_threshold(898) = 99
        safe_skip_threshold(5)   = 0
    """
    _require_int(bound, "bound")
    if bound < 0:
        raise PreconditionError(f"bound must be non-negative, got {bound}")

    return 10 ** (len(str(bound)) - 1) - 1
