"""
Deterministic hashing and quadrant fingerprints.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- quadrant_fingerprint: hash of a quadrant's accepted points mapped onto the
  Quadrant 1 frame

Equal fingerprints across quadrants show the four scans accepted the same
shape, not just the same number of points.
No use of Python's built-in hash() (salted per process).
"""

import hashlib
import json
from typing import Any, Iterable, NewType

from .types import Point, Quadrant


Hash64 = NewType("Hash64", int)


def hash64(obj: Any) -> Hash64:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    - Canonical JSON (sorted keys, no whitespace)
    - First 8 bytes of the digest as an unsigned big-endian int

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    sha = hashlib.sha256(canonical_json.encode("utf-8"))
    hash_bytes = sha.digest()[:8]

    return Hash64(int.from_bytes(hash_bytes, byteorder="big", signed=False))


def quadrant_fingerprint(quadrant: Quadrant, points: Iterable[Point]) -> Hash64:
    """
    Hash of the points rotated onto the Quadrant 1 frame, sorted (x, y).

    Independent of insertion order.
    """
    canonical = sorted(tuple(quadrant.to_canonical(p)) for p in points)
    return hash64([list(p) for p in canonical])
