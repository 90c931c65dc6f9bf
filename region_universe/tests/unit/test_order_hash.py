"""
Unit tests for region_core/order_hash.py.

- hash64 determinism, dict order irrelevance, 64-bit range
- quadrant_fingerprint: order-independent, equal across the four quadrants
"""

from region_core.connectivity import ConnectivityTracker
from region_core.digits import point_limit
from region_core.order_hash import hash64, quadrant_fingerprint
from region_core.region import scan_quadrant
from region_core.types import Point, QUADRANTS


class TestHash64:
    """Test deterministic hashing with SHA-256."""

    def test_determinism_simple(self):
        """Same input produces same hash across multiple calls."""
        obj = [[1, 0], [1, 1], [2, 0]]
        assert hash64(obj) == hash64(obj), "hash64 must be deterministic"

    def test_dict_order_irrelevance(self):
        """Dict key order doesn't affect hash (canonical JSON)."""
        assert hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})

    def test_different_inputs_different_hashes(self):
        """Different inputs should produce different hashes (collision unlikely)."""
        assert hash64([1, 2, 3]) != hash64([1, 2, 4])

    def test_returns_64bit_int(self):
        """Hash fits in 64 bits (0 to 2^64-1)."""
        h = hash64("test")
        assert 0 <= h < 2**64


class TestQuadrantFingerprint:
    """Test fingerprints of accepted point sets."""

    def test_order_independent(self):
        """Insertion order does not change the fingerprint."""
        points = [Point(1, 0), Point(1, 1), Point(2, 0)]
        q1 = QUADRANTS[0]
        assert quadrant_fingerprint(q1, points) == quadrant_fingerprint(q1, reversed(points))

    def test_rotated_sets_match(self):
        """The same shape in Quadrant 3 fingerprints like Quadrant 1."""
        q1_points = [Point(1, 0), Point(1, 1), Point(2, 0)]
        q3_points = [Point(-x, -y) for x, y in q1_points]
        assert quadrant_fingerprint(QUADRANTS[0], q1_points) == \
            quadrant_fingerprint(QUADRANTS[2], q3_points)

    def test_scanned_quadrants_match(self):
        """All four scans at threshold 14 accept the same shape."""
        threshold = 14
        bound = point_limit(threshold)
        fingerprints = []
        for q in QUADRANTS:
            tracker = ConnectivityTracker()
            scan_quadrant(q, threshold, bound, tracker=tracker)
            fingerprints.append(quadrant_fingerprint(q, tracker))

        assert len(set(fingerprints)) == 1, f"Fingerprints differ: {fingerprints}"

    def test_different_shapes_differ(self):
        """A missing point changes the fingerprint."""
        q1 = QUADRANTS[0]
        assert quadrant_fingerprint(q1, [Point(1, 0), Point(2, 0)]) != \
            quadrant_fingerprint(q1, [Point(1, 0)])
