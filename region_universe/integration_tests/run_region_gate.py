#!/usr/bin/env python3
"""
Region Gate: cross-checks for the digit-sum region counter.

For each threshold:
- fast path (Quadrant 1 × 4) vs reference path (four quadrants)
- per-quadrant fingerprints on the Quadrant 1 frame (point-level symmetry)
- brute-force BFS and scipy labelling up to --oracle-limit
- monotonicity against the previous threshold

Critical Invariants:
- counts_agree = True
- fingerprints_agree = True
- oracle agrees = True (where checked)
- monotone = True

Usage:
    python run_region_gate.py --min-threshold 0 --max-threshold 25 --oracle-limit 12
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path to import region_core
sys.path.insert(0, str(Path(__file__).parent.parent))

from region_core.connectivity import ConnectivityTracker
from region_core.flood import bfs_count, label_count
from region_core.order_hash import quadrant_fingerprint
from region_core.region import count_region, scan_quadrant
from region_core.types import DEFAULT_SKIP_THRESHOLD, QUADRANTS

from utils import (
    build_receipt,
    compute_summary_stats,
    save_receipt,
    setup_logger,
)


GATE = "REGION"


def validate_threshold_gate(
    threshold: int,
    logger,
    skip_threshold: Optional[int] = DEFAULT_SKIP_THRESHOLD,
    oracle_limit: int = 8,
    check_reference: bool = True,
    previous_total: Optional[int] = None,
):
    """
    Validate a single threshold.

    Returns:
        Receipt dictionary
    """
    try:
        logger.info(f"Threshold {threshold}: Running symmetry path")
        fast = count_region(threshold, use_symmetry=True, skip_threshold=skip_threshold)

        monotone = previous_total is None or previous_total <= fast.total
        if not monotone:
            logger.warning(
                f"Threshold {threshold}: total {fast.total} below previous {previous_total}"
            )

        count_data = {
            "bound": fast.bound,
            "skip_threshold": fast.skip_threshold,
            "quadrant_1": fast.scans[0].count,
            "total": fast.total,
            "early_exits": fast.scans[0].early_exits,
            "monotone": monotone,
        }

        symmetry_data = None
        if check_reference:
            logger.info(f"Threshold {threshold}: Running reference path with fingerprints")
            counts = []
            fingerprints = []
            for quadrant in QUADRANTS:
                tracker = ConnectivityTracker()
                scan = scan_quadrant(
                    quadrant, threshold, fast.bound, fast.skip_threshold, tracker
                )
                counts.append(scan.count)
                fingerprints.append(quadrant_fingerprint(quadrant, tracker))

            reference_total = 1 + sum(counts)
            symmetry_data = {
                "quadrant_counts": counts,
                "reference_total": reference_total,
                "counts_agree": reference_total == fast.total,
                "fingerprints_agree": len(set(fingerprints)) == 1,
                "fingerprint": fingerprints[0],
            }

            logger.info(
                f"Threshold {threshold}: quadrant counts={counts}, "
                f"reference={reference_total}, fast={fast.total}"
            )

        oracle_data = None
        if threshold <= oracle_limit:
            logger.info(f"Threshold {threshold}: Running brute-force oracles")
            bfs_total = bfs_count(threshold)
            label_total = label_count(threshold)
            oracle_data = {
                "bfs_total": bfs_total,
                "label_total": label_total,
                "agrees": bfs_total == label_total == fast.total,
            }

        status = "PASS"
        if not monotone:
            status = "FAIL"
            logger.error(f"Threshold {threshold}: FAIL - monotonicity violated")
        elif symmetry_data is not None and not symmetry_data["counts_agree"]:
            status = "FAIL"
            logger.error(f"Threshold {threshold}: FAIL - symmetry and reference counts differ")
        elif symmetry_data is not None and not symmetry_data["fingerprints_agree"]:
            status = "FAIL"
            logger.error(f"Threshold {threshold}: FAIL - quadrant shapes differ")
        elif oracle_data is not None and not oracle_data["agrees"]:
            status = "FAIL"
            logger.error(f"Threshold {threshold}: FAIL - brute-force oracle disagrees")
        else:
            logger.info(f"Threshold {threshold}: PASS ({fast.total} points)")

        return build_receipt(
            threshold=threshold,
            gate=GATE,
            count_data=count_data,
            symmetry_data=symmetry_data,
            oracle_data=oracle_data,
            status=status,
        )

    except Exception as e:
        logger.error(f"Threshold {threshold}: Exception - {type(e).__name__}: {e}")
        return build_receipt(
            threshold=threshold, gate=GATE, status="FAIL", error=str(e)
        )


def parse_skip_threshold(value: str) -> Optional[int]:
    """argparse type: an int, or 'derive' for the safe value."""
    if value == "derive":
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer or 'derive', got {value!r}")
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"skip threshold must be non-negative, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Region Gate: symmetry, oracle and monotonicity checks"
    )
    parser.add_argument(
        "--min-threshold",
        type=int,
        default=0,
        help="First threshold to check (default: 0)",
    )
    parser.add_argument(
        "--max-threshold",
        type=int,
        default=25,
        help="Last threshold to check (default: 25)",
    )
    parser.add_argument(
        "--skip-threshold",
        type=parse_skip_threshold,
        default=DEFAULT_SKIP_THRESHOLD,
        help=f"Inadmissible run length, or 'derive' (default: {DEFAULT_SKIP_THRESHOLD})",
    )
    parser.add_argument(
        "--oracle-limit",
        type=int,
        default=8,
        help="Largest threshold cross-checked by BFS/labelling (default: 8)",
    )
    parser.add_argument(
        "--no-reference",
        action="store_true",
        help="Skip the four-quadrant reference path",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.min_threshold < 0 or args.max_threshold < args.min_threshold:
        parser.error("thresholds must satisfy 0 <= min-threshold <= max-threshold")

    # Setup paths
    integration_dir = Path(__file__).parent
    logs_dir = integration_dir / "logs"
    receipts_dir = integration_dir / "receipts" / "region"

    logger = setup_logger("region_gate", logs_dir / "region_gate.log")

    logger.info("=" * 80)
    logger.info("Region Gate")
    logger.info(f"Thresholds: {args.min_threshold}..{args.max_threshold}")
    logger.info(f"Skip threshold: {args.skip_threshold if args.skip_threshold is not None else 'derive'}")
    logger.info(f"Oracle limit: {args.oracle_limit}")
    logger.info("=" * 80)

    receipts = []
    previous_total = None
    for threshold in range(args.min_threshold, args.max_threshold + 1):
        logger.info(f"\n--- Threshold {threshold} ---")
        receipt = validate_threshold_gate(
            threshold,
            logger,
            skip_threshold=args.skip_threshold,
            oracle_limit=args.oracle_limit,
            check_reference=not args.no_reference,
            previous_total=previous_total,
        )
        receipts.append(receipt)
        save_receipt(receipt, receipts_dir)

        if "count" in receipt:
            previous_total = receipt["count"]["total"]

    logger.info("\n" + "=" * 80)
    logger.info("SUMMARY STATISTICS")
    logger.info("=" * 80)

    stats = compute_summary_stats(receipts)

    logger.info(f"Total thresholds: {stats['total_thresholds']}")
    logger.info(f"Passed: {stats['passed']}")
    logger.info(f"Failed: {stats['failed']}")
    logger.info(f"Pass rate: {stats['pass_rate']:.2%}")

    if "count" in stats:
        logger.info(f"Largest total: {stats['count']['max_total']}")
        logger.info(f"Early exits: {stats['count']['early_exits']}")
    if "symmetry" in stats:
        logger.info(f"Symmetry count agreement: {stats['symmetry']['count_agreement_rate']:.2%}")
        logger.info(
            f"Symmetry fingerprint agreement: {stats['symmetry']['fingerprint_agreement_rate']:.2%}"
        )
    if "oracle" in stats:
        logger.info(f"Oracle agreement: {stats['oracle']['agreement_rate']:.2%}")

    logger.info("\n" + "=" * 80)
    logger.info(f"Region Gate complete. Receipts saved to: {receipts_dir}")
    logger.info("=" * 80)

    return 0 if stats["failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
