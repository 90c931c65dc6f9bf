"""
Utility functions for region counter integration gates.

Provides:
- Logging setup
- Receipt generation and saving
- Summary statistics over receipts
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for integration gates.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def build_receipt(
    threshold: int,
    gate: str,
    count_data: Optional[Dict[str, Any]] = None,
    symmetry_data: Optional[Dict[str, Any]] = None,
    oracle_data: Optional[Dict[str, Any]] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one threshold.

    Args:
        threshold: Threshold that was counted
        gate: Gate name
        count_data: Fast-path count data
        symmetry_data: Reference path and fingerprint data
        oracle_data: Brute-force oracle data
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "threshold": threshold,
        "gate": gate,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if count_data is not None:
        receipt["count"] = count_data

    if symmetry_data is not None:
        receipt["symmetry"] = symmetry_data

    if oracle_data is not None:
        receipt["oracle"] = oracle_data

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/region/)

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"threshold_{receipt['threshold']:03d}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Args:
        receipts: List of receipt dictionaries

    Returns:
        Summary statistics dictionary
    """
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")

    stats = {
        "total_thresholds": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    count_receipts = [r for r in receipts if "count" in r]
    if count_receipts:
        stats["count"] = {
            "max_total": max(r["count"]["total"] for r in count_receipts),
            "early_exits": sum(r["count"]["early_exits"] for r in count_receipts),
            "monotone": all(r["count"].get("monotone", True) for r in count_receipts),
        }

    symmetry_receipts = [r for r in receipts if "symmetry" in r]
    if symmetry_receipts:
        stats["symmetry"] = {
            "checked": len(symmetry_receipts),
            "count_agreement_rate": sum(
                1 for r in symmetry_receipts if r["symmetry"]["counts_agree"]
            ) / len(symmetry_receipts),
            "fingerprint_agreement_rate": sum(
                1 for r in symmetry_receipts if r["symmetry"]["fingerprints_agree"]
            ) / len(symmetry_receipts),
        }

    oracle_receipts = [r for r in receipts if "oracle" in r]
    if oracle_receipts:
        stats["oracle"] = {
            "checked": len(oracle_receipts),
            "agreement_rate": sum(
                1 for r in oracle_receipts if r["oracle"]["agrees"]
            ) / len(oracle_receipts),
        }

    return stats
