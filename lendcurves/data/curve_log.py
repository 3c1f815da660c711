"""Debug log of raw Kamino borrow curves."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

CurveLog = Dict[str, Dict[str, List[float]]]


def transform_borrow_curve(curve: Sequence[Tuple[float, float]]) -> Dict[str, List[float]]:
    """Split (knot, value) pairs into parallel lists."""
    return {
        "knots": [float(k) for k, _ in curve],
        "values": [float(v) for _, v in curve],
    }


def curve_log_path(
    directory: Path,
    now: Optional[datetime] = None,
    file_base: str = "borrowCurves",
) -> Path:
    """Timestamped file path, e.g. borrowCurves_101926_1430.json."""
    now = now or datetime.now()
    return Path(directory) / f"{file_base}_{now:%m%d%y_%H%M}.json"


def write_borrow_curve_log(
    log: CurveLog,
    directory: Path,
    now: Optional[datetime] = None,
) -> Path:
    """
    Write the per-token borrow curves to a timestamped JSON file.

    Args:
        log: Token symbol -> {knots, values}
        directory: Target directory (must exist)
        now: Timestamp for the file name

    Returns:
        Path of the written file
    """
    path = curve_log_path(directory, now)
    path.write_text(json.dumps(log, indent=2), encoding="utf-8")
    logger.info(f"Borrow curve log written to {path}")
    return path
