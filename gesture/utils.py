# gesture/utils.py
from typing import Optional

import numpy as np

from gesture.types import NUM_KEYPOINTS


def lm_xy(lm):
    """Landmark object or (x, y) pair -> (x, y) tuple."""
    if hasattr(lm, "x") and hasattr(lm, "y"):
        return lm.x, lm.y
    return lm[0], lm[1]


def to_points(keypoints) -> Optional[np.ndarray]:
    """
    Keypoint sequence -> (21, 2) float array.
    Returns None for empty or malformed input (wrong length, non-numeric, NaN/inf).
    """
    if keypoints is None:
        return None
    try:
        if len(keypoints) != NUM_KEYPOINTS:
            return None
        pts = np.array([lm_xy(p) for p in keypoints], dtype=np.float64)
    except (TypeError, ValueError, IndexError):
        return None

    if pts.shape != (NUM_KEYPOINTS, 2) or not np.all(np.isfinite(pts)):
        return None
    return pts


def hdist(a, b) -> float:
    return float(abs(a[0] - b[0]))
