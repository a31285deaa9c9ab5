"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def point_in_circle(px: float, py: float, cx: float, cy: float, r: float) -> bool:
    """Strict point-inside-circle test (point on the rim does not count)"""
    return math.hypot(px - cx, py - cy) < r


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
