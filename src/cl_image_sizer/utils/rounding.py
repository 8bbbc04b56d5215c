"""Single-precision dimension arithmetic.

Output dimensions must match byte-for-byte across runs and platforms, so all
scale factors are computed in float32 and rounded half away from zero.
"""

import math

import numpy as np


def round_half_away(value: float | np.floating) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    x = float(value)
    if x < 0:
        return -math.floor(-x + 0.5)
    return math.floor(x + 0.5)


def scaled_height(width: int, height: int, target_width: int) -> int:
    """Height that keeps the aspect ratio at ``target_width``: round(h * s / w)."""
    h = np.float32(height)
    s = np.float32(target_width)
    w = np.float32(width)
    return round_half_away(np.float32(h * s) / w)


def cover_dimensions(width: int, height: int, edge: int) -> tuple[int, int]:
    """Dimensions that scale the shorter side to exactly ``edge``."""
    scale = np.float32(edge) / np.float32(min(width, height))
    new_w = round_half_away(np.float32(width) * scale)
    new_h = round_half_away(np.float32(height) * scale)
    return new_w, new_h
