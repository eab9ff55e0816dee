"""Terrain height from layered noise shaped by splines."""

from __future__ import annotations

import math

from voxelworlds.constants import (
    CONTINENTAL_SPLINE,
    EROSION_SPLINE,
    PEAKS_VALLEYS_SPLINE,
    SCALE,
)
from voxelworlds.open_simplex import layered_noise2d

_X_OFFSET = 1343
_Z_OFFSET = 343


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def generate_height(seed: int, x: int, z: int) -> float:
    """Terrain height in blocks for the world column (x, z)."""
    x += _X_OFFSET
    z += _Z_OFFSET

    continental_freq = 0.005 / (4 * SCALE)
    erosion_freq = 0.004 / (4 * SCALE)
    peaks_freq = 0.025 / (10 * SCALE)

    continentalness = layered_noise2d(
        x * continental_freq, z * continental_freq, seed, 4, 0.5, 2.5
    )
    erosion = layered_noise2d(x * erosion_freq, z * erosion_freq, seed, 4, 0.4, 2.4)
    peaks_and_valleys = layered_noise2d(
        x * peaks_freq, z * peaks_freq, seed, 6, 0.4, 1.8
    )

    continental_adj = CONTINENTAL_SPLINE.evaluate(continentalness)
    erosion_adj = EROSION_SPLINE.evaluate(erosion)
    peaks_valleys_adj = PEAKS_VALLEYS_SPLINE.evaluate(peaks_and_valleys)

    return _round_half_away(
        continental_adj * 0.5 + erosion_adj * 0.3 + peaks_valleys_adj * 0.2
    )