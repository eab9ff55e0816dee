"""World and generation settings."""

from __future__ import annotations

from voxelworlds.spline import Spline

CHUNK_GENERATION_OFFSET = 12
RENDER_DISTANCE = 8
CHUNK_SIZE = 32

PERLIN_SCALE = 4

SCALE = 3
OCTAVES = 6
PERSISTANCE = 0.3
LACUNARITY = 2.7

_TERRAIN_KEYPOINTS = [
    (-1.0, 400.0),
    (-0.8, 30.0),
    (-0.55, 30.0),
    (-0.25, 130.0),
    (-0.2, 130.0),
    (0.05, 135.0),
    (0.45, 250.0),
    (1.0, 500.0),
]

CONTINENTAL_SPLINE = Spline(_TERRAIN_KEYPOINTS)
EROSION_SPLINE = Spline(_TERRAIN_KEYPOINTS)
PEAKS_VALLEYS_SPLINE = Spline(
    [
        (-1.0, 100.0),
        (-0.6, 50.0),
        (-0.1, -100.0),
        (0.0, -100.0),
        (0.2, 50.0),
        (0.4, 80.0),
        (0.7, 85.0),
        (1.0, 100.0),
    ]
)

THREAD_AMOUNT = 6
FRAME_RATE = 240.0