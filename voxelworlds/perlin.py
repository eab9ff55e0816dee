"""Chunk-relative two-dimensional Perlin noise."""

from __future__ import annotations

import math

from voxelworlds.constants import CHUNK_SIZE
from voxelworlds.utility import smooth

_LOOKUP_SIZE = 4096
_ANGLE_STEP = 2.0 * math.pi / _LOOKUP_SIZE
_GRADIENT_LOOKUP = tuple(
    (math.cos(i * _ANGLE_STEP), math.sin(i * _ANGLE_STEP)) for i in range(_LOOKUP_SIZE)
)

_MASK32 = 0xFFFFFFFF


def gradient(x: int, y: int, seed: int) -> tuple[float, float]:
    """Unit gradient vector hashed from the lattice point (x, y)."""
    h = seed & _MASK32
    h ^= ((x & _MASK32) * 374761393) & _MASK32
    h ^= ((y & _MASK32) * 668265263) & _MASK32
    h = ((h ^ (h >> 13)) * 1274126177) & _MASK32
    h ^= h >> 16
    return _GRADIENT_LOOKUP[(h >> 20) & (_LOOKUP_SIZE - 1)]


def _dot(a: tuple[float, float], bx: float, by: float) -> float:
    return a[0] * bx + a[1] * by


def _interpolate(x: float, y: float, d1: float, d2: float, d3: float, d4: float) -> float:
    sx = smooth(x)
    sy = smooth(y)
    ab = d1 + sx * (d2 - d1)
    cd = d3 + sx * (d4 - d3)
    return ab + sy * (cd - ab)


def noise2d_normalized(chunk_x: int, chunk_y: int, x: float, y: float, seed: int) -> float:
    """Noise at local (x, y) in a cell, shifted towards a positive range."""
    d1 = _dot(gradient(chunk_x, chunk_y, seed), x, -y)
    d2 = _dot(gradient(chunk_x + 1, chunk_y, seed), x - 1.0, -y)
    d3 = _dot(gradient(chunk_x, chunk_y + 1, seed), x, 1.0 - y)
    d4 = _dot(gradient(chunk_x + 1, chunk_y + 1, seed), x - 1.0, 1.0 - y)
    result = _interpolate(x, y, d1, d2, d3, d4)
    return (result + 1.0) / 2.0 * 1.414


def noise2d(chunk_x: int, chunk_y: int, x: float, y: float, seed: int) -> float:
    """Noise at local (x, y) in the cell whose corner is (chunk_x, chunk_y)."""
    d1 = _dot(gradient(chunk_x, chunk_y, seed), x, y)
    d2 = _dot(gradient(chunk_x + 1, chunk_y, seed), x - 1.0, y)
    d3 = _dot(gradient(chunk_x, chunk_y + 1, seed), x, y - 1.0)
    d4 = _dot(gradient(chunk_x + 1, chunk_y + 1, seed), x - 1.0, y - 1.0)
    return _interpolate(x, y, d1, d2, d3, d4) * 1.414


def _layered(
    base,
    chunk_x: int,
    chunk_y: int,
    x: float,
    y: float,
    seed: int,
    octaves: int,
    persistence: float,
    lacunarity: float,
) -> float:
    if octaves < 1:
        raise ValueError("octaves must be at least 1")
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_amplitude = 0.0
    for _ in range(octaves):
        scaled_x = (chunk_x * CHUNK_SIZE + x * CHUNK_SIZE) * frequency
        scaled_y = (chunk_y * CHUNK_SIZE + y * CHUNK_SIZE) * frequency
        new_chunk_x = math.floor(scaled_x / CHUNK_SIZE)
        new_chunk_y = math.floor(scaled_y / CHUNK_SIZE)
        local_x = (scaled_x - new_chunk_x * CHUNK_SIZE) / CHUNK_SIZE
        local_y = (scaled_y - new_chunk_y * CHUNK_SIZE) / CHUNK_SIZE
        total += base(new_chunk_x, new_chunk_y, local_x, local_y, seed) * amplitude
        max_amplitude += amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return total / max_amplitude


def layered_noise2d_normalized(
    chunk_x: int,
    chunk_y: int,
    x: float,
    y: float,
    seed: int,
    octaves: int = 4,
    persistence: float = 0.5,
    lacunarity: float = 2.0,
) -> float:
    """Octaves of normalised noise; persistence shapes peaks, lacunarity detail."""
    return _layered(
        noise2d_normalized, chunk_x, chunk_y, x, y, seed, octaves, persistence, lacunarity
    )


def layered_noise2d(
    chunk_x: int,
    chunk_y: int,
    x: float,
    y: float,
    seed: int,
    octaves: int = 4,
    persistence: float = 0.5,
    lacunarity: float = 2.0,
) -> float:
    """Octaves of noise; persistence shapes peaks, lacunarity adds detail."""
    return _layered(noise2d, chunk_x, chunk_y, x, y, seed, octaves, persistence, lacunarity)