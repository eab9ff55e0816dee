"""Two-dimensional OpenSimplex2 noise."""

from __future__ import annotations

import math

HASH_MULTIPLIER = 0x53A3F72DEEC546F5
NORMALIZER_2D = 0.01001634121365712

PRIME_X = 0x5205402B9270C86F
PRIME_Y = 0x598CD327003817B5

SKEW_2D = 0.366025403784439
UNSKEW_2D = -0.21132486540518713

RSQUARED_2D = 0.5

N_GRADS_2D_EXPONENT = 7
N_GRADS_2D = 1 << N_GRADS_2D_EXPONENT

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63
_MASK32 = (1 << 32) - 1

_BASE_GRADIENTS = (
    (0.38268343236509, 0.923879532511287),
    (0.923879532511287, 0.38268343236509),
    (0.923879532511287, -0.38268343236509),
    (0.38268343236509, -0.923879532511287),
    (-0.38268343236509, -0.923879532511287),
    (-0.923879532511287, -0.38268343236509),
    (-0.923879532511287, 0.38268343236509),
    (-0.38268343236509, 0.923879532511287),
    (0.130526192220052, 0.99144486137381),
    (0.608761429008721, 0.793353340291235),
    (0.793353340291235, 0.608761429008721),
    (0.99144486137381, 0.130526192220051),
    (0.99144486137381, -0.130526192220051),
    (0.793353340291235, -0.60876142900872),
    (0.608761429008721, -0.793353340291235),
    (0.130526192220052, -0.99144486137381),
    (-0.130526192220052, -0.99144486137381),
    (-0.608761429008721, -0.793353340291235),
    (-0.793353340291235, -0.608761429008721),
    (-0.99144486137381, -0.130526192220052),
    (-0.99144486137381, 0.130526192220051),
    (-0.793353340291235, 0.608761429008721),
    (-0.608761429008721, 0.793353340291235),
    (-0.130526192220052, 0.99144486137381),
)


def _build_gradients() -> tuple[float, ...]:
    flat = [component / NORMALIZER_2D for pair in _BASE_GRADIENTS for component in pair]
    return tuple(flat[i % len(flat)] for i in range(N_GRADS_2D * 2))


_GRADIENTS_2D = _build_gradients()

_C1 = 1 + 2 * UNSKEW_2D
_A1_SLOPE = 2 * _C1 * (1 / UNSKEW_2D + 2)
_A1_OFFSET = -2 * _C1 * _C1


def _wrap64(value: int) -> int:
    """Reduce an integer to a signed 64-bit value with wrap-around."""
    value &= _MASK64
    return value - (1 << 64) if value & _SIGN64 else value


def gradient(x: int, y: int, dx: float, dy: float, seed: int) -> float:
    """Dot product of the hashed lattice gradient at (x, y) with (dx, dy)."""
    hashed = _wrap64((seed & _MASK32) ^ x ^ y)
    hashed = _wrap64(hashed * HASH_MULTIPLIER)
    hashed ^= hashed >> (64 - N_GRADS_2D_EXPONENT + 1)
    gi = hashed & ((N_GRADS_2D - 1) << 1)
    return _GRADIENTS_2D[gi] * dx + _GRADIENTS_2D[gi | 1] * dy


def noise2d(x: float, y: float, seed: int) -> float:
    """Noise at (x, y) in ordinary coordinates."""
    s = SKEW_2D * (x + y)
    return noise2d_unskewed_base(x + s, y + s, seed)


def noise2d_unskewed_base(x: float, y: float, seed: int) -> float:
    """Noise at (x, y) given in already skewed lattice coordinates."""
    xsb = math.floor(x)
    ysb = math.floor(y)
    xi = x - xsb
    yi = y - ysb

    xsbp = _wrap64(xsb * PRIME_X)
    ysbp = _wrap64(ysb * PRIME_Y)

    t = (xi + yi) * UNSKEW_2D
    dx0 = xi + t
    dy0 = yi + t

    value = 0.0
    a0 = RSQUARED_2D - dx0 * dx0 - dy0 * dy0
    if a0 > 0:
        value = (a0 * a0) * (a0 * a0) * gradient(xsbp, ysbp, dx0, dy0, seed)

    a1 = _A1_SLOPE * t + (_A1_OFFSET + a0)
    if a1 > 0:
        dx1 = dx0 - _C1
        dy1 = dy0 - _C1
        value += (a1 * a1) * (a1 * a1) * gradient(
            _wrap64(xsbp + PRIME_X), _wrap64(ysbp + PRIME_Y), dx1, dy1, seed
        )

    if dy0 > dx0:
        dx2 = dx0 - UNSKEW_2D
        dy2 = dy0 - (UNSKEW_2D + 1)
        a2 = RSQUARED_2D - dx2 * dx2 - dy2 * dy2
        if a2 > 0:
            value += (a2 * a2) * (a2 * a2) * gradient(
                xsbp, _wrap64(ysbp + PRIME_Y), dx2, dy2, seed
            )
    else:
        dx2 = dx0 - (UNSKEW_2D + 1)
        dy2 = dy0 - UNSKEW_2D
        a2 = RSQUARED_2D - dx2 * dx2 - dy2 * dy2
        if a2 > 0:
            value += (a2 * a2) * (a2 * a2) * gradient(
                _wrap64(xsbp + PRIME_X), ysbp, dx2, dy2, seed
            )

    return value


def layered_noise2d(
    x: float,
    y: float,
    seed: int,
    octaves: int = 4,
    persistence: float = 0.5,
    lacunarity: float = 2.0,
) -> float:
    """Sum of octaves of noise, normalised by the total amplitude."""
    if octaves < 1:
        raise ValueError("octaves must be at least 1")
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_amplitude = 0.0
    for _ in range(octaves):
        total += noise2d(x * frequency, y * frequency, seed) * amplitude
        max_amplitude += amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return total / max_amplitude