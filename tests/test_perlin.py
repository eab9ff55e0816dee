import math

import pytest

from voxelworlds.perlin import (
    gradient,
    layered_noise2d,
    layered_noise2d_normalized,
    noise2d,
    noise2d_normalized,
)


def test_gradient_for_zero_seed_at_origin():
    gx, gy = gradient(0, 0, 0)
    assert gx == pytest.approx(1.0)
    assert gy == pytest.approx(0.0)


@pytest.mark.parametrize("x, y, seed", [(0, 0, 1), (5, -3, 99), (-100, 200, 2**32 - 1)])
def test_gradient_is_unit_length(x, y, seed):
    gx, gy = gradient(x, y, seed)
    assert math.hypot(gx, gy) == pytest.approx(1.0)


def test_gradient_is_deterministic_unit_vector():
    gx, gy = gradient(17, 23, 5)
    assert (gx, gy) == tuple(gradient(17, 23, 5))
    assert math.hypot(gx, gy) == pytest.approx(1.0)


@pytest.mark.parametrize("corner", [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)])
def test_noise_is_zero_at_cell_corners(corner):
    assert noise2d(3, -4, corner[0], corner[1], 77) == pytest.approx(0.0, abs=1e-12)


def test_normalized_noise_at_corner():
    assert noise2d_normalized(0, 0, 0.0, 0.0, 5) == pytest.approx(0.707)


def test_noise_is_continuous_across_cells():
    for y in (0.0, 0.25, 0.5, 0.9):
        assert noise2d(0, 0, 1.0, y, 8) == pytest.approx(noise2d(1, 0, 0.0, y, 8))
        assert noise2d(0, 0, y, 1.0, 8) == pytest.approx(noise2d(0, 1, y, 0.0, 8))


def test_noise_over_unit_cell_stays_bounded():
    # Mirrors the source's sampling of one cell on a grid.
    size = 60
    values = [
        noise2d(0, 0, x / (size - 1), y / (size - 1), 4321)
        for x in range(size)
        for y in range(size)
    ]
    assert all(-1.001 <= v <= 1.001 for v in values)
    assert max(values) > min(values)


def test_layered_with_one_octave_is_plain_noise():
    assert layered_noise2d(2, 3, 0.25, 0.5, 9, 1) == pytest.approx(
        noise2d(2, 3, 0.25, 0.5, 9)
    )


def test_layered_normalized_with_one_octave_is_plain_normalized():
    assert layered_noise2d_normalized(-1, 4, 0.75, 0.125, 9, 1) == pytest.approx(
        noise2d_normalized(-1, 4, 0.75, 0.125, 9)
    )


def test_layered_noise_is_bounded():
    values = [
        layered_noise2d(cx, cy, x / 8, y / 8, 13)
        for cx in range(-2, 2)
        for cy in range(-2, 2)
        for x in range(8)
        for y in range(8)
    ]
    assert all(-1.001 <= v <= 1.001 for v in values)


def test_seed_changes_layered_field():
    a = [layered_noise2d(0, 0, i / 10, 0.3, 1) for i in range(10)]
    b = [layered_noise2d(0, 0, i / 10, 0.3, 2) for i in range(10)]
    assert a != b


@pytest.mark.parametrize("func", [layered_noise2d, layered_noise2d_normalized])
def test_layered_rejects_zero_octaves(func):
    with pytest.raises(ValueError):
        func(0, 0, 0.5, 0.5, 1, 0)