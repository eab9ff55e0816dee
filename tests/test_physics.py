import math

import numpy as np
import pytest

from voxelworlds.components import BoundingBoxComponent
from voxelworlds.geometry import Line
from voxelworlds.physics import (
    create_bounding_model,
    extract_infinite_frustum_planes,
    intersects,
    is_aabb_in_frustum,
    line_intersects_aabb,
    mtv,
    point_in_aabb,
    swept_aabb,
)


def box(lo, hi):
    return BoundingBoxComponent(world_min=lo, world_max=hi)


def unit_box():
    return box((0, 0, 0), (1, 1, 1))


def normalize(v):
    v = np.array(v, dtype=float)
    return v / np.linalg.norm(v)


@pytest.mark.parametrize(
    "position, direction, expected",
    [
        ((0.5, 0.5, 0.5), normalize((1, 0, 0)), 0.0),
        ((0.5, 2.0, 0.5), normalize((1, 0, 0)), -1.0),
        ((-0.5, 2.0, 0.5), normalize((1, -1, 0)), math.sqrt(2.0)),
        ((-0.5, 2.0, 0.5), normalize((1, 1, 0)), -1.0),
        ((0.5, 0.5, 0.5), (0.0, 0.0, 0.0), 0.0),
        ((0.0, 0.0, 1.0), normalize((0, 0, 1)), 0.0),
        ((0.0, 0.0, 1.1), normalize((0, 0, 1)), -1.0),
        ((-100.0, 0.5, 0.5), normalize((1, 0, 0)), 100.0),
        ((-100.0, 0.5, 0.5), (0.0, 0.0, 0.0), -1.0),
    ],
)
def test_ray_casting_cases(position, direction, expected):
    line = Line(position=position, direction=direction)
    assert line_intersects_aabb(line, unit_box()) == pytest.approx(expected, abs=1e-5)


def test_intersects_overlapping_and_touching():
    assert intersects(unit_box(), box((0.5, 0.5, 0.5), (2, 2, 2)))
    assert intersects(unit_box(), box((1, 0, 0), (2, 1, 1)))


def test_intersects_separated():
    assert not intersects(unit_box(), box((1.5, 0, 0), (2, 1, 1)))


def test_point_in_aabb():
    assert point_in_aabb((0.5, 0.5, 0.5), unit_box())
    assert point_in_aabb((1.0, 0.0, 1.0), unit_box())
    assert not point_in_aabb((1.01, 0.5, 0.5), unit_box())


def test_mtv_along_x():
    result = mtv(unit_box(), box((0.9, 0, 0), (2, 1, 1)))
    np.testing.assert_allclose(result, [0.101, 0.0, 0.0])


def test_mtv_along_y_negative_direction():
    result = mtv(box((0, 0.8, 0), (1, 1.8, 1)), unit_box())
    np.testing.assert_allclose(result, [0.0, -0.201, 0.0])


def test_mtv_along_z_on_tie():
    result = mtv(unit_box(), unit_box())
    np.testing.assert_allclose(result, [0.0, 0.0, -1.001])


def test_swept_hit_returns_entry_time_and_normal():
    time, normal = swept_aabb(unit_box(), (2, 0, 0), box((2, 0, 0), (3, 1, 1)))
    assert time == pytest.approx(0.5)
    np.testing.assert_array_equal(normal, [-1.0, 0.0, 0.0])


def test_swept_negative_velocity_normal():
    time, normal = swept_aabb(box((3, 0, 0), (4, 1, 1)), (0, 0, 0) if False else (-2, 0, 0), box((1, 0, 0), (2, 1, 1)))
    assert time == pytest.approx(0.5)
    np.testing.assert_array_equal(normal, [1.0, 0.0, 0.0])


def test_swept_miss_on_stationary_axis():
    time, normal = swept_aabb(unit_box(), (2, 0, 0), box((2, 5, 0), (3, 6, 1)))
    assert time == 1.0
    np.testing.assert_array_equal(normal, [0.0, 0.0, 0.0])


def test_swept_too_far_away():
    time, normal = swept_aabb(unit_box(), (1, 0, 0), box((5, 0, 0), (6, 1, 1)))
    assert time == 1.0
    np.testing.assert_array_equal(normal, np.zeros(3))


def test_swept_already_overlapping():
    time, normal = swept_aabb(unit_box(), (1, 0, 0), box((0.5, 0, 0), (1.5, 1, 1)))
    assert time == 0.0
    np.testing.assert_array_equal(normal, np.zeros(3))


def test_extract_planes_from_identity():
    planes = extract_infinite_frustum_planes(np.identity(4))
    np.testing.assert_allclose(
        planes,
        [
            [1, 0, 0, 1],
            [-1, 0, 0, 1],
            [0, 1, 0, 1],
            [0, -1, 0, 1],
            [0, 0, 1, 1],
        ],
    )


def test_extract_planes_are_normalised():
    m = np.diag([2.0, 3.0, 4.0, 1.0])
    planes = extract_infinite_frustum_planes(m)
    np.testing.assert_allclose(np.linalg.norm(planes[:, :3], axis=1), np.ones(5))
    np.testing.assert_allclose(planes[0], [1.0, 0.0, 0.0, 0.5])


def test_extract_planes_rejects_bad_shape():
    with pytest.raises(ValueError):
        extract_infinite_frustum_planes(np.identity(3))


def test_frustum_inside_and_outside():
    planes = extract_infinite_frustum_planes(np.identity(4))
    assert is_aabb_in_frustum(box((-0.5, -0.5, -0.5), (0.5, 0.5, 0.5)), planes)
    assert not is_aabb_in_frustum(box((5, 0, 0), (6, 1, 1)), planes)


def test_frustum_partially_inside_counts():
    planes = extract_infinite_frustum_planes(np.identity(4))
    assert is_aabb_in_frustum(box((0.5, 0, 0), (3, 0.5, 0.5)), planes)


def test_create_bounding_model():
    bbox = BoundingBoxComponent(local_min=(0, 0, 0), local_max=(1, 2, 3))
    model = create_bounding_model(bbox)
    np.testing.assert_array_equal(
        np.array(model.vertex_positions),
        [
            [0, 0, 0],
            [1, 0, 0],
            [1, 2, 0],
            [0, 2, 0],
            [0, 0, 3],
            [1, 0, 3],
            [1, 2, 3],
            [0, 2, 3],
        ],
    )
    assert model.index_buffer_data == [
        0, 1, 1, 2, 2, 3, 3, 0,
        4, 5, 5, 6, 6, 7, 7, 4,
        0, 4, 1, 5, 2, 6, 3, 7,
    ]