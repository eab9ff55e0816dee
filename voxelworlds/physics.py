"""Axis-aligned box collision, ray casting and frustum culling."""

from __future__ import annotations

import math

import numpy as np

from voxelworlds.components import BoundingBoxComponent
from voxelworlds.geometry import Line, Model

_MTV_EPSILON = 0.001

_BOUNDING_EDGES = [
    0, 1,
    1, 2,
    2, 3,
    3, 0,
    4, 5,
    5, 6,
    6, 7,
    7, 4,
    0, 4,
    1, 5,
    2, 6,
    3, 7,
]


def _vec3(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def intersects(box1: BoundingBoxComponent, box2: BoundingBoxComponent) -> bool:
    """True when the world-space boxes overlap or touch."""
    return bool(
        np.all(box1.world_min <= box2.world_max)
        and np.all(box1.world_max >= box2.world_min)
    )


def point_in_aabb(point, box: BoundingBoxComponent) -> bool:
    """True when the point lies inside the box or on its surface."""
    p = _vec3(point)
    return bool(np.all(box.world_min <= p) and np.all(p <= box.world_max))


def mtv(box1: BoundingBoxComponent, box2: BoundingBoxComponent) -> np.ndarray:
    """Minimum translation vector along the axis of least overlap."""
    overlap = np.minimum(box1.world_max, box2.world_max) - np.maximum(
        box1.world_min, box2.world_min
    )
    overlap_x, overlap_y, overlap_z = (float(v) for v in overlap)

    if overlap_x < overlap_y and overlap_x < overlap_z:
        axis, amount = 0, overlap_x
    elif overlap_y < overlap_z:
        axis, amount = 1, overlap_y
    else:
        axis, amount = 2, overlap_z

    direction = 1.0 if box1.world_min[axis] < box2.world_min[axis] else -1.0
    result = np.zeros(3)
    result[axis] = direction * (amount + _MTV_EPSILON)
    return result


def swept_aabb(
    box1: BoundingBoxComponent, velocity, box2: BoundingBoxComponent
) -> tuple[float, np.ndarray]:
    """Time of impact in [0, 1] of box1 moving by velocity into a still box2.

    Returns the time and the collision normal; a time of 1.0 with a zero
    normal means no collision during the step, 0.0 with a zero normal means
    the boxes already overlap.
    """
    v = _vec3(velocity)
    no_hit = (1.0, np.zeros(3))

    for axis in range(3):
        if v[axis] == 0.0 and (
            box1.world_max[axis] < box2.world_min[axis]
            or box1.world_min[axis] > box2.world_max[axis]
        ):
            return no_hit

    entries = []
    exits = []
    for axis in range(3):
        if v[axis] > 0.0:
            entry_dist = box2.world_min[axis] - box1.world_max[axis]
            exit_dist = box2.world_max[axis] - box1.world_min[axis]
        else:
            entry_dist = box2.world_max[axis] - box1.world_min[axis]
            exit_dist = box2.world_min[axis] - box1.world_max[axis]
        if v[axis] != 0.0:
            entries.append(float(entry_dist / v[axis]))
            exits.append(float(exit_dist / v[axis]))
        else:
            entries.append(-math.inf)
            exits.append(math.inf)

    entry_time = max(entries)
    exit_time = min(exits)

    if entry_time > exit_time or entry_time > 1.0 or exit_time < 0.0:
        return no_hit
    if entry_time < 0.0:
        return 0.0, np.zeros(3)

    x_entry, y_entry, z_entry = entries
    if x_entry > y_entry and x_entry > z_entry:
        axis = 0
    elif y_entry > z_entry:
        axis = 1
    else:
        axis = 2
    normal = np.zeros(3)
    normal[axis] = -1.0 if v[axis] > 0.0 else 1.0
    return entry_time, normal


def line_intersects_aabb(line: Line, box: BoundingBoxComponent) -> float:
    """Distance along the ray to the box, or -1.0 if the ray never hits it."""
    scale_min = -math.inf
    scale_max = math.inf

    if np.linalg.norm(line.direction) == 0:
        return 0.0 if point_in_aabb(line.position, box) else -1.0

    for line_pos, line_dir, box_min, box_max in zip(
        line.position, line.direction, box.world_min, box.world_max
    ):
        if line_dir != 0:
            scale1 = float((box_min - line_pos) / line_dir)
            scale2 = float((box_max - line_pos) / line_dir)
            scale_min = max(scale_min, min(scale1, scale2))
            scale_max = min(scale_max, max(scale1, scale2))
        elif line_pos < box_min or line_pos > box_max:
            return -1.0

    if scale_min <= scale_max and scale_max >= 0:
        return max(scale_min, 0.0)
    return -1.0


def is_aabb_in_frustum(box: BoundingBoxComponent, frustum_planes) -> bool:
    """True unless the box lies entirely behind one of the frustum planes."""
    planes = np.asarray(frustum_planes, dtype=float)
    if planes.ndim != 2 or planes.shape[1] != 4:
        raise ValueError(f"expected planes of 4 components, got shape {planes.shape}")
    center = (box.world_min + box.world_max) * 0.5
    half_extents = (box.world_max - box.world_min) * 0.5

    for plane in planes:
        normal = plane[:3]
        radius = float(np.dot(half_extents, np.abs(normal)))
        center_distance = float(np.dot(normal, center) + plane[3])
        if center_distance + radius < 0:
            return False
    return True


def extract_infinite_frustum_planes(view_proj) -> np.ndarray:
    """Left, right, bottom, top and near planes of a view-projection matrix.

    The matrix acts on column vectors; each returned row is (a, b, c, d)
    with a unit-length normal (a, b, c).
    """
    m = np.asarray(view_proj, dtype=float)
    if m.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
    planes = np.array(
        [
            m[3] + m[0],
            m[3] - m[0],
            m[3] + m[1],
            m[3] - m[1],
            m[3] + m[2],
        ]
    )
    lengths = np.linalg.norm(planes[:, :3], axis=1)
    if np.any(lengths == 0.0):
        raise ValueError("view-projection matrix yields a degenerate frustum plane")
    return planes / lengths[:, np.newaxis]


def create_bounding_model(box: BoundingBoxComponent) -> Model:
    """Wireframe model of the box's local corners: 8 vertices, 12 edges."""
    lo, hi = box.local_min, box.local_max
    vertices = [
        np.array([lo[0], lo[1], lo[2]]),
        np.array([hi[0], lo[1], lo[2]]),
        np.array([hi[0], hi[1], lo[2]]),
        np.array([lo[0], hi[1], lo[2]]),
        np.array([lo[0], lo[1], hi[2]]),
        np.array([hi[0], lo[1], hi[2]]),
        np.array([hi[0], hi[1], hi[2]]),
        np.array([lo[0], hi[1], hi[2]]),
    ]
    return Model(vertex_positions=vertices, index_buffer_data=list(_BOUNDING_EDGES))