"""Transform helpers, position updates and chunk naming."""

from __future__ import annotations

import math
import operator

import numpy as np

from voxelworlds.components import PositionComponent
from voxelworlds.geometry import Transform


def _vec(values, size: int) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (size,):
        raise ValueError(f"expected a {size}-component vector, got shape {array.shape}")
    return array


def mesh_translate(transform: Transform, offset) -> None:
    """Post-multiply the model matrix by a translation."""
    translation = np.identity(4)
    translation[:3, 3] = _vec(offset, 3)
    transform.model_matrix = transform.model_matrix @ translation


def mesh_rotate(transform: Transform, angle: float, axis) -> None:
    """Post-multiply the model matrix by a rotation of angle radians about axis."""
    axis = _vec(axis, 3)
    length = np.linalg.norm(axis)
    if length == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = axis / length
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    rotation = np.identity(4)
    rotation[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    transform.model_matrix = transform.model_matrix @ rotation


def mesh_scale(transform: Transform, x: float, y: float, z: float) -> None:
    """Post-multiply the model matrix by a scaling."""
    transform.model_matrix = transform.model_matrix @ np.diag([x, y, z, 1.0])


def move_position(position: PositionComponent, new_position) -> None:
    """Set the position and mark the transform as stale."""
    position.position = _vec(new_position, 3)
    position.dirty = True


def rotate_position(position: PositionComponent, new_rotation) -> None:
    """Set the rotation quaternion (w, x, y, z) and mark the transform as stale."""
    position.rotation = _vec(new_rotation, 4)
    position.dirty = True


def scale_position(position: PositionComponent, new_scale) -> None:
    """Set the scale and mark the transform as stale."""
    position.scale = _vec(new_scale, 3)
    position.dirty = True


def smooth(t: float) -> float:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def int_to_string(value: int) -> str:
    """Decimal text of an integer."""
    return str(operator.index(value))


def chunk_name(chunk_x: int, chunk_y: int, chunk_z: int) -> str:
    """Name of a chunk entity: its coordinates joined by colons."""
    return ":".join(int_to_string(v) for v in (chunk_x, chunk_y, chunk_z))