"""Basic geometric value types shared across the engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np


def _vec3(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


@dataclass(eq=False)
class Line:
    """A ray with a starting position and a direction."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.direction = _vec3(self.direction)


@dataclass
class Model:
    """Vertex positions and the indices that connect them."""

    vertex_positions: list = field(default_factory=list)
    index_buffer_data: list[int] = field(default_factory=list)


class Group(enum.IntEnum):
    """Collision group an entity belongs to."""

    NULL = 0
    RENDER = 1
    TERRAIN = 2
    PLAYER = 3


class ChunkProgress(enum.Enum):
    """How far the generation of a chunk has gone."""

    PENDING = enum.auto()
    PARTIALLY_GENERATED = enum.auto()
    FULLY_GENERATED = enum.auto()


@dataclass(eq=False)
class Transform:
    """A model matrix, the identity by default."""

    model_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self) -> None:
        matrix = np.asarray(self.model_matrix, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        self.model_matrix = matrix