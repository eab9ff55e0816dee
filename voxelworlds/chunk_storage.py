"""Flat block storage for one cubic chunk."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from voxelworlds.blocks import BlockType
from voxelworlds.constants import CHUNK_SIZE

TOTAL_CHUNK_SIZE = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE


def chunk_index(x: int, y: int, z: int) -> int:
    """Flat index of local block coordinates, x varying fastest."""
    return x + y * CHUNK_SIZE + z * CHUNK_SIZE * CHUNK_SIZE


def _check_local(x: int, y: int, z: int) -> None:
    for name, value in (("x", x), ("y", y), ("z", z)):
        if not 0 <= value < CHUNK_SIZE:
            raise IndexError(f"{name}={value} is outside 0..{CHUNK_SIZE - 1}")


@dataclass(eq=False)
class ChunkStorage:
    """The block types of one chunk, stored flat; all air by default."""

    blocks: np.ndarray = field(
        default_factory=lambda: np.zeros(TOTAL_CHUNK_SIZE, dtype=np.uint8)
    )
    was_generated: bool = False

    def __post_init__(self) -> None:
        blocks = np.asarray(self.blocks, dtype=np.uint8)
        if blocks.shape != (TOTAL_CHUNK_SIZE,):
            raise ValueError(
                f"expected {TOTAL_CHUNK_SIZE} blocks, got shape {blocks.shape}"
            )
        self.blocks = blocks

    def insert(self, block: BlockType, x: int, y: int, z: int) -> None:
        """Set the block at local coordinates counted from 0."""
        _check_local(x, y, z)
        self.blocks[chunk_index(x, y, z)] = BlockType(block)

    def get_block(self, x: int, y: int, z: int) -> BlockType:
        """Return the block at local coordinates counted from 0."""
        _check_local(x, y, z)
        return BlockType(int(self.blocks[chunk_index(x, y, z)]))