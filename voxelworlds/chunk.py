"""A cubic chunk of blocks with its mesh data."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from voxelworlds.blocks import BlockType
from voxelworlds.constants import CHUNK_SIZE
from voxelworlds.geometry import Model, Transform


def _in_chunk(x: int, y: int, z: int) -> bool:
    return all(0 <= value < CHUNK_SIZE for value in (x, y, z))


@dataclass(eq=False)
class Chunk:
    """Blocks indexed [x, y, z] plus the model and texture data built from them."""

    blocks: np.ndarray = field(
        default_factory=lambda: np.zeros((CHUNK_SIZE,) * 3, dtype=np.uint8)
    )
    was_generated: bool = False
    model: Model = field(default_factory=Model)
    texture_positions: list = field(default_factory=list)
    texture_ids: list[int] = field(default_factory=list)
    transform: Transform = field(default_factory=Transform)

    def __post_init__(self) -> None:
        blocks = np.asarray(self.blocks, dtype=np.uint8)
        if blocks.shape != (CHUNK_SIZE,) * 3:
            raise ValueError(f"expected {(CHUNK_SIZE,) * 3} blocks, got {blocks.shape}")
        self.blocks = blocks

    def insert(self, block: BlockType, x: int, y: int, z: int) -> None:
        """Set a block; coordinates outside the chunk are ignored."""
        if _in_chunk(x, y, z):
            self.blocks[x, y, z] = BlockType(block)

    def get_block(self, x: int, y: int, z: int) -> BlockType:
        """Return a block; coordinates outside the chunk read as air."""
        if not _in_chunk(x, y, z):
            return BlockType.AIR
        return BlockType(int(self.blocks[x, y, z]))

    def add_model(self, model: Model) -> None:
        """Replace the chunk's model."""
        self.model = model