"""Kinds of block that make up the world."""

from __future__ import annotations

import enum


class BlockType(enum.IntEnum):
    """A block kind; the value doubles as an index into per-block tables."""

    AIR = 0
    GRASS_BLOCK = 1
    DIRT_BLOCK = 2
    STONE_BLOCK = 3
    SAND_BLOCK = 4