"""Component records attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

import numpy as np

from voxelworlds.blocks import BlockType
from voxelworlds.geometry import ChunkProgress, Group, Model

INVENTORY_SIZE = 10


def _array(values, shape: tuple[int, ...]) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != shape:
        raise ValueError(f"expected shape {shape}, got {array.shape}")
    return array


@dataclass(eq=False)
class PositionComponent:
    """Position, rotation quaternion (w, x, y, z), scale and cached transform."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    transform: np.ndarray = field(default_factory=lambda: np.identity(4))
    dirty: bool = True

    def __post_init__(self) -> None:
        self.position = _array(self.position, (3,))
        self.rotation = _array(self.rotation, (4,))
        self.scale = _array(self.scale, (3,))
        self.transform = _array(self.transform, (4, 4))


@dataclass(eq=False)
class PhysicsComponent:
    """Velocity and the physical properties of a moving body."""

    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    mass: float = 0.0
    friction: float = 1.2

    def __post_init__(self) -> None:
        self.velocity = _array(self.velocity, (3,))


@dataclass(eq=False)
class BoundingBoxComponent:
    """An axis-aligned box in local and world coordinates."""

    local_min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    local_max: np.ndarray = field(default_factory=lambda: np.zeros(3))
    world_min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    world_max: np.ndarray = field(default_factory=lambda: np.zeros(3))
    group: Group = Group.NULL
    mask: Group = Group.NULL
    model: Model = field(default_factory=Model)

    def __post_init__(self) -> None:
        self.local_min = _array(self.local_min, (3,))
        self.local_max = _array(self.local_max, (3,))
        self.world_min = _array(self.world_min, (3,))
        self.world_max = _array(self.world_max, (3,))
        self.group = Group(self.group)
        self.mask = Group(self.mask)


@dataclass
class BoundingBoxCollectionComponent:
    """Several bounding boxes sharing one collision group and mask."""

    bounding_boxes: list[BoundingBoxComponent] = field(default_factory=list)
    group: Group = Group.NULL
    mask: Group = Group.NULL


@dataclass(eq=False)
class CameraComponent:
    """Camera matrices, orientation vectors and view-frustum planes."""

    projection_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    up_vector: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    view_direction: np.ndarray = field(
        default_factory=lambda: np.array([0.0, 0.0, -1.0])
    )
    frustum_planes: np.ndarray = field(default_factory=lambda: np.zeros((5, 4)))

    def __post_init__(self) -> None:
        self.projection_matrix = _array(self.projection_matrix, (4, 4))
        self.view_matrix = _array(self.view_matrix, (4, 4))
        self.up_vector = _array(self.up_vector, (3,))
        self.view_direction = _array(self.view_direction, (3,))
        self.frustum_planes = _array(self.frustum_planes, (5, 4))


@dataclass
class ItemSlot:
    """One inventory slot holding a stack of a single block type."""

    item: BlockType = BlockType.AIR
    count: int = 1
    max_amount: int = 1


@dataclass
class InventoryComponent:
    """A fixed row of item slots and the currently selected one."""

    slots: list[ItemSlot] = field(
        default_factory=lambda: [ItemSlot() for _ in range(INVENTORY_SIZE)]
    )
    current_slot: int = 0

    def __post_init__(self) -> None:
        if len(self.slots) != INVENTORY_SIZE:
            raise ValueError(f"an inventory holds exactly {INVENTORY_SIZE} slots")


@dataclass
class PlayerControllerComponent:
    """Movement speed and mouse sensitivity of a controllable player."""

    speed: float = 20.0
    sensitivity: float = 10.0


@dataclass(eq=False)
class BlockEventComponent:
    """Where and when a block event happened."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.position = _array(self.position, (3,))


@dataclass
class BlockBreakEventComponent:
    """A block was broken by the given entity."""

    entity_id: int = 0


@dataclass
class BlockPlaceEventComponent:
    """A block of the given type was placed by the given entity."""

    block_placed: BlockType = BlockType.AIR
    entity_id: int = 0


@dataclass
class ChunkStateComponent:
    """Generation progress of a chunk."""

    progress: ChunkProgress = ChunkProgress.PENDING