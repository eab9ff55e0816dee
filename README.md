# voxelworlds

Building blocks for a chunked voxel world: deterministic terrain noise,
height splines, chunk block storage, loops over chunk positions around a
player, a small thread pool, and axis-aligned bounding-box physics.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `voxelworlds.geometry` | `Line`, `Model`, `Transform`, `Group`, `ChunkProgress` |
| `voxelworlds.blocks` | `BlockType` enumeration (air, grass, dirt, stone, sand) |
| `voxelworlds.constants` | chunk size, render distance, noise settings, thread count and the terrain splines |
| `voxelworlds.spline` | `Spline`, a piecewise-linear curve through key points, clamped at both ends |
| `voxelworlds.loops` | `CircleLoop` (points inside a circle) and `SpiralLoop` (a step-by-step square spiral with `advance`, `reset`, `x`, `z`) |
| `voxelworlds.thread_pool` | `ThreadPool` (usable as a context manager) and the shared `default_pool()` |
| `voxelworlds.components` | position, physics, bounding box, camera, inventory, player controller, block event and chunk state records |
| `voxelworlds.chunk_storage` | `ChunkStorage` and `chunk_index` for a flat chunk block array; out-of-range coordinates raise `IndexError` |
| `voxelworlds.chunk` | `Chunk`, a 3-D block grid with its model; out-of-range writes are ignored and reads give air |
| `voxelworlds.utility` | `mesh_translate`, `mesh_rotate`, `mesh_scale`, `move_position`, `rotate_position`, `scale_position`, `smooth`, `int_to_string`, `chunk_name` |
| `voxelworlds.open_simplex` | 2-D OpenSimplex noise (`noise2d`) and layered noise (`layered_noise2d`) |
| `voxelworlds.perlin` | 2-D Perlin noise addressed by cell and local coordinates, plain and normalised, single and layered |
| `voxelworlds.world_generation` | `generate_height` for terrain columns |
| `voxelworlds.physics` | `intersects`, `point_in_aabb`, `mtv`, `swept_aabb`, `line_intersects_aabb`, `is_aabb_in_frustum`, `extract_infinite_frustum_planes`, `create_bounding_model` |

## Examples

Terrain height for a column of the world:

```python
from voxelworlds.world_generation import generate_height

height = generate_height(1234, x=10, z=-42)
```

Layered noise:

```python
from voxelworlds.open_simplex import layered_noise2d

value = layered_noise2d(0.5, 1.25, 1234, 4, 0.5, 2.0)
```

A curve through key points:

```python
from voxelworlds.spline import Spline

spline = Spline([(-1.0, 100.0), (0.0, -100.0), (1.0, 100.0)])
spline.evaluate(-0.5)   # 0.0
```

Chunks in a circle around the player:

```python
from voxelworlds.loops import CircleLoop

circle = CircleLoop()
circle.set_center(3, -2)
for x, z in circle.loop(8):
    ...
```

Naming a chunk:

```python
from voxelworlds.utility import chunk_name

chunk_name(1, -2, 3)   # "1:-2:3"
```

Casting a ray at a box:

```python
from voxelworlds.components import BoundingBoxComponent
from voxelworlds.geometry import Line
from voxelworlds.physics import line_intersects_aabb

box = BoundingBoxComponent(world_min=(0, 0, 0), world_max=(1, 1, 1))
ray = Line(position=(-100.0, 0.5, 0.5), direction=(1.0, 0.0, 0.0))
line_intersects_aabb(ray, box)   # 100.0; -1.0 when the ray misses
```

A moving box against a still one; `swept_aabb` returns the time of impact
in `[0, 1]` and the collision normal:

```python
from voxelworlds.physics import swept_aabb

time, normal = swept_aabb(moving_box, (2.0, 0.0, 0.0), still_box)
```

Running work in the background; leaving the `with` block finishes the
queued tasks and joins the workers:

```python
from voxelworlds.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    pool.enqueue(lambda: print("generated"))
```

Noise functions are deterministic for a given seed, so the same seed always
gives the same world.

## What this package does not do

It is a library of pieces, not a game. There is no window, rendering, GPU
buffer or shader handling, no texture loading, no input handling or game
loop, no entity manager, and no system that turns block data into chunk
meshes. `Chunk` and the components only hold data; drawing it is left to
the program that uses them.