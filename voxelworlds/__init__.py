"""Voxel world building blocks: terrain noise, splines, chunks, loops, a thread pool and AABB physics."""

__version__ = "0.1.0"

__all__ = [
    "blocks",
    "chunk",
    "chunk_storage",
    "components",
    "constants",
    "geometry",
    "loops",
    "open_simplex",
    "perlin",
    "physics",
    "spline",
    "thread_pool",
    "utility",
    "world_generation",
]