"""Piecewise linear spline over sorted keypoints."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, NamedTuple

_LINEAR_SEARCH_LIMIT = 64


class _Segment(NamedTuple):
    x1: float
    x2: float
    y1: float
    y2: float

    def interpolate(self, x: float) -> float:
        t = (x - self.x1) / (self.x2 - self.x1)
        return self.y1 + t * (self.y2 - self.y1)

    def contains(self, x: float) -> bool:
        return self.x1 <= x < self.x2


class Spline:
    """Linear interpolation between (x, y) keypoints, clamped at both ends."""

    def __init__(self, keypoints: Iterable[tuple[float, float]]) -> None:
        points = [(float(x), float(y)) for x, y in keypoints]
        if len(points) < 2:
            raise ValueError("a spline needs at least two keypoints")
        self._xs = [x for x, _ in points]
        self._segments = [
            _Segment(x1, x2, y1, y2) for (x1, y1), (x2, y2) in zip(points, points[1:])
        ]
        self._last_index = 0

    def evaluate(self, x: float) -> float:
        """Return the spline's value at x."""
        cached = self._segments[self._last_index]
        if cached.contains(x):
            return cached.interpolate(x)

        first, last = self._segments[0], self._segments[-1]
        if x <= first.x1:
            self._last_index = 0
            return first.y1
        if x >= last.x2:
            self._last_index = len(self._segments) - 1
            return last.y2

        if len(self._segments) < _LINEAR_SEARCH_LIMIT:
            found = next(
                (i for i, seg in enumerate(self._segments) if seg.contains(x)), None
            )
            if found is None:
                return 0.0
            self._last_index = found
            return self._segments[found].interpolate(x)

        position = bisect_left(self._xs, x)
        index = 0 if position == 0 else position - 1
        self._last_index = index
        return self._segments[index].interpolate(x)