"""Iteration patterns over chunk coordinates around a centre."""

from __future__ import annotations


class CircleLoop:
    """Lists the integer (x, z) points inside a circle around a centre."""

    def __init__(self) -> None:
        self._center_x = 0
        self._center_z = 0

    def set_center(self, center_x: int, center_z: int) -> None:
        self._center_x = center_x
        self._center_z = center_z

    def loop(self, radius: int) -> list[tuple[int, int]]:
        """Return every point within radius of the centre, ordered by x then z."""
        cx, cz = self._center_x, self._center_z
        return [
            (x, z)
            for x in range(cx - radius, cx + radius + 1)
            for z in range(cz - radius, cz + radius + 1)
            if (x - cx) ** 2 + (z - cz) ** 2 <= radius * radius
        ]


class SpiralLoop:
    """A cursor that walks an outward square spiral one step at a time."""

    def __init__(self) -> None:
        self.reset()

    @property
    def x(self) -> int:
        return self._x

    @property
    def z(self) -> int:
        return self._z

    def reset(self) -> None:
        self._x = 0
        self._z = 0
        self._max = 1
        self._side = True

    def advance(self, range_: int) -> None:
        """Take one step; once past range_ the walk starts over at the origin."""
        if self._side:
            if self._x < self._max:
                self._x += 1
            elif self._z < self._max:
                self._z += 1
            if self._z == self._max:
                self._side = False
        else:
            if self._x > -self._max:
                self._x -= 1
            elif self._z > -self._max:
                self._z -= 1
            if self._z == -self._max:
                self._side = True

        if self._max <= range_:
            if self._z == -self._max:
                self._max += 1
        elif self._x >= self._max:
            self.reset()