"""Collects the cells a character's ability needs."""

from __future__ import annotations

from .board import Point


class Selection:
    """Holds chosen points until the required number has been pushed."""

    def __init__(self, count: int = 0) -> None:
        self._remaining = count
        self._params: list[Point] = []

    def is_ready(self) -> bool:
        return self._remaining == 0

    def push(self, point: Point) -> None:
        """Record a point; ignored once the selection is ready."""
        if self._remaining != 0:
            self._params.append(point)
            self._remaining -= 1

    def reset(self) -> None:
        """Forget the pushed points, expecting as many again."""
        self._remaining = len(self._params)
        self._params.clear()

    @property
    def parameters(self) -> tuple[Point, ...]:
        return tuple(self._params)