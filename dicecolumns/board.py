"""The 3x3 board of dice and its scoring."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Sequence

SIZE = 3


@dataclass(frozen=True)
class Point:
    """A cell on one of the two boards (board False is player 1)."""

    x: int = 0
    y: int = 0
    board: bool = False


class InvalidPositionError(ValueError):
    """Raised when a cell or value is not allowed."""


def column_score(column: Sequence[int]) -> int:
    """Score one column: matching dice are multiplied by their count."""
    a, b, c = column
    count = 1
    number = 0
    if a == b or a == c:
        count += 1
        number = a
    if b == c:
        count += 1
        number = b
    return sum(number * count if value == number else value for value in column)


class Board:
    """A 3x3 grid of die values, 0 meaning empty; indexed as (x, y)."""

    def __init__(self, cells: Iterable[Iterable[int]] | None = None) -> None:
        if cells is None:
            self._cells = [[0] * SIZE for _ in range(SIZE)]
        else:
            self._cells = [list(row) for row in cells]
            if len(self._cells) != SIZE or any(len(row) != SIZE for row in self._cells):
                raise ValueError("board must be 3x3")

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < SIZE and 0 <= y < SIZE

    def is_free(self, x: int, y: int) -> bool:
        return self.get_value(x, y) == 0

    def is_valid(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.is_free(x, y)

    def is_full(self) -> bool:
        return all(value != 0 for row in self._cells for value in row)

    def score(self) -> int:
        return sum(column_score(column) for column in zip(*self._cells))

    def set_value(self, x: int, y: int, value: int) -> None:
        if not (1 <= value <= 6 and self.is_valid(x, y)):
            raise InvalidPositionError("invalid position")
        self._cells[y][x] = value

    def clear_value(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise InvalidPositionError("invalid position")
        self._cells[y][x] = 0

    def get_value(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise InvalidPositionError("invalid position")
        return self._cells[y][x]

    def serialize(self) -> str:
        """Return the nine values row by row, separated by spaces."""
        return " ".join(str(value) for row in self._cells for value in row)

    def copy(self) -> Board:
        return Board(self._cells)

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"


def board_from_tokens(tokens: Iterable[str | int]) -> Board:
    """Build a board from the next nine tokens, as written by serialize."""
    values = [int(token) for token in islice(iter(tokens), SIZE * SIZE)]
    if len(values) != SIZE * SIZE:
        raise ValueError("a board needs nine values")
    return Board(values[row * SIZE:(row + 1) * SIZE] for row in range(SIZE))