"""Cursor movement over the boards and which cells it highlights."""

from __future__ import annotations

from .board import Point
from .selection import Selection

_LAST_ROW = 2
_LAST_COLUMN = 3  # column 3 is the character slot beside the board


class Position:
    """A cursor that wraps around a single board."""

    def __init__(self, point: Point | None = None) -> None:
        point = point if point is not None else Point()
        self.x = point.x
        self.y = point.y
        self.board = point.board

    @property
    def point(self) -> Point:
        return Point(self.x, self.y, self.board)

    def move_up(self) -> None:
        self.y -= 1
        if self.y < 0:
            self.y = _LAST_ROW

    def move_down(self) -> None:
        self.y += 1
        if self.y > _LAST_ROW:
            self.y = 0

    def move_left(self) -> None:
        self.x -= 1
        if self.x < 0:
            self.x = _LAST_COLUMN

    def move_right(self) -> None:
        self.x += 1
        if self.x > _LAST_COLUMN:
            self.x = 0

    def player1_selects(self, x: int, y: int) -> bool:
        return not self.board and y == self.y and x == self.x

    def player2_selects(self, x: int, y: int) -> bool:
        return self.board and y == self.y and x == self.x


class BothBoardsPosition(Position):
    """A cursor that moves vertically from one board onto the other."""

    def move_up(self) -> None:
        self.y -= 1
        if self.y < 0:
            self.board = not self.board
            self.y = _LAST_ROW

    def move_down(self) -> None:
        self.y += 1
        if self.y > _LAST_ROW:
            self.board = not self.board
            self.y = 0


class ColumnSingleBoardPosition(Position):
    """A cursor that highlights a whole column of its board."""

    def player1_selects(self, x: int, y: int) -> bool:
        return not self.board and x == self.x

    def player2_selects(self, x: int, y: int) -> bool:
        return self.board and x == self.x


class RetainBothBoardsPosition(BothBoardsPosition):
    """A two-board cursor that keeps already selected cells highlighted."""

    def __init__(self, point: Point | None, selection: Selection) -> None:
        super().__init__(point)
        self.selection = selection

    def player1_selects(self, x: int, y: int) -> bool:
        return super().player1_selects(x, y) or Point(x, y, False) in self.selection.parameters

    def player2_selects(self, x: int, y: int) -> bool:
        return super().player2_selects(x, y) or Point(x, y, True) in self.selection.parameters