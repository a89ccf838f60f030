"""Playable characters and their special abilities."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable

from .board import Board, InvalidPositionError, Point
from .die import Die
from .positions import (
    BothBoardsPosition,
    ColumnSingleBoardPosition,
    Position,
    RetainBothBoardsPosition,
)
from .selection import Selection

_MAX_COOLDOWN = 9
_CHARACTER_SLOT = 3


class CharacterKind(enum.IntEnum):
    """The characters a player may pick, numbered as they are stored."""

    ASH = 0
    FELIX = 1
    COLUMNA = 2
    OLIVER = 3


class NotReadyError(RuntimeError):
    """Raised when an ability is used on cooldown or before its cells are chosen."""


class Character(ABC):
    """A character with a cooldown-limited ability.

    ``color`` and ``selection_color`` are colour names of the form
    ``<text>`` or ``<text>_on_<background>``.
    """

    def __init__(
        self,
        name: str,
        description: str,
        cooldown_time: int,
        selections: int,
        color: str,
        selection_color: str,
        symbol: str,
    ) -> None:
        self.name = name
        self.description = description
        self.cooldown_time = cooldown_time
        self.cooldown = 0
        self.selection = Selection(selections)
        self.color = color
        self.selection_color = selection_color
        self.symbol = symbol

    def push_parameters(self, point: Point) -> None:
        self.selection.push(point)

    def reset_selection(self) -> None:
        self.selection.reset()

    def on_cooldown(self) -> bool:
        return self.cooldown > 0

    def reduce_cooldown(self) -> None:
        if self.cooldown > 0:
            self.cooldown -= 1

    def start_cooldown(self) -> None:
        self.cooldown = self.cooldown_time

    def display_symbol(self) -> str:
        """The character's symbol, or the turns left while on cooldown."""
        return str(self.cooldown) if self.on_cooldown() else self.symbol

    def _chosen(self, count: int) -> tuple[Point, ...]:
        """Return the chosen cells, raising if the ability cannot fire yet."""
        params = self.selection.parameters
        if self.on_cooldown() or not self.selection.is_ready() or len(params) < count:
            raise NotReadyError("not ready")
        return params

    @abstractmethod
    def ability(self) -> None:
        """Use the ability with the chosen cells."""

    @abstractmethod
    def move_type(self, position: Position) -> Position:
        """Return the cursor used while choosing cells for the ability."""


class Ash(Character):
    """Destroys one die on either board, or puts the opponent on cooldown."""

    def __init__(
        self,
        player1_board: Board,
        player2_board: Board,
        opponent: Callable[[], Character],
        player: bool,
    ) -> None:
        super().__init__(
            "Ash",
            "Destroy one die from any board.",
            4,
            1,
            "red_on_black",
            "black_on_light_red",
            "X",
        )
        self.player1_board = player1_board
        self.player2_board = player2_board
        self._opponent = opponent
        self.player = bool(player)

    def ability(self) -> None:
        (target,) = self._chosen(1)[:1]
        if target.x != _CHARACTER_SLOT:
            board = self.player2_board if target.board else self.player1_board
            board.clear_value(target.x, target.y)
        elif Board.in_bounds(0, target.y) and target.board != self.player:
            opponent = self._opponent()
            opponent.start_cooldown()
            self.cooldown_time = min(
                max(opponent.cooldown_time + 1, self.cooldown_time), _MAX_COOLDOWN
            )
        else:
            raise InvalidPositionError("invalid position")
        self.selection.reset()
        self.start_cooldown()

    def move_type(self, position: Position) -> BothBoardsPosition:
        return BothBoardsPosition(position.point)


class Felix(Character):
    """Rerolls the die; every third reroll gives a five or a six."""

    def __init__(self, die: Die) -> None:
        super().__init__(
            "Felix",
            "Rerolls your die",
            2,
            0,
            "green",
            "bright_white_on_green",
            "?",
        )
        self.die = die
        self._count = 0

    def ability(self) -> None:
        if self.on_cooldown():
            raise NotReadyError("not ready")
        self._count += 1
        if self._count == 3:
            self.die.roll_between(5, 6)
            self._count = 0
        else:
            self.die.roll()
        self.start_cooldown()

    def move_type(self, position: Position) -> Position:
        return Position(position.point)


class Columna(Character):
    """Lowers every die in a chosen column of the enemy board by one."""

    def __init__(self, enemy_board: Board) -> None:
        super().__init__(
            "Columna",
            "Lowers all dice values by one in the chosen column",
            4,
            1,
            "yellow",
            "bright_white_on_yellow",
            "|",
        )
        self.enemy_board = enemy_board

    def ability(self) -> None:
        x = self._chosen(1)[0].x
        if not Board.in_bounds(x, 0):
            raise InvalidPositionError("invalid position")
        for y in range(3):
            value = self.enemy_board.get_value(x, y)
            self.enemy_board.clear_value(x, y)
            if value > 1:
                self.enemy_board.set_value(x, y, value - 1)
        self.selection.reset()
        self.start_cooldown()

    def move_type(self, position: Position) -> ColumnSingleBoardPosition:
        moved = ColumnSingleBoardPosition(position.point)
        moved.board = not position.board
        return moved


class Oliver(Character):
    """Swaps two dice, on the same board or across both."""

    def __init__(self, player1_board: Board, player2_board: Board) -> None:
        super().__init__(
            "Oliver",
            "Swap two dice",
            4,
            2,
            "light_purple",
            "bright_white_on_light_purple",
            ":",
        )
        self.player1_board = player1_board
        self.player2_board = player2_board

    def _board(self, board: bool) -> Board:
        return self.player2_board if board else self.player1_board

    def ability(self) -> None:
        first, second = self._chosen(2)[:2]
        board1 = self._board(first.board)
        board2 = self._board(second.board)
        if board1.is_free(first.x, first.y) or board2.is_free(second.x, second.y):
            raise InvalidPositionError("invalid position")
        value1 = board1.get_value(first.x, first.y)
        value2 = board2.get_value(second.x, second.y)
        board1.clear_value(first.x, first.y)
        board1.set_value(first.x, first.y, value2)
        board2.clear_value(second.x, second.y)
        board2.set_value(second.x, second.y, value1)
        self.start_cooldown()
        self.selection.reset()

    def move_type(self, position: Position) -> RetainBothBoardsPosition:
        return RetainBothBoardsPosition(position.point, self.selection)