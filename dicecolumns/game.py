"""One match between two players, each with a board and a character."""

from __future__ import annotations

from typing import Any

from .board import Board, Point
from .characters import Ash, Character, CharacterKind, Columna, Felix, Oliver
from .die import Die


class Game:
    """State and rules of a single game.

    Players are any objects with ``id`` and ``username`` attributes.
    Player 1 plays on ``board1``; ``turn`` is False on player 1's turn.
    """

    def __init__(
        self,
        player1: Any,
        character1: CharacterKind | int,
        player2: Any,
        character2: CharacterKind | int,
        board1: Board | None = None,
        board2: Board | None = None,
        turn: bool = False,
        game_id: int = 0,
        die: Die | None = None,
    ) -> None:
        self.id = game_id
        self.player1 = player1
        self.player2 = player2
        self.character1_kind = CharacterKind(character1)
        self.character2_kind = CharacterKind(character2)
        self.board1 = board1.copy() if board1 is not None else Board()
        self.board2 = board2.copy() if board2 is not None else Board()
        self.turn = bool(turn)
        self.die = die if die is not None else Die()
        self.character1 = self._make_character(self.character1_kind, second=False)
        self.character2 = self._make_character(self.character2_kind, second=True)
        self.score1 = self.board1.score()
        self.score2 = self.board2.score()
        self.die.roll()

    def _make_character(self, kind: CharacterKind, second: bool) -> Character:
        if kind is CharacterKind.ASH:
            def opponent() -> Character:
                return self.character1 if second else self.character2

            return Ash(self.board1, self.board2, opponent, second)
        if kind is CharacterKind.FELIX:
            return Felix(self.die)
        if kind is CharacterKind.COLUMNA:
            return Columna(self.board1 if second else self.board2)
        return Oliver(self.board1, self.board2)

    def die_value(self) -> int:
        return self.die.value

    def _update_score(self) -> None:
        self.score1 = self.board1.score()
        self.score2 = self.board2.score()

    def _pass_turn(self) -> None:
        self.current_character().reduce_cooldown()
        self.turn = not self.turn
        self.die.roll()

    def place(self, x: int, y: int) -> None:
        """Place the rolled die on the current board and end the turn.

        Dice of the same value in that column of the other board are removed.
        """
        value = self.die.value
        self.current_board().set_value(x, y, value)
        enemy = self.board1 if self.turn else self.board2
        for row in range(3):
            if enemy.get_value(x, row) == value:
                enemy.clear_value(x, row)
        self._update_score()
        self._pass_turn()

    def push_character_parameters(self, point: Point) -> None:
        self.current_character().push_parameters(point)

    def reset_character_parameters(self) -> None:
        self.current_character().reset_selection()

    def current_character(self) -> Character:
        return self.character2 if self.turn else self.character1

    def current_board(self) -> Board:
        return self.board2 if self.turn else self.board1

    def use_ability(self) -> None:
        self.current_character().ability()
        self._update_score()

    def game_ended(self) -> bool:
        return self.board1.is_full() or self.board2.is_full()

    def winner_username(self) -> str:
        """The leading player's username, or "Draw" on equal scores."""
        if self.score1 == self.score2:
            return "Draw"
        winner = self.player1 if self.score1 > self.score2 else self.player2
        return winner.username

    def copy_with_id(self, game_id: int) -> Game:
        """A fresh game with the same players, boards and turn under a new id."""
        return Game(
            self.player1,
            self.character1_kind,
            self.player2,
            self.character2_kind,
            self.board1,
            self.board2,
            self.turn,
            game_id,
        )