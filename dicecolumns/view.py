"""Interactive board screen: cursor movement, placing dice and abilities."""

from __future__ import annotations

import enum
import sys
from typing import Callable, Iterable, Iterator, TextIO

from .board import InvalidPositionError
from .characters import NotReadyError
from .game import Game
from .positions import Position

_LINE = "+---+---+---+"
_GAP = "      "
_CHARACTER_SLOT = 3
_RESET = "\x1b[0m"
_CLEAR = "\x1b[2J\x1b[H"

_FOREGROUND = {
    "black": 30,
    "blue": 34,
    "green": 32,
    "aqua": 36,
    "red": 31,
    "purple": 35,
    "yellow": 33,
    "white": 37,
    "grey": 90,
    "light_blue": 94,
    "light_green": 92,
    "light_aqua": 96,
    "light_red": 91,
    "light_purple": 95,
    "light_yellow": 93,
    "bright_white": 97,
}


def _sgr(color: str) -> str:
    """ANSI sequence for a colour named ``<text>`` or ``<text>_on_<background>``."""
    text, _, background = color.partition("_on_")
    codes = [str(_FOREGROUND[text])]
    if background:
        codes.append(str(_FOREGROUND[background] + 10))
    return f"\x1b[{';'.join(codes)}m"


def _paint(text: str, color: str) -> str:
    return f"{_sgr(color)}{text}{_RESET}"


class Key(enum.Enum):
    """Commands understood by the game screen."""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    SELECT = "select"
    BACK = "back"


_KEY_NAMES = {
    "w": Key.UP,
    "up": Key.UP,
    "\x1b[a": Key.UP,
    "a": Key.LEFT,
    "left": Key.LEFT,
    "\x1b[d": Key.LEFT,
    "s": Key.DOWN,
    "down": Key.DOWN,
    "\x1b[b": Key.DOWN,
    "d": Key.RIGHT,
    "right": Key.RIGHT,
    "\x1b[c": Key.RIGHT,
    "": Key.SELECT,
    "e": Key.SELECT,
    "select": Key.SELECT,
    "q": Key.BACK,
    "back": Key.BACK,
    "save": Key.BACK,
}


def read_key(stream: TextIO) -> Key | None:
    """Read one line and return its key, or None if it names no key.

    Raises EOFError when the stream is exhausted.
    """
    line = stream.readline()
    if not line:
        raise EOFError("no more input")
    return _KEY_NAMES.get(line.strip().lower())


def _key_stream(stream: TextIO) -> Iterator[Key]:
    while True:
        try:
            key = read_key(stream)
        except EOFError:
            return
        if key is not None:
            yield key


def render_player(
    game: Game,
    player: int,
    selects: Callable[[int, int], bool],
    using_ability: bool,
) -> str:
    """Draw one player's board and character; player is 1 or 2."""
    if player == 1:
        board, character = game.board1, game.character1
        name, score = game.player1.username, game.score1
    elif player == 2:
        board, character = game.board2, game.character2
        name, score = game.player2.username, game.score2
    else:
        raise ValueError(f"player must be 1 or 2, got {player!r}")

    highlight = _sgr(game.current_character().selection_color)

    def cell(x: int, y: int) -> str:
        value = board.get_value(x, y)
        text = f" {value if value > 0 else ' '} "
        return "|" + (f"{highlight}{text}{_RESET}" if selects(x, y) else text)

    def row(y: int) -> str:
        return "".join(cell(x, y) for x in range(3)) + "|"

    symbol = "O" if using_ability else character.display_symbol()
    if any(selects(_CHARACTER_SLOT, y) for y in range(3)):
        slot = f"{highlight} {symbol} {_RESET}"
    else:
        slot = f" {_paint(symbol, character.color)} "
    frame = _paint("++---++", character.color)
    side = _paint("||", character.color)

    grid = [
        _LINE,
        row(0),
        f"{_LINE}{_GAP}{frame}",
        f"{row(1)}{_GAP}{side}{slot}{side}",
        f"{_LINE}{_GAP}{frame}",
        row(2),
        _LINE,
    ]
    lines = [name, *grid, str(score)] if player == 1 else [str(score), *grid, name]
    return "\n".join(lines) + "\n"


class GameView:
    """Drives a game from a sequence of keys, writing the screen to ``out``."""

    def __init__(
        self,
        game: Game,
        storage,
        keys: Iterable[Key] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.game = game
        self.storage = storage
        self.out = out if out is not None else sys.stdout
        self._keys = iter(keys) if keys is not None else _key_stream(sys.stdin)
        self.position: Position = Position()
        self.position.board = game.turn
        self._using = [False, False]

    @property
    def using_ability(self) -> bool:
        """Whether the player to move is choosing cells for an ability."""
        return self._using[int(self.game.turn)]

    @using_ability.setter
    def using_ability(self, value: bool) -> None:
        self._using[int(self.game.turn)] = value

    def render(self) -> str:
        """Return the full game screen."""
        game = self.game
        current = game.player2 if game.turn else game.player1
        return (
            render_player(game, 1, self.position.player1_selects, self._using[0])
            + "\n\n"
            + render_player(game, 2, self.position.player2_selects, self._using[1])
            + "\n"
            + f"{current.username}'s turn.\n"
            + f"Rolled a {game.die_value()}\n"
        )

    def _show(self) -> None:
        if self.out.isatty():
            self.out.write(_CLEAR)
        self.out.write(self.render())

    def _select(self) -> None:
        character = self.game.current_character()
        if (
            self.position.x == _CHARACTER_SLOT
            and not character.on_cooldown()
            and not self.using_ability
        ):
            self.position = character.move_type(self.position)
            self.using_ability = True
        elif self.using_ability and not character.selection.is_ready():
            self.game.push_character_parameters(self.position.point)
        else:
            self.game.place(self.position.x, self.position.y)
            self.position.board = self.game.turn

    def _fire_ability(self) -> None:
        try:
            self.game.use_ability()
        except (InvalidPositionError, NotReadyError) as exc:
            self.out.write(f"{exc}\n")
            self.game.reset_character_parameters()
            return
        self.position = Position(self.position.point)
        self.position.board = self.game.turn
        self.using_ability = False

    def handle_key(self, key: Key | None) -> bool:
        """Apply one key; return True when the view should close."""
        if key is Key.LEFT:
            self.position.move_left()
        elif key is Key.UP:
            self.position.move_up()
        elif key is Key.RIGHT:
            self.position.move_right()
        elif key is Key.DOWN:
            self.position.move_down()
        elif key is Key.BACK:
            self.storage.games.save()
            self.out.write("Game has been saved.\n")
            return True
        elif key is Key.SELECT:
            try:
                self._select()
            except (InvalidPositionError, NotReadyError):
                pass
        if self.using_ability and self.game.current_character().selection.is_ready():
            self._fire_ability()
        return False

    def run(self) -> bool:
        """Play until the game ends, BACK is pressed or keys run out.

        Returns True when the game has ended.
        """
        self._show()
        while not self.game.game_ended():
            try:
                key = next(self._keys)
            except StopIteration:
                return False
            if self.handle_key(key):
                return False
            self._show()
        self._show()
        self.out.write(f"{self.game.winner_username()} won the game!\n")
        return True