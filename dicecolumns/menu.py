"""Text menus: choosing players and characters, history and saved games."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterator, TextIO

from .characters import CharacterKind
from .game import Game
from .storage import MAX_USERNAME_LENGTH, Player, StorageSystem, first, last
from .view import GameView, Key, read_key, render_player

_RESET = "\x1b[0m"
_CLEAR = "\x1b[2J\x1b[H"
_CONCLUSION_COLORS = {
    "Draw": "\x1b[97;100m",
    "Victory": "\x1b[97;102m",
    "Defeat": "\x1b[97;41m",
}
_SEPARATOR = "----------------------------------------------"
_PAGE_SIZE = 2


def render_summary(game: Game, player: Player, with_conclusion: bool) -> str:
    """Both boards of a game, optionally headed by the result for player."""
    highlighted: frozenset[tuple[int, int]] = frozenset()

    def selects(x: int, y: int) -> bool:
        return (x, y) in highlighted

    parts = []
    if with_conclusion:
        winner = game.winner_username()
        if winner == "Draw":
            outcome = "Draw"
        elif winner == player.username:
            outcome = "Victory"
        else:
            outcome = "Defeat"
        parts.append(f"{_CONCLUSION_COLORS[outcome]}{outcome}{_RESET}\n")
    parts.append(render_player(game, 1, selects, False))
    parts.append("\n\n")
    parts.append(render_player(game, 2, selects, False))
    parts.append("\n")
    return "".join(parts)


class MainMenu:
    """The menus shown between games, reading answers from ``stdin``."""

    def __init__(
        self,
        storage: StorageSystem,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.storage = storage
        self.stdin = stdin if stdin is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self._pending: deque[str] = deque()

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _clear(self) -> None:
        if self.out.isatty():
            self.out.write(_CLEAR)

    def _token(self) -> str:
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _choice(self, allowed: str) -> str:
        answer = self._token()
        while answer not in allowed or len(answer) != 1:
            self._write("invalid input\n")
            self._pending.clear()
            answer = self._token()
        return answer

    def _pause(self) -> None:
        self._pending.clear()
        self._write("Press Enter to continue . . .\n")
        self.stdin.readline()

    def _keys(self) -> Iterator[Key]:
        while True:
            try:
                key = read_key(self.stdin)
            except EOFError:
                return
            if key is not None:
                yield key

    def input_username(self) -> str:
        username = self._token()
        while len(username) > MAX_USERNAME_LENGTH:
            self._write(
                f"Username has to be <= {MAX_USERNAME_LENGTH} characters long\n"
            )
            username = self._token()
        self._write("\n")
        return username

    def read_player(self, username: str) -> Player:
        """Return the stored player with username, registering it if new."""
        def matches(player: Player) -> bool:
            return player.username == username

        try:
            return first(matches, self.storage.players.read_all())
        except LookupError:
            self.storage.players.add(Player(username))
            self.storage.players.save()
            return first(matches, self.storage.players.read_all())

    def choose_players(self) -> tuple[Player, Player]:
        self._write("Enter username for Player1: ")
        player1 = self.read_player(self.input_username())
        self._write("Enter username for Player2: ")
        player2 = self.read_player(self.input_username())
        return player1, player2

    def _start_game(self, game: Game) -> None:
        self._write(
            "While in game use w/a/s/d to move across the boards and Enter to select.\n"
            "Type q to save the game and continue it later.\n"
        )
        self._pause()
        GameView(game, self.storage, self._keys(), self.out).run()
        self.storage.games.save()
        self._pause()

    def character_select(self) -> CharacterKind:
        self._clear()
        self._write(
            "Pick your character: \n1. Ash\n2. Felix\n3. Columna\n4. Oliver\n"
        )
        return CharacterKind(int(self._choice("1234")) - 1)

    def match_history(self, player: Player) -> None:
        """Page through the finished games player took part in, newest first."""
        self._clear()
        games = sorted(
            (
                game
                for game in self.storage.games.read_all()
                if player.username in (game.player1.username, game.player2.username)
                and game.game_ended()
            ),
            key=lambda game: game.id,
        )
        if not games:
            self._write("You havent played any games yet.\n")
            return
        counter, shown = 0, None
        answer = ""
        while answer != "0":
            if counter != shown:
                shown = counter
                self._clear()
                start = _PAGE_SIZE * counter
                for i in range(start, min(start + _PAGE_SIZE, len(games))):
                    self._write(f"{len(games) - i}{_SEPARATOR}\n")
                    self._write(render_summary(games[len(games) - i - 1], player, True))
                    self._write("\n")
                self._write("Input 'n' for next page, 'p' for previous and 0 to exit\n")
            answer = self._token()
            self._pending.clear()
            if answer == "n" and counter + 2 <= len(games) // _PAGE_SIZE:
                counter += 1
            elif answer == "p" and counter > 0:
                counter -= 1

    def player_details(self, player: Player, kind: CharacterKind) -> CharacterKind:
        """Show a player's submenu; return the character chosen there."""
        answer = ""
        while answer != "0":
            self._clear()
            self._write("1. Select Character\n2. Match History\n0. Back\n")
            answer = self._choice("012")
            if answer == "1":
                kind = self.character_select()
            elif answer == "2":
                self.match_history(player)
        return kind

    def new_game(
        self,
        player1: Player,
        kind1: CharacterKind,
        player2: Player,
        kind2: CharacterKind,
    ) -> None:
        self.storage.games.add(Game(player1, kind1, player2, kind2))
        game = last(
            lambda g: g.player1.username == player1.username
            and g.player2.username == player2.username,
            self.storage.games.read_all(),
        )
        self._start_game(game)

    def load_game(self, player1: Player, player2: Player) -> None:
        names = {(player1.username, player2.username), (player2.username, player1.username)}
        saved = sorted(
            (
                game
                for game in self.storage.games.read_all()
                if (game.player1.username, game.player2.username) in names
                and not game.game_ended()
            ),
            key=lambda game: game.id,
        )
        if not saved:
            self._write("You dont have saved games.\n")
        else:
            for number in range(len(saved), 0, -1):
                self._write(f"{number}{_SEPARATOR}\n")
                self._write(render_summary(saved[number - 1], player1, False))
                self._write("\n")
        self._write("Choose game to load(0 to exit): \n")
        try:
            choice = int(self._token())
        except ValueError:
            self._write("invalid input\n")
            return
        if choice == 0:
            return
        if not 1 <= choice <= len(saved):
            self._write("invalid input\n")
            return
        self._start_game(saved[choice - 1])

    def run(
        self,
        player1: Player,
        kind1: CharacterKind,
        player2: Player,
        kind2: CharacterKind,
    ) -> None:
        """Show the main menu until the user chooses to exit."""
        answer = ""
        while answer != "0":
            self._clear()
            self._write(
                "1. Start Game\n2. Load Game\n"
                f"3. {player1.username} Details\n"
                f"4. {player2.username} Details\n"
                "0. Exit\n"
            )
            answer = self._choice("01234")
            if answer == "1":
                self.new_game(player1, kind1, player2, kind2)
            elif answer == "2":
                self.load_game(player1, player2)
            elif answer == "3":
                kind1 = self.player_details(player1, kind1)
            elif answer == "4":
                kind2 = self.player_details(player2, kind2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dicecolumns", description="A two-player dice placement game."
    )
    parser.add_argument(
        "--data-dir", default=".", help="directory holding players.txt and games.txt"
    )
    args = parser.parse_args(argv)
    storage = StorageSystem(args.data_dir)
    menu = MainMenu(storage)
    try:
        player1, player2 = menu.choose_players()
        menu.run(player1, CharacterKind.ASH, player2, CharacterKind.ASH)
    except (EOFError, KeyboardInterrupt):
        pass
    storage.games.save()
    return 0


if __name__ == "__main__":
    sys.exit(main())