"""Players and games kept in plain text files, one record after another."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from .board import board_from_tokens
from .characters import CharacterKind
from .game import Game

MAX_USERNAME_LENGTH = 50

T = TypeVar("T")


class StorageError(Exception):
    """Raised for unknown ids, duplicates and unreadable records."""


@dataclass(frozen=True)
class Player:
    """A registered player; id 0 means not yet stored."""

    username: str
    id: int = 0

    def __post_init__(self) -> None:
        if len(self.username) > MAX_USERNAME_LENGTH:
            raise ValueError(
                f"name has to be <= {MAX_USERNAME_LENGTH} characters"
            )


def first(predicate: Callable[[T], bool], items: Iterable[T]) -> T:
    """Return the first item satisfying predicate; LookupError if none does."""
    for item in items:
        if predicate(item):
            return item
    raise LookupError("does not exist")


def last(predicate: Callable[[T], bool], items: Sequence[T]) -> T:
    """Return the last item satisfying predicate; LookupError if none does."""
    return first(predicate, reversed(items))


def _consume(queue: deque[str]) -> Iterator[str]:
    while queue:
        yield queue.popleft()


class FileManager(ABC, Generic[T]):
    """A list of records with integer ids, loaded from and saved to a file.

    With ``auto_increment`` every added element gets the id after the
    largest one seen; otherwise its own id is kept and must be unique.
    """

    def __init__(self, path: str | Path, auto_increment: bool = True) -> None:
        self.path = Path(path)
        self.auto_increment = auto_increment
        self._data: list[T] = []
        self._largest_id: int | None = None
        self.load()

    @abstractmethod
    def serialize(self, element: T) -> str:
        """Return the text of one record, ending in a newline."""

    @abstractmethod
    def deserialize(self, tokens: Iterable[str]) -> T:
        """Build one element from the tokens of its record."""

    @abstractmethod
    def _with_id(self, element: T, element_id: int) -> T:
        """Return an independent copy of element carrying element_id."""

    def load(self) -> None:
        """Replace the held records with those in the file, if it exists."""
        self._data = []
        self._largest_id = None
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        pending = deque(text.split())
        while pending and not pending[0].startswith("0"):
            try:
                self._data.append(self.deserialize(_consume(pending)))
            except (StopIteration, ValueError) as exc:
                raise StorageError(f"malformed record in {self.path}") from exc

    def save(self) -> None:
        """Write every record to the file, replacing its contents."""
        self.path.write_text(
            "".join(self.serialize(element) for element in self._data),
            encoding="utf-8",
        )

    def _index(self, element_id: int) -> int | None:
        return next(
            (i for i, stored in enumerate(self._data) if stored.id == element_id),
            None,
        )

    def _next_id(self) -> int:
        if self._largest_id is None:
            self._largest_id = max((stored.id for stored in self._data), default=0)
        self._largest_id += 1
        return self._largest_id

    def add(self, element: T) -> None:
        if self.auto_increment:
            self._data.append(self._with_id(element, self._next_id()))
        elif self._index(element.id) is None:
            self._data.append(self._with_id(element, element.id))
        else:
            raise StorageError("id already exists")

    def read(self, element_id: int) -> T:
        index = self._index(element_id)
        if index is None:
            raise StorageError("invalid id")
        return self._data[index]

    def read_all(self) -> list[T]:
        return list(self._data)

    def update(self, element: T) -> None:
        index = self._index(element.id)
        if index is None:
            raise StorageError("invalid id")
        self._data[index] = self._with_id(element, element.id)

    def remove(self, element: T) -> None:
        """Remove the record with element's id; the last record takes its place."""
        index = self._index(element.id)
        if index is None:
            raise StorageError("element does not exist")
        self._data[index], self._data[-1] = self._data[-1], self._data[index]
        self._data.pop()


class PlayerManager(FileManager[Player]):
    """Players stored as ``<id> <username>`` lines; usernames are unique."""

    def __init__(self, path: str | Path, auto_increment: bool = True) -> None:
        super().__init__(path, auto_increment)

    def serialize(self, element: Player) -> str:
        return f"{element.id} {element.username}\n"

    def deserialize(self, tokens: Iterable[str]) -> Player:
        tokens = iter(tokens)
        player_id = int(next(tokens))
        username = next(tokens)
        return Player(username, player_id)

    def _with_id(self, element: Player, element_id: int) -> Player:
        return replace(element, id=element_id)

    def add(self, element: Player) -> None:
        if any(stored.username == element.username for stored in self._data):
            raise StorageError("username already exists")
        super().add(element)


class GameManager(FileManager[Game]):
    """Games stored with player ids, characters, both boards and the turn."""

    def __init__(
        self,
        path: str | Path,
        players: PlayerManager,
        auto_increment: bool = True,
    ) -> None:
        self.players = players
        super().__init__(path, auto_increment)

    def serialize(self, element: Game) -> str:
        return (
            f"{element.id} {element.player1.id} {int(element.character1_kind)} "
            f"{element.board1.serialize()} \n"
            f"{element.player2.id} {int(element.character2_kind)} "
            f"{element.board2.serialize()} \n"
            f"{int(element.turn)}\n"
        )

    def deserialize(self, tokens: Iterable[str]) -> Game:
        tokens = iter(tokens)
        game_id = int(next(tokens))
        player1 = self.players.read(int(next(tokens)))
        kind1 = CharacterKind(int(next(tokens)))
        board1 = board_from_tokens(tokens)
        player2 = self.players.read(int(next(tokens)))
        kind2 = CharacterKind(int(next(tokens)))
        board2 = board_from_tokens(tokens)
        turn = bool(int(next(tokens)))
        return Game(player1, kind1, player2, kind2, board1, board2, turn, game_id)

    def _with_id(self, element: Game, element_id: int) -> Game:
        return element.copy_with_id(element_id)


class StorageSystem:
    """The player and game files of one data directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        directory = Path(directory)
        self.players = PlayerManager(directory / "players.txt")
        self.games = GameManager(directory / "games.txt", self.players)