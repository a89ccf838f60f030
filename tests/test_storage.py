import pytest

from dicecolumns.board import Board, InvalidPositionError
from dicecolumns.characters import CharacterKind
from dicecolumns.die import Die
from dicecolumns.game import Game
from dicecolumns.pcg import Pcg32
from dicecolumns.storage import (
    GameManager,
    Player,
    PlayerManager,
    StorageError,
    StorageSystem,
    first,
    last,
)


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "test.txt"
    path.write_text("")
    return path


def test_player_manager(empty_file):
    manager = PlayerManager(empty_file, True)
    assert manager.read_all() == []
    manager.add(Player("a"))
    assert len(manager.read_all()) == 1
    assert manager.read(1).id == 1
    assert manager.read(1).username == "a"
    manager.save()
    a = manager.read(1)
    assert a.id == 1
    assert a.username == "a"
    manager.add(Player("aaa"))
    assert manager.read(2).username == "aaa"
    manager.save()

    with pytest.raises(StorageError):
        manager.add(a)
    with pytest.raises(StorageError):
        manager.read(-1)
    manager.remove(a)
    with pytest.raises(StorageError):
        manager.read(a.id)


def test_auto_increment(tmp_path):
    manager = PlayerManager(tmp_path / "player.txt", True)
    manager.add(Player("player1"))
    assert manager.read_all()[0].id == 1
    manager.add(Player("player2"))
    assert manager.read_all()[1].id == 2
    assert manager.read(2).username == "player2"


def test_player_record_format(empty_file):
    manager = PlayerManager(empty_file)
    assert manager.serialize(Player("a", 1)) == "1 a\n"
    assert manager.deserialize(["7", "bob"]) == Player("bob", 7)


def test_players_round_trip_through_file(empty_file):
    manager = PlayerManager(empty_file)
    manager.add(Player("alice"))
    manager.add(Player("bob"))
    manager.save()
    reloaded = PlayerManager(empty_file)
    assert reloaded.read_all() == manager.read_all()


def test_auto_increment_continues_after_loaded_ids(empty_file):
    empty_file.write_text("3 x\n7 y\n")
    manager = PlayerManager(empty_file)
    manager.add(Player("z"))
    assert manager.read_all()[-1] == Player("z", 8)


def test_missing_file_gives_empty_manager(tmp_path):
    manager = PlayerManager(tmp_path / "absent.txt")
    assert manager.read_all() == []


def test_file_starting_with_zero_holds_no_records(empty_file):
    empty_file.write_text("0\n")
    assert PlayerManager(empty_file).read_all() == []


def test_truncated_record_raises(empty_file):
    empty_file.write_text("1\n")
    with pytest.raises(StorageError):
        PlayerManager(empty_file)


def test_explicit_ids_must_be_unique(empty_file):
    manager = PlayerManager(empty_file, False)
    manager.add(Player("a", 5))
    assert manager.read(5).username == "a"
    with pytest.raises(StorageError):
        manager.add(Player("b", 5))


def test_update_replaces_record(empty_file):
    manager = PlayerManager(empty_file, False)
    manager.add(Player("a", 5))
    manager.update(Player("b", 5))
    assert manager.read(5).username == "b"
    with pytest.raises(StorageError):
        manager.update(Player("c", 6))


def test_remove_moves_last_into_gap(empty_file):
    manager = PlayerManager(empty_file)
    for name in ("a", "b", "c"):
        manager.add(Player(name))
    manager.remove(manager.read(1))
    assert [p.username for p in manager.read_all()] == ["c", "b"]
    with pytest.raises(StorageError):
        manager.remove(Player("a", 1))


def test_username_length_limit():
    assert Player("x" * 50).username == "x" * 50
    with pytest.raises(ValueError):
        Player("x" * 51)


def test_first_and_last():
    items = [1, 2, 3, 4]
    assert first(lambda n: n % 2 == 0, items) == 2
    assert last(lambda n: n % 2 == 0, items) == 4
    with pytest.raises(LookupError):
        first(lambda n: n > 10, items)
    with pytest.raises(LookupError):
        last(lambda n: n > 10, items)


def _players(tmp_path):
    players = PlayerManager(tmp_path / "players.txt", True)
    players.add(Player("player1"))
    players.add(Player("player2"))
    return players


def test_game_manager(tmp_path):
    players = _players(tmp_path)
    p1 = players.read(1)
    p2 = players.read(2)
    game = Game(p1, CharacterKind.ASH, p2, CharacterKind.ASH, die=Die(Pcg32(42, 54)))
    assert 1 <= game.die_value() <= 6

    game.place(0, 0)
    assert 1 <= game.score1 <= 6
    game.place(1, 0)
    assert 1 <= game.score2 <= 6
    with pytest.raises(InvalidPositionError):
        game.place(0, 0)

    games_path = tmp_path / "games.txt"
    manager = GameManager(games_path, players, True)
    assert manager.read_all() == []
    players.save()
    manager.add(game)
    manager.save()

    reloaded = GameManager(games_path, players, True)
    assert len(reloaded.read_all()) == 1
    game2 = reloaded.read(1)
    assert game2.score1 == game.score1
    assert game2.score2 == game.score2
    assert game2.board1 == game.board1
    assert game2.board2 == game.board2
    assert game2.turn == game.turn
    assert game2.player1.username == "player1"


def test_game_record_keeps_characters(tmp_path):
    players = _players(tmp_path)
    board = Board([[1, 2, 3], [0, 0, 0], [4, 5, 6]])
    game = Game(
        players.read(1), CharacterKind.FELIX, players.read(2), CharacterKind.OLIVER,
        board, Board(), True, 9,
    )
    manager = GameManager(tmp_path / "games.txt", players, False)
    text = manager.serialize(game)
    restored = manager.deserialize(text.split())
    assert restored.id == 9
    assert restored.character1_kind is CharacterKind.FELIX
    assert restored.character2_kind is CharacterKind.OLIVER
    assert restored.board1 == board
    assert restored.turn is True


def test_game_with_unknown_player_raises(tmp_path):
    players = _players(tmp_path)
    (tmp_path / "games.txt").write_text("1 5 0 0 0 0 0 0 0 0 0 0 \n2 0 0 0 0 0 0 0 0 0 0 \n0\n")
    with pytest.raises(StorageError):
        GameManager(tmp_path / "games.txt", players)


def test_storage_system_uses_directory(tmp_path):
    storage = StorageSystem(tmp_path)
    storage.players.add(Player("alice"))
    storage.players.save()
    assert (tmp_path / "players.txt").read_text() == "1 alice\n"
    again = StorageSystem(tmp_path)
    assert again.players.read(1).username == "alice"
    assert again.games.read_all() == []