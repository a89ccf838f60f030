from dicecolumns.board import Point
from dicecolumns.positions import (
    BothBoardsPosition,
    ColumnSingleBoardPosition,
    Position,
    RetainBothBoardsPosition,
)
from dicecolumns.selection import Selection


def test_default_position_is_origin():
    assert Position().point == Point(0, 0, False)


def test_vertical_wrap_single_board():
    p = Position()
    p.move_up()
    assert p.point == Point(0, 2, False)
    p.move_down()
    assert p.point == Point(0, 0, False)


def test_horizontal_wrap_includes_character_column():
    p = Position()
    p.move_left()
    assert p.x == 3
    p.move_right()
    assert p.x == 0
    for _ in range(4):
        p.move_right()
    assert p.x == 0


def test_player_selection_single_cell():
    p = Position(Point(1, 2, False))
    assert p.player1_selects(1, 2)
    assert not p.player1_selects(1, 1)
    assert not p.player2_selects(1, 2)
    q = Position(Point(1, 2, True))
    assert q.player2_selects(1, 2)
    assert not q.player1_selects(1, 2)


def test_both_boards_switches_board():
    p = BothBoardsPosition(Point(1, 0, False))
    p.move_up()
    assert p.point == Point(1, 2, True)
    p.move_down()
    assert p.point == Point(1, 0, False)


def test_both_boards_four_downs_cycle_rows_and_board():
    p = BothBoardsPosition()
    for _ in range(3):
        p.move_down()
    assert p.point == Point(0, 0, True)
    for _ in range(6):
        p.move_down()
    assert p.point == Point(0, 0, True)


def test_column_position_selects_column():
    p = ColumnSingleBoardPosition(Point(2, 0, True))
    assert all(p.player2_selects(2, y) for y in range(3))
    assert not p.player2_selects(1, 0)
    assert not any(p.player1_selects(2, y) for y in range(3))


def test_position_copy_from_point():
    original = Position(Point(2, 1, True))
    copy = BothBoardsPosition(original.point)
    copy.move_left()
    assert original.point == Point(2, 1, True)
    assert copy.point == Point(1, 1, True)


def test_retain_highlights_selected_points():
    selection = Selection(2)
    selection.push(Point(0, 0, False))
    selection.push(Point(2, 2, True))
    p = RetainBothBoardsPosition(Point(1, 1, False), selection)
    assert p.player1_selects(1, 1)
    assert p.player1_selects(0, 0)
    assert p.player2_selects(2, 2)
    assert not p.player2_selects(0, 0)
    assert not p.player1_selects(2, 2)


def test_retain_moves_across_boards():
    p = RetainBothBoardsPosition(Point(0, 2, False), Selection(1))
    p.move_down()
    assert p.point == Point(0, 0, True)