"""
Board encoding and geometry tests:
- bit layout and construction limits
- vision along rows, columns and diagonals
- Gray-code penalty
"""

import pytest

from sixqueens.core.board import Board, EMPTY, BOARD_CELLS


def test_empty_board():
    assert EMPTY.count_queens() == 0
    assert EMPTY.positions() == []
    assert str(EMPTY) == "0" * 36
    assert not EMPTY.is_solution()


@pytest.mark.parametrize("value", [-1, 1 << 36, 1 << 40])
def test_construction_rejects_out_of_range_bits(value):
    with pytest.raises(ValueError):
        Board(value)


def test_largest_board_is_accepted():
    board = Board((1 << 36) - 1)
    assert board.count_queens() == 36


@pytest.mark.parametrize("pos", [-1, 36, 100])
def test_positions_outside_board_are_rejected(pos):
    with pytest.raises(ValueError):
        EMPTY.place_queen(pos)
    with pytest.raises(ValueError):
        EMPTY.has_queen_at(pos)
    with pytest.raises(ValueError):
        EMPTY.has_vision(pos)


def test_place_queen_returns_new_board():
    board = EMPTY.place_queen(7)
    assert board == Board(1 << 7)
    assert board.has_queen_at(7)
    assert not EMPTY.has_queen_at(7)
    assert board.count_queens() == 1


def test_boards_are_hashable_values():
    assert Board(5) == Board.from_positions([0, 2])
    assert len({Board(5), Board.from_positions([2, 0]), Board(4)}) == 2
    assert Board(3) < Board(4)


def test_text_form_round_trip():
    board = Board.from_positions([0, 8, 35])
    text = str(board)
    assert len(text) == 36
    assert text[0] == "1" and text[-1] == "1"
    assert Board.from_string(text) == board


@pytest.mark.parametrize("text", ["", "01" * 17, "2" * 36, "0" * 37])
def test_from_string_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        Board.from_string(text)


def test_bits_are_most_significant_first():
    bits = Board(1).bits()
    assert len(bits) == BOARD_CELLS
    assert bits[-1] is True
    assert not any(bits[:-1])
    assert Board(1 << 35).bits()[0] is True


@pytest.mark.parametrize("second", [6, 1, 7, 2])
def test_second_queen_in_line_with_corner_is_seen(second):
    # 2 is (0,2): same row as the corner
    board = Board.from_positions([0]).place_queen(second)
    assert board.has_vision(second)


@pytest.mark.parametrize("second", [8, 13])
def test_second_queen_off_every_line_is_not_seen(second):
    # (1,2) and (2,1) share no row, column or diagonal with (0,0)
    board = Board.from_positions([0]).place_queen(second)
    assert not board.has_vision(second)


@pytest.mark.parametrize("pos, other", [
    (14, 35),   # (2,2) and (5,5): main diagonal
    (11, 26),   # (1,5) and (4,2): anti-diagonal
    (30, 5),    # (5,0) and (0,5): long anti-diagonal
    (21, 23),   # same row
    (3, 33),    # same column
])
def test_vision_in_all_directions(pos, other):
    board = Board.from_positions([other]).place_queen(pos)
    assert board.has_vision(pos)
    assert board.has_vision(other)


def test_vision_does_not_wrap_around_rows():
    # (0,5) and (1,0) are neighbours in bit order but not on a diagonal
    board = Board.from_positions([5, 6])
    assert not board.has_vision(5)
    assert not board.has_vision(6)


def test_lone_queen_has_no_vision():
    for pos in range(BOARD_CELLS):
        assert not EMPTY.place_queen(pos).has_vision(pos)


@pytest.mark.parametrize("value, expected", [
    (0, 36),
    (0b1, 35),
    (0b11, 35),
    (0b101, 33),
    (1 << 35, 34),
])
def test_penalty(value, expected):
    assert Board(value).penalty() == expected


def test_attacks_is_symmetric_and_irreflexive():
    for a in range(BOARD_CELLS):
        assert not Board.attacks(a, a)
        for b in range(BOARD_CELLS):
            assert Board.attacks(a, b) == Board.attacks(b, a)


def test_known_solution_is_recognised():
    # (0,1) (1,3) (2,5) (3,0) (4,2) (5,4)
    solution = Board.from_positions([1, 9, 17, 18, 26, 34])
    assert solution.is_solution()
    assert not any(solution.has_vision(pos) for pos in solution.positions())
