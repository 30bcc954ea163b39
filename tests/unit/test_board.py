"""Unit tests for the board grid and premium layout."""

from __future__ import annotations

import pytest

from lexiboard.domain.board import (
    BOARD_SIZE,
    PREMIUM_MAP,
    PREMIUM_SQUARES,
    Board,
    premium_at,
)
from lexiboard.domain.enums import PremiumType


def test_new_board_is_empty():
    board = Board()
    assert board.size == BOARD_SIZE
    assert board.is_empty()
    assert board.occupied_count() == 0


def test_place_marks_board_non_empty():
    board = Board()
    board.place(7, 7, "A")

    assert not board.is_empty()
    assert board.get(7, 7) == "A"
    assert board.is_occupied(7, 7)
    assert board.occupied_count() == 1


def test_place_rejects_occupied_and_off_board_squares():
    board = Board()
    board.place(3, 4, "Q")

    with pytest.raises(ValueError, match="already occupied"):
        board.place(3, 4, "U")
    with pytest.raises(ValueError, match="off the board"):
        board.place(15, 0, "U")
    assert board.get(3, 4) == "Q"


def test_get_outside_board_returns_none():
    board = Board()
    assert board.get(-1, 0) is None
    assert board.get(0, 15) is None
    assert not board.in_bounds(-1, 3)


@pytest.mark.parametrize(
    ("row", "col", "expected"),
    [
        (0, 0, PremiumType.TRIPLE_WORD),
        (7, 14, PremiumType.TRIPLE_WORD),
        (4, 4, PremiumType.DOUBLE_WORD),
        (12, 2, PremiumType.DOUBLE_WORD),
        (1, 5, PremiumType.TRIPLE_LETTER),
        (9, 13, PremiumType.TRIPLE_LETTER),
        (0, 3, PremiumType.DOUBLE_LETTER),
        (7, 11, PremiumType.DOUBLE_LETTER),
        (7, 7, None),
        (7, 8, None),
    ],
)
def test_premium_lookup(row, col, expected):
    assert premium_at(row, col) == expected
    assert Board().get_premium_type(row, col) == expected


def test_premium_layout_counts_and_uniqueness():
    counts = {kind: len(coords) for kind, coords in PREMIUM_SQUARES.items()}
    assert counts == {
        PremiumType.TRIPLE_WORD: 8,
        PremiumType.DOUBLE_WORD: 16,
        PremiumType.TRIPLE_LETTER: 12,
        PremiumType.DOUBLE_LETTER: 24,
    }
    # No square carries two premium kinds.
    assert len(PREMIUM_MAP) == sum(counts.values())


def test_premium_layout_is_symmetric():
    for (row, col), kind in PREMIUM_MAP.items():
        assert PREMIUM_MAP[(col, row)] == kind
        assert PREMIUM_MAP[(14 - row, col)] == kind


def test_premium_map_is_read_only():
    with pytest.raises(TypeError):
        PREMIUM_MAP[(7, 7)] = PremiumType.DOUBLE_WORD  # type: ignore[index]


def test_from_rows_restores_letters_and_blanks():
    board = Board()
    board.place(7, 7, "C")
    board.place(7, 8, "A", is_blank=True)

    rebuilt = Board.from_rows(board.to_rows(), blanks=[(7, 8)])

    assert rebuilt == board
    assert rebuilt.is_blank(7, 8)
    assert not rebuilt.is_blank(7, 7)


def test_to_rows_returns_detached_copy():
    board = Board()
    rows = board.to_rows()
    rows[0][0] = "Z"
    assert board.is_empty()


def test_from_rows_rejects_bad_shapes():
    with pytest.raises(ValueError, match="15x15"):
        Board.from_rows([[None] * 15 for _ in range(14)])

    rows = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    with pytest.raises(ValueError, match="Blank recorded on empty square"):
        Board.from_rows(rows, blanks=[(0, 0)])
