"""Unit tests for move validation."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lexiboard.domain import models as dm
from lexiboard.domain import validation
from lexiboard.domain.enums import GameStatus
from lexiboard.domain.models import PlacedTile


def _state(alice: list[str] | None = None, bob: list[str] | None = None) -> dm.GameState:
    alice_id, bob_id = dm.PlayerID("alice"), dm.PlayerID("bob")
    return dm.GameState(
        game_id=dm.GameID("g1"),
        players=[alice_id, bob_id],
        racks={alice_id: alice or [], bob_id: bob or []},
        scores={alice_id: 0, bob_id: 0},
    )


def _across(word: str, row: int, col: int) -> list[PlacedTile]:
    return [PlacedTile(letter, row, col + i) for i, letter in enumerate(word)]


def _check(state: dm.GameState, player: str, tiles: list[PlacedTile]) -> dm.ValidationResult:
    return validation.validate_move(state, dm.PlayerID(player), tiles)


def test_first_move_covering_center_is_valid():
    state = _state(alice=list("HELLOAB"))
    result = _check(state, "alice", _across("HELLO", 7, 7))
    assert result == dm.ValidationResult(valid=True, error=None)


def test_wrong_player_is_rejected():
    state = _state(alice=list("HELLOAB"), bob=list("HELLOAB"))
    result = _check(state, "bob", _across("HE", 7, 7))
    assert not result.valid
    assert result.error == "Not your turn"


def test_empty_placement_is_rejected():
    result = _check(_state(alice=["A"]), "alice", [])
    assert result.error == "Must place at least one tile"


def test_tiles_outside_the_board_are_rejected():
    state = _state(alice=list("AB"))
    result = _check(state, "alice", [PlacedTile("A", 7, 14), PlacedTile("B", 7, 15)])
    assert result.error == "Tile is off the board"


def test_tiles_not_in_hand_are_rejected():
    state = _state(alice=list("ABCDEFG"))
    result = _check(state, "alice", _across("QWE", 7, 7))
    assert not result.valid
    assert result.error == "Tile not in hand"


def test_duplicate_letters_need_duplicate_rack_tiles():
    state = _state(alice=list("HELOABC"))
    result = _check(state, "alice", _across("HELL", 7, 7))
    assert result.error == "Tile not in hand"


def test_rack_check_runs_before_geometry():
    state = _state(alice=["A"])
    tiles = [PlacedTile("Q", 7, 7), PlacedTile("Z", 8, 8)]
    assert _check(state, "alice", tiles).error == "Tile not in hand"


def test_diagonal_placement_is_rejected():
    state = _state(alice=list("AB"))
    tiles = [PlacedTile("A", 7, 7), PlacedTile("B", 8, 8)]
    assert _check(state, "alice", tiles).error == "Tiles must be in a single row or column"


def test_gap_in_line_is_rejected():
    state = _state(alice=list("AB"))
    tiles = [PlacedTile("A", 7, 7), PlacedTile("B", 7, 9)]
    assert _check(state, "alice", tiles).error == "Tiles must be continuous"


def test_gap_in_column_is_rejected():
    state = _state(alice=list("AB"))
    tiles = [PlacedTile("A", 5, 7), PlacedTile("B", 7, 7)]
    assert _check(state, "alice", tiles).error == "Tiles must be continuous"


def test_gap_filled_by_existing_tile_is_continuous():
    state = _state(alice=list("CT"))
    state.board.place(7, 8, "A")
    tiles = [PlacedTile("C", 7, 7), PlacedTile("T", 7, 9)]
    assert _check(state, "alice", tiles).valid


def test_first_move_must_cover_center():
    state = _state(alice=list("HELLOAB"))
    result = _check(state, "alice", _across("HELLO", 3, 3))
    assert result.error == "First word must cover center square"


def test_later_moves_need_not_touch_existing_tiles():
    state = _state(alice=list("CAT"))
    state.board.place(0, 0, "Z")
    assert _check(state, "alice", _across("CAT", 1, 4)).valid


def test_occupied_square_is_rejected():
    state = _state(alice=list("AB"))
    state.board.place(7, 7, "Q")
    result = _check(state, "alice", [PlacedTile("A", 7, 7)])
    assert result.error == "Square already occupied"


def test_two_tiles_on_one_square_are_rejected():
    state = _state(alice=list("AB"))
    tiles = [PlacedTile("A", 7, 7), PlacedTile("B", 7, 7)]
    assert _check(state, "alice", tiles).error == "Square already occupied"


def test_blank_consumes_wildcard_tile():
    state = _state(alice=["*", "A"])
    assert _check(state, "alice", [PlacedTile("E", 7, 7, is_blank=True)]).valid
    assert _check(state, "alice", [PlacedTile("E", 7, 7)]).error == "Tile not in hand"


def test_finished_game_rejects_moves():
    state = _state(alice=list("HELLO"))
    state.status = GameStatus.FINISHED
    assert _check(state, "alice", _across("HE", 7, 7)).error == "Game is over"


_squares = st.tuples(st.integers(0, 14), st.integers(0, 14))


@given(st.lists(_squares, min_size=2, max_size=7, unique=True))
def test_placements_spanning_rows_and_columns_are_rejected(squares):
    rows = {row for row, _ in squares}
    cols = {col for _, col in squares}
    if len(rows) < 2 or len(cols) < 2:
        return
    state = _state(alice=["A"] * len(squares))
    tiles = [PlacedTile("A", row, col) for row, col in squares]
    assert _check(state, "alice", tiles).error == "Tiles must be in a single row or column"


@given(st.lists(_squares, min_size=1, max_size=7, unique=True))
def test_non_current_player_is_always_rejected(squares):
    state = _state(alice=["A"] * 7, bob=["A"] * 7)
    tiles = [PlacedTile("A", row, col) for row, col in squares]
    assert _check(state, "bob", tiles) == dm.ValidationResult.fail("Not your turn")
