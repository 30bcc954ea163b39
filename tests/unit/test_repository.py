"""Tests for the JSON snapshot repository."""

from __future__ import annotations

import pytest

from lexiboard.domain.enums import GameStatus
from lexiboard.domain.models import PlacedTile
from lexiboard.domain.session import GameSession
from lexiboard.repository import JsonGameRepository
from lexiboard.utils.rng import SeededRandom


def _session(game_id: str = "g1") -> GameSession:
    session = GameSession.new(game_id, ["alice", "bob"], rng=SeededRandom(game_id))
    rack = session.state.racks["alice"]
    letter = rack[0]
    tile = (
        PlacedTile("E", 7, 7, is_blank=True) if letter == "*" else PlacedTile(letter, 7, 7)
    )
    session.apply_move("alice", [tile], session.calculate_score([tile]))
    return session


def test_save_and_load_round_trip(tmp_path):
    repo = JsonGameRepository(tmp_path)
    session = _session()
    snapshot = session.snapshot()

    path = repo.save(snapshot)
    loaded = repo.load("g1")

    assert path == tmp_path / "game_g1.json"
    assert loaded == snapshot
    assert loaded.status is GameStatus.ACTIVE
    assert GameSession.from_snapshot(loaded).state == session.state


def test_blank_squares_survive_json(tmp_path):
    repo = JsonGameRepository(tmp_path)
    session = GameSession.new("blank", ["alice", "bob"], rng=SeededRandom("b"))
    session.state.board.place(7, 7, "Q", is_blank=True)

    repo.save(session.snapshot())

    assert repo.load("blank").blanks == [(7, 7)]


def test_load_missing_game_raises(tmp_path):
    repo = JsonGameRepository(tmp_path)
    with pytest.raises(FileNotFoundError):
        repo.load("nope")


def test_list_exists_and_delete(tmp_path):
    repo = JsonGameRepository(tmp_path)
    repo.save(_session("b").snapshot())
    repo.save(_session("a").snapshot())

    assert repo.list_games() == ["a", "b"]
    assert repo.exists("a")

    repo.delete("a")
    repo.delete("a")

    assert not repo.exists("a")
    assert repo.list_games() == ["b"]


def test_save_overwrites_previous_snapshot(tmp_path):
    repo = JsonGameRepository(tmp_path)
    session = _session()
    repo.save(session.snapshot())
    session.pass_turn("bob")
    repo.save(session.snapshot())

    assert repo.load("g1").consecutive_passes == 1
    assert list(tmp_path.iterdir()) == [tmp_path / "game_g1.json"]


@pytest.mark.parametrize("game_id", ["../evil", "a/b", "", ".."])
def test_unsafe_ids_are_rejected(tmp_path, game_id):
    repo = JsonGameRepository(tmp_path)
    with pytest.raises(ValueError, match="Unsafe game id"):
        repo.load(game_id)
