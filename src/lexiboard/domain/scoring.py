"""Scoring of placements: primary word, cross words, premiums and bingo."""

from __future__ import annotations

from collections.abc import Sequence

from .board import Board, Coord, premium_at
from .enums import Direction, PremiumType
from .models import FormedWord, PlacedTile
from .rules_config import DEFAULT_RULES, RulesConfig
from .tiles import tile_value

_STEP: dict[Direction, Coord] = {
    Direction.ACROSS: (0, 1),
    Direction.DOWN: (1, 0),
}

_LETTER_MULTIPLIER = {
    PremiumType.DOUBLE_LETTER: 2,
    PremiumType.TRIPLE_LETTER: 3,
}

_WORD_MULTIPLIER = {
    PremiumType.DOUBLE_WORD: 2,
    PremiumType.TRIPLE_WORD: 3,
}


def _perpendicular(direction: Direction) -> Direction:
    return Direction.DOWN if direction is Direction.ACROSS else Direction.ACROSS


def placement_direction(tiles: Sequence[PlacedTile]) -> Direction:
    """Line established by a placement; a single tile reads across."""

    if len({tile.row for tile in tiles}) == 1:
        return Direction.ACROSS
    return Direction.DOWN


def _run_through(
    board: Board, placed: dict[Coord, PlacedTile], start: Coord, direction: Direction
) -> list[Coord]:
    """Maximal contiguous run of filled squares through ``start``."""

    d_row, d_col = _STEP[direction]

    def filled(row: int, col: int) -> bool:
        return (row, col) in placed or board.is_occupied(row, col)

    row, col = start
    while filled(row - d_row, col - d_col):
        row, col = row - d_row, col - d_col

    squares: list[Coord] = []
    while filled(row, col):
        squares.append((row, col))
        row, col = row + d_row, col + d_col
    return squares


def _is_new(board: Board, placed: dict[Coord, PlacedTile], coord: Coord) -> bool:
    return coord in placed and not board.is_occupied(*coord)


def _letter_at(board: Board, placed: dict[Coord, PlacedTile], coord: Coord) -> str:
    existing = board.get(*coord)
    if existing is not None:
        return existing
    return placed[coord].letter


def _square_value(board: Board, placed: dict[Coord, PlacedTile], coord: Coord) -> int:
    if _is_new(board, placed, coord):
        tile = placed[coord]
        return 0 if tile.is_blank else tile_value(tile.letter)
    if board.is_blank(*coord):
        return 0
    return tile_value(board.get(*coord) or "")


def _score_word(board: Board, placed: dict[Coord, PlacedTile], squares: list[Coord]) -> int:
    total = 0
    word_multiplier = 1
    for coord in squares:
        value = _square_value(board, placed, coord)
        if _is_new(board, placed, coord):
            premium = premium_at(*coord)
            value *= _LETTER_MULTIPLIER.get(premium, 1)
            word_multiplier *= _WORD_MULTIPLIER.get(premium, 1)
        total += value
    return total * word_multiplier


def _primary_and_cross_runs(
    board: Board, tiles: Sequence[PlacedTile]
) -> tuple[Direction, list[Coord], list[list[Coord]]]:
    placed = {tile.coord: tile for tile in tiles}
    direction = placement_direction(tiles)
    primary = _run_through(board, placed, tiles[0].coord, direction)
    cross_direction = _perpendicular(direction)
    cross_runs = []
    for tile in tiles:
        if not _is_new(board, placed, tile.coord):
            continue
        run = _run_through(board, placed, tile.coord, cross_direction)
        if len(run) > 1:
            cross_runs.append(run)
    return direction, primary, cross_runs


def calculate_score(
    board: Board, tiles: Sequence[PlacedTile], rules: RulesConfig = DEFAULT_RULES
) -> int:
    """Points earned by placing ``tiles`` on ``board``.

    The primary word always counts, even when it is a single letter.
    Premium squares only apply to tiles placed by this move.  Must only be
    called on a placement that passed validation.
    """

    if not tiles:
        return 0

    placed = {tile.coord: tile for tile in tiles}
    _, primary, cross_runs = _primary_and_cross_runs(board, tiles)

    score = _score_word(board, placed, primary)
    if rules.scoring.score_cross_words:
        score += sum(_score_word(board, placed, run) for run in cross_runs)

    if len(tiles) == rules.tiles.rack_size:
        score += rules.scoring.bingo_bonus

    return score


def formed_words(board: Board, tiles: Sequence[PlacedTile]) -> list[FormedWord]:
    """Words of two or more letters that a placement would create or extend.

    The primary word comes first, followed by cross words in tile order.
    """

    if not tiles:
        return []

    placed = {tile.coord: tile for tile in tiles}
    direction, primary, cross_runs = _primary_and_cross_runs(board, tiles)

    runs = [(direction, primary)] if len(primary) > 1 else []
    runs.extend((_perpendicular(direction), run) for run in cross_runs)
    return [
        FormedWord(
            text="".join(_letter_at(board, placed, coord) for coord in squares),
            direction=run_direction,
            squares=tuple(squares),
        )
        for run_direction, squares in runs
    ]
