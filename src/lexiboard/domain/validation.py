"""Move validation: turn ownership, rack contents and placement geometry."""

from __future__ import annotations

from collections.abc import Sequence

from .models import GameState, PlacedTile, PlayerID, ValidationResult
from .rules_config import DEFAULT_RULES, RulesConfig
from .tiles import rack_contains

# User-facing error messages, shared with the turn state machine.
GAME_OVER = "Game is over"
NOT_YOUR_TURN = "Not your turn"
NO_TILES = "Must place at least one tile"
NO_EXCHANGE_TILES = "Must exchange at least one tile"
OFF_BOARD = "Tile is off the board"
TILE_NOT_IN_HAND = "Tile not in hand"
NOT_IN_LINE = "Tiles must be in a single row or column"
NOT_CONTINUOUS = "Tiles must be continuous"
CENTER_NOT_COVERED = "First word must cover center square"
SQUARE_OCCUPIED = "Square already occupied"
NOT_ENOUGH_IN_BAG = "Not enough tiles in bag"


def validate_move(
    state: GameState,
    player_id: PlayerID,
    tiles: Sequence[PlacedTile],
    rules: RulesConfig = DEFAULT_RULES,
) -> ValidationResult:
    """Check a proposed placement and report the first rule it breaks.

    Dictionary legality and adjacency to earlier words are not checked here.
    Rule violations are reported through the result, never raised.
    """

    if state.is_finished:
        return ValidationResult.fail(GAME_OVER)

    if state.current_player != player_id:
        return ValidationResult.fail(NOT_YOUR_TURN)

    if not tiles:
        return ValidationResult.fail(NO_TILES)

    board = state.board
    if any(not board.in_bounds(tile.row, tile.col) for tile in tiles):
        return ValidationResult.fail(OFF_BOARD)

    rack = state.racks.get(player_id, [])
    if not rack_contains(rack, (tile.rack_letter for tile in tiles)):
        return ValidationResult.fail(TILE_NOT_IN_HAND)

    rows = {tile.row for tile in tiles}
    cols = {tile.col for tile in tiles}
    if len(rows) > 1 and len(cols) > 1:
        return ValidationResult.fail(NOT_IN_LINE)

    placed = {tile.coord for tile in tiles}
    if len(rows) == 1:
        (row,) = rows
        span = [(row, col) for col in range(min(cols), max(cols) + 1)]
    else:
        (col,) = cols
        span = [(row, col) for row in range(min(rows), max(rows) + 1)]
    if any(not board.is_occupied(r, c) and (r, c) not in placed for r, c in span):
        return ValidationResult.fail(NOT_CONTINUOUS)

    center = (rules.board.center_row, rules.board.center_col)
    if board.is_empty() and center not in placed:
        return ValidationResult.fail(CENTER_NOT_COVERED)

    if len(placed) != len(tiles) or any(board.is_occupied(r, c) for r, c in placed):
        return ValidationResult.fail(SQUARE_OCCUPIED)

    return ValidationResult.ok()
