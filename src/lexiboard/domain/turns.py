"""Turn state machine: committed moves, passes and exchanges.

These three functions are the only mutators of a :class:`GameState`.
``apply_move`` trusts its caller to have validated the placement first;
``pass_turn`` and ``exchange_tiles`` check their own preconditions and
report failures through their result objects.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lexiboard.interfaces import IRandomSource

from .enums import GameOverReason, GameStatus
from .models import (
    ExchangeOutcome,
    GameState,
    MoveOutcome,
    PassOutcome,
    PlacedTile,
    PlayerID,
)
from .rules_config import DEFAULT_RULES, RulesConfig
from .tiles import draw_tiles, rack_contains, remove_from_rack, return_tiles
from .validation import (
    GAME_OVER,
    NO_EXCHANGE_TILES,
    NOT_ENOUGH_IN_BAG,
    NOT_YOUR_TURN,
    TILE_NOT_IN_HAND,
)

logger = logging.getLogger(__name__)


def _advance(state: GameState) -> None:
    state.current_player_index = (state.current_player_index + 1) % len(state.players)


def _finish(state: GameState, reason: GameOverReason) -> None:
    state.status = GameStatus.FINISHED
    state.game_over_reason = reason
    logger.info("game %s finished (%s); scores=%s", state.game_id, reason, state.scores)


def apply_move(
    state: GameState,
    player_id: PlayerID,
    tiles: Sequence[PlacedTile],
    score: int,
) -> MoveOutcome:
    """Commit a validated placement.

    Writes the tiles, refills the rack from the bag, credits ``score`` and
    hands the turn to the next player.  The game finishes when the mover ends
    with an empty rack and the bag is empty.

    Raises:
        ValueError: If the move was not validated (wrong player, finished
            game, missing rack tiles, occupied squares, negative score)
    """
    if state.is_finished:
        raise ValueError(f"Game {state.game_id} is already finished")
    if state.current_player != player_id:
        raise ValueError(f"It is not {player_id}'s turn in game {state.game_id}")
    if score < 0:
        raise ValueError("score must be non-negative")

    squares = {tile.coord for tile in tiles}
    if len(squares) != len(tiles) or any(
        not state.board.in_bounds(r, c) or state.board.is_occupied(r, c) for r, c in squares
    ):
        raise ValueError("Placement is off the board or overlaps existing tiles")

    rack = state.racks[player_id]
    remove_from_rack(rack, (tile.rack_letter for tile in tiles))
    for tile in tiles:
        state.board.place(tile.row, tile.col, tile.letter, is_blank=tile.is_blank)

    new_tiles = draw_tiles(state.bag, len(tiles))
    rack.extend(new_tiles)
    state.scores[player_id] += score
    state.consecutive_passes = 0
    _advance(state)
    logger.debug(
        "game %s: %s placed %d tiles for %d points", state.game_id, player_id, len(tiles), score
    )

    if not rack and not state.bag:
        _finish(state, GameOverReason.TILES_EXHAUSTED)
        return MoveOutcome(
            new_tiles=new_tiles,
            current_player=None,
            game_over=True,
            reason=GameOverReason.TILES_EXHAUSTED,
        )

    return MoveOutcome(new_tiles=new_tiles, current_player=state.current_player)


def pass_turn(state: GameState, player_id: PlayerID) -> PassOutcome:
    """Give up the turn; the game ends once every player passes in a row."""

    if state.is_finished:
        return PassOutcome(valid=False, error=GAME_OVER)
    if state.current_player != player_id:
        return PassOutcome(valid=False, error=NOT_YOUR_TURN)

    state.consecutive_passes += 1
    if state.consecutive_passes >= len(state.players):
        _finish(state, GameOverReason.ALL_PASSED)
        return PassOutcome(valid=True, game_over=True)

    _advance(state)
    return PassOutcome(valid=True, current_player=state.current_player)


def exchange_tiles(
    state: GameState,
    player_id: PlayerID,
    letters: Sequence[str],
    rng: IRandomSource,
    rules: RulesConfig = DEFAULT_RULES,
) -> ExchangeOutcome:
    """Swap rack letters for fresh ones from the bag and end the turn.

    The rack is untouched when the exchange is refused.
    """

    if state.is_finished:
        return ExchangeOutcome(valid=False, error=GAME_OVER)
    if state.current_player != player_id:
        return ExchangeOutcome(valid=False, error=NOT_YOUR_TURN)
    if not letters:
        return ExchangeOutcome(valid=False, error=NO_EXCHANGE_TILES)
    if len(state.bag) < len(letters):
        return ExchangeOutcome(valid=False, error=NOT_ENOUGH_IN_BAG)

    rack = state.racks[player_id]
    if not rack_contains(rack, letters):
        return ExchangeOutcome(valid=False, error=TILE_NOT_IN_HAND)

    remove_from_rack(rack, letters)
    new_tiles = draw_tiles(state.bag, len(letters))
    rack.extend(new_tiles)
    return_tiles(state.bag, letters, rng)

    if rules.turns.exchange_resets_passes:
        state.consecutive_passes = 0
    _advance(state)
    logger.debug("game %s: %s exchanged %d tiles", state.game_id, player_id, len(letters))
    return ExchangeOutcome(valid=True, new_tiles=new_tiles, current_player=state.current_player)


def winners(state: GameState) -> list[PlayerID]:
    """Players holding the highest score, in seating order."""

    if not state.scores:
        return []
    best = max(state.scores.values())
    return [player for player in state.players if state.scores.get(player) == best]
