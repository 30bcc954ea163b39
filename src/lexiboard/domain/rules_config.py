"""Declarative rule configuration for the game engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoardRules:
    """Board geometry."""

    size: int = 15
    center_row: int = 7
    center_col: int = 7


@dataclass(frozen=True, slots=True)
class TileRules:
    """Rack and player-count limits."""

    rack_size: int = 7
    min_players: int = 2
    max_players: int = 4


@dataclass(frozen=True, slots=True)
class ScoringRules:
    """Bonus points and cross-word behaviour."""

    bingo_bonus: int = 50
    score_cross_words: bool = True


@dataclass(frozen=True, slots=True)
class TurnRules:
    """Turn-cycle options."""

    exchange_resets_passes: bool = False


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    board: BoardRules = BoardRules()
    tiles: TileRules = TileRules()
    scoring: ScoringRules = ScoringRules()
    turns: TurnRules = TurnRules()


DEFAULT_RULES = RulesConfig()
