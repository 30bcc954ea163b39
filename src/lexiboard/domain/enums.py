"""Enumerations used across the lexiboard domain."""

from __future__ import annotations

from enum import StrEnum


class PremiumType(StrEnum):
    """Premium square kinds on the board."""

    TRIPLE_WORD = "TW"
    DOUBLE_WORD = "DW"
    TRIPLE_LETTER = "TL"
    DOUBLE_LETTER = "DL"


class GameStatus(StrEnum):
    """Lifecycle state of a game session."""

    ACTIVE = "active"
    FINISHED = "finished"


class GameOverReason(StrEnum):
    """Why a game reached the finished state."""

    TILES_EXHAUSTED = "tiles_exhausted"
    ALL_PASSED = "all_passed"


class Direction(StrEnum):
    """Orientation of a word on the board."""

    ACROSS = "across"
    DOWN = "down"
