"""Dataclasses describing game state and the results of engine operations.

The rules modules (:mod:`validation`, :mod:`scoring`, :mod:`turns`) operate
on :class:`GameState` directly.  :class:`GameSnapshot` is the flat,
JSON-friendly form handed to persistence adapters and accepted back by
:meth:`lexiboard.domain.registry.GameRegistry.restore_game`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

from .board import Board, Coord
from .enums import Direction, GameOverReason, GameStatus
from .tiles import BLANK

# --- Strongly typed identifiers -------------------------------------------------

GameID = NewType("GameID", str)
PlayerID = NewType("PlayerID", str)


# --- Inputs ---------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PlacedTile:
    """A tile a player proposes to put on the board.

    For a blank, ``letter`` is the letter the blank stands for and
    ``is_blank`` is set; the rack tile consumed is ``*``.
    """

    letter: str
    row: int
    col: int
    is_blank: bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def rack_letter(self) -> str:
        return BLANK if self.is_blank else self.letter


# --- Core state -----------------------------------------------------------------


@dataclass(slots=True)
class GameState:
    """Aggregate state of one game."""

    game_id: GameID
    players: list[PlayerID]
    board: Board = field(default_factory=Board)
    bag: list[str] = field(default_factory=list)
    racks: dict[PlayerID, list[str]] = field(default_factory=dict)
    scores: dict[PlayerID, int] = field(default_factory=dict)
    current_player_index: int = 0
    consecutive_passes: int = 0
    status: GameStatus = GameStatus.ACTIVE
    game_over_reason: GameOverReason | None = None

    @property
    def current_player(self) -> PlayerID | None:
        if self.status == GameStatus.FINISHED or not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def is_finished(self) -> bool:
        return self.status == GameStatus.FINISHED

    def tile_count(self) -> int:
        """Tiles accounted for across racks, bag and board."""

        return (
            sum(len(rack) for rack in self.racks.values())
            + len(self.bag)
            + self.board.occupied_count()
        )


@dataclass(slots=True)
class GameSnapshot:
    """Persistable image of a game; authoritative on restore."""

    game_id: str
    players: list[str]
    board: list[list[str | None]]
    bag: list[str]
    racks: dict[str, list[str]]
    scores: dict[str, int]
    current_player_id: str | None
    consecutive_passes: int = 0
    status: GameStatus = GameStatus.ACTIVE
    game_over_reason: GameOverReason | None = None
    blanks: list[tuple[int, int]] = field(default_factory=list)


# --- Results --------------------------------------------------------------------


@dataclass(slots=True)
class ValidationResult:
    """Outcome of :func:`lexiboard.domain.validation.validate_move`."""

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)


@dataclass(slots=True)
class MoveOutcome:
    """Return type for a committed move."""

    new_tiles: list[str]
    current_player: PlayerID | None
    game_over: bool = False
    reason: GameOverReason | None = None


@dataclass(slots=True)
class PassOutcome:
    """Return type for a pass."""

    valid: bool
    error: str | None = None
    game_over: bool = False
    current_player: PlayerID | None = None


@dataclass(slots=True)
class ExchangeOutcome:
    """Return type for a tile exchange."""

    valid: bool
    error: str | None = None
    new_tiles: list[str] = field(default_factory=list)
    current_player: PlayerID | None = None


@dataclass(slots=True)
class GameStateView:
    """Public, read-only picture of a game for broadcasting."""

    board: list[list[str | None]]
    current_player: PlayerID | None
    scores: dict[PlayerID, int]
    tiles_remaining: int
    status: GameStatus


@dataclass(frozen=True, slots=True)
class FormedWord:
    """A word created or extended by a move."""

    text: str
    direction: Direction
    squares: tuple[Coord, ...]
