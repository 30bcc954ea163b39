"""Asynchronous game service sitting between a transport layer and the engine.

The service chains validate -> score -> commit under a per-game lock, then
persists a snapshot of the advanced state.  Persistence is best effort: a
failed write is logged and the in-memory game carries on unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from lexiboard.domain.enums import GameOverReason
from lexiboard.domain.models import (
    ExchangeOutcome,
    GameSnapshot,
    PassOutcome,
    PlacedTile,
    PlayerID,
)
from lexiboard.domain.registry import GameRegistry
from lexiboard.domain.session import GameSession
from lexiboard.interfaces import IWordList
from lexiboard.repository import JsonGameRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class GameNotFoundError(KeyError):
    """Raised when a game is neither live nor persisted."""


@dataclass(slots=True)
class MoveReport:
    """Result of a move request, ready to broadcast."""

    valid: bool
    error: str | None = None
    score: int = 0
    words: list[str] = field(default_factory=list)
    new_tiles: list[str] = field(default_factory=list)
    current_player: PlayerID | None = None
    game_over: bool = False
    reason: GameOverReason | None = None
    winners: list[PlayerID] = field(default_factory=list)


class GameService:
    """Coordinates registry, engine and snapshot repository for live games."""

    def __init__(
        self,
        registry: GameRegistry,
        repository: JsonGameRepository,
        *,
        word_list: IWordList | None = None,
        turn_time_limit_seconds: float = 60.0,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._registry = registry
        self._repository = repository
        self._word_list = word_list
        self._turn_limit = timedelta(seconds=turn_time_limit_seconds)
        self._clock = clock
        self._deadlines: dict[str, datetime] = {}

    # -- lifecycle ------------------------------------------------------------

    async def start_game(self, game_id: str, players: Sequence[str]) -> GameSession:
        """Create a fresh game and persist its opening state."""

        async with self._registry.lock(game_id):
            try:
                session = self._registry.create_game(game_id, players)
            except ValueError:
                self._registry.release_lock(game_id)
                raise
            self._reset_deadline(game_id)
            await self._persist(session)
        return session

    async def join_game(self, game_id: str, players: Sequence[str] | None = None) -> GameSession:
        """Return the live game, restoring it from its last snapshot if needed.

        Raises:
            GameNotFoundError: If the game is neither live nor persisted
        """

        async with self._registry.lock(game_id):
            session = self._registry.get_game(game_id)
            if session is not None:
                return session

            try:
                snapshot: GameSnapshot = await asyncio.to_thread(self._repository.load, game_id)
            except FileNotFoundError as exc:
                self._registry.release_lock(game_id)
                raise GameNotFoundError(game_id) from exc
            except ValueError as exc:
                # Unsafe id or unreadable snapshot file.
                self._registry.release_lock(game_id)
                logger.warning("cannot load game %s: %s", game_id, exc)
                raise GameNotFoundError(game_id) from exc

            seating = list(players) if players is not None else snapshot.players
            try:
                session = self._registry.restore_game(game_id, seating, snapshot)
            except ValueError:
                self._registry.release_lock(game_id)
                raise
            if session.is_finished:
                self._registry.evict(game_id)
            else:
                self._reset_deadline(game_id)
        return session

    def turn_ends_at(self, game_id: str) -> datetime | None:
        """Deadline hint for the player whose turn it is."""

        return self._deadlines.get(game_id)

    # -- actions --------------------------------------------------------------

    async def play_move(
        self, game_id: str, player_id: str, tiles: Sequence[PlacedTile]
    ) -> MoveReport:
        """Validate, price and commit a placement."""

        async with self._registry.lock(game_id):
            session = self._require(game_id)

            validation = session.validate_move(player_id, tiles)
            if not validation.valid:
                return MoveReport(valid=False, error=validation.error)

            words = [word.text for word in session.formed_words(tiles)]
            if self._word_list is not None:
                invalid = self._word_list.invalid_words(words)
                if invalid:
                    return MoveReport(
                        valid=False, error=f"Invalid words: {', '.join(invalid)}", words=words
                    )

            score = session.calculate_score(tiles)
            outcome = session.apply_move(player_id, tiles, score)
            await self._after_commit(session)

        return MoveReport(
            valid=True,
            score=score,
            words=words,
            new_tiles=outcome.new_tiles,
            current_player=outcome.current_player,
            game_over=outcome.game_over,
            reason=outcome.reason,
            winners=session.winners() if outcome.game_over else [],
        )

    async def pass_turn(self, game_id: str, player_id: str) -> PassOutcome:
        async with self._registry.lock(game_id):
            session = self._require(game_id)
            outcome = session.pass_turn(player_id)
            if outcome.valid:
                await self._after_commit(session)
        return outcome

    async def exchange_tiles(
        self, game_id: str, player_id: str, letters: Sequence[str]
    ) -> ExchangeOutcome:
        async with self._registry.lock(game_id):
            session = self._require(game_id)
            outcome = session.exchange_tiles(player_id, letters)
            if outcome.valid:
                await self._after_commit(session)
        return outcome

    async def expire_turn(self, game_id: str, now: datetime | None = None) -> PassOutcome | None:
        """Pass for the current player once their deadline has elapsed.

        Returns ``None`` when the game is not live or the deadline is still ahead.
        """

        deadline = self._deadlines.get(game_id)
        moment = _as_utc(now or self._clock())
        if deadline is None or moment < deadline:
            return None

        async with self._registry.lock(game_id):
            session = self._registry.get_game(game_id)
            if session is None:
                self._deadlines.pop(game_id, None)
                self._registry.release_lock(game_id)
                return None
            if session.current_player is None:
                return None
            # The turn may have changed while waiting for the lock.
            if self._deadlines.get(game_id) != deadline:
                return None
            player = session.current_player
            logger.info("turn expired for %s in game %s", player, game_id)
            outcome = session.pass_turn(player)
            await self._after_commit(session)
        return outcome

    # -- internals ------------------------------------------------------------

    def _require(self, game_id: str) -> GameSession:
        session = self._registry.get_game(game_id)
        if session is None:
            self._registry.release_lock(game_id)
            raise GameNotFoundError(game_id)
        return session

    def _reset_deadline(self, game_id: str) -> None:
        self._deadlines[game_id] = _as_utc(self._clock()) + self._turn_limit

    async def _after_commit(self, session: GameSession) -> None:
        game_id = session.game_id
        if session.is_finished:
            self._deadlines.pop(game_id, None)
        else:
            self._reset_deadline(game_id)
        await self._persist(session)
        if session.is_finished:
            self._registry.evict(game_id)

    async def _persist(self, session: GameSession) -> None:
        snapshot = session.snapshot()
        try:
            await asyncio.to_thread(self._repository.save, snapshot)
        except (OSError, ValueError):
            logger.warning(
                "failed to persist game %s; continuing with in-memory state",
                session.game_id,
                exc_info=True,
            )
