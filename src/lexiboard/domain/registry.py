"""In-memory directory of live game sessions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from lexiboard.interfaces import IRandomSource

from .models import GameID, GameSnapshot
from .rules_config import DEFAULT_RULES, RulesConfig
from .session import GameSession

logger = logging.getLogger(__name__)


class GameExistsError(ValueError):
    """Raised when creating a game whose id is already live."""


class GameRegistry:
    """Injectable repository of live sessions keyed by game id.

    Each game gets its own :class:`asyncio.Lock`; callers hold it around
    validate/score/commit so that one game has a single writer at a time.
    """

    def __init__(
        self,
        *,
        rules: RulesConfig = DEFAULT_RULES,
        rng_factory: Callable[[str], IRandomSource] | None = None,
    ) -> None:
        self._rules = rules
        self._rng_factory = rng_factory
        self._games: dict[GameID, GameSession] = {}
        self._locks: dict[GameID, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._games

    def game_ids(self) -> list[GameID]:
        return sorted(self._games)

    def _rng_for(self, game_id: str) -> IRandomSource | None:
        if self._rng_factory is None:
            return None
        return self._rng_factory(game_id)

    def create_game(self, game_id: str, players: Sequence[str]) -> GameSession:
        """Start a new game with a shuffled bag and dealt racks.

        Raises:
            GameExistsError: If ``game_id`` is already live
            ValueError: If the player list is invalid
        """
        key = GameID(game_id)
        if key in self._games:
            raise GameExistsError(f"Game {game_id!r} already exists")
        session = GameSession.new(
            game_id, players, rng=self._rng_for(game_id), rules=self._rules
        )
        self._games[key] = session
        logger.debug("created game %s for %s", game_id, list(players))
        return session

    def restore_game(
        self, game_id: str, players: Sequence[str], snapshot: GameSnapshot
    ) -> GameSession:
        """Return the live game, or rebuild it from ``snapshot`` verbatim.

        ``players`` gives the seating order and overrides the snapshot's.
        """

        key = GameID(game_id)
        existing = self._games.get(key)
        if existing is not None:
            return existing

        seated = GameSnapshot(
            game_id=game_id,
            players=list(players),
            board=snapshot.board,
            bag=snapshot.bag,
            racks=snapshot.racks,
            scores=snapshot.scores,
            current_player_id=snapshot.current_player_id,
            consecutive_passes=snapshot.consecutive_passes,
            status=snapshot.status,
            game_over_reason=snapshot.game_over_reason,
            blanks=snapshot.blanks,
        )
        session = GameSession.from_snapshot(
            seated, rng=self._rng_for(game_id), rules=self._rules
        )
        self._games[key] = session
        logger.info("restored game %s from snapshot", game_id)
        return session

    def get_game(self, game_id: str) -> GameSession | None:
        return self._games.get(GameID(game_id))

    def evict(self, game_id: str) -> bool:
        """Drop a game from memory; returns whether it was live."""

        key = GameID(game_id)
        self._locks.pop(key, None)
        removed = self._games.pop(key, None) is not None
        if removed:
            logger.debug("evicted game %s", game_id)
        return removed

    def lock(self, game_id: str) -> asyncio.Lock:
        """Per-game lock serializing mutations of one session."""

        key = GameID(game_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    def release_lock(self, game_id: str) -> None:
        """Forget the lock of an id that never became, or is no longer, live."""

        key = GameID(game_id)
        if key not in self._games:
            self._locks.pop(key, None)
