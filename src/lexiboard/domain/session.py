"""Per-game facade composing validation, scoring and the turn state machine."""

from __future__ import annotations

from collections.abc import Sequence

from lexiboard.interfaces import IRandomSource
from lexiboard.utils.rng import default_random_source

from . import scoring, turns, validation
from .board import Board
from .enums import GameOverReason, GameStatus
from .models import (
    ExchangeOutcome,
    FormedWord,
    GameID,
    GameSnapshot,
    GameState,
    GameStateView,
    MoveOutcome,
    PassOutcome,
    PlacedTile,
    PlayerID,
    ValidationResult,
)
from .rules_config import DEFAULT_RULES, RulesConfig
from .tiles import TOTAL_TILES, draw_tiles, initialize_bag


def _check_players(players: Sequence[str], rules: RulesConfig) -> None:
    limits = rules.tiles
    if len(set(players)) != len(players):
        raise ValueError("Player ids must be unique")
    if not limits.min_players <= len(players) <= limits.max_players:
        raise ValueError(
            f"A game needs {limits.min_players}-{limits.max_players} players, got {len(players)}"
        )


class GameSession:
    """A live game: the method contract consumed by the transport layer."""

    def __init__(
        self,
        state: GameState,
        *,
        rng: IRandomSource | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.state = state
        self.rng = rng or default_random_source()
        self.rules = rules

    # -- construction ---------------------------------------------------------

    @classmethod
    def new(
        cls,
        game_id: str,
        players: Sequence[str],
        *,
        rng: IRandomSource | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> GameSession:
        """Start a game with a freshly shuffled bag and dealt racks."""

        _check_players(players, rules)
        rng = rng or default_random_source()
        bag = initialize_bag(rng)
        seats = [PlayerID(p) for p in players]
        racks = {player: draw_tiles(bag, rules.tiles.rack_size) for player in seats}
        state = GameState(
            game_id=GameID(game_id),
            players=seats,
            bag=bag,
            racks=racks,
            scores={player: 0 for player in seats},
        )
        return cls(state, rng=rng, rules=rules)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: GameSnapshot,
        *,
        rng: IRandomSource | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> GameSession:
        """Rebuild a game exactly as persisted, without shuffling or dealing.

        Raises:
            ValueError: If the snapshot is inconsistent
        """
        players = [PlayerID(p) for p in snapshot.players]
        if not players:
            raise ValueError("Snapshot has no players")
        unknown = (set(snapshot.racks) | set(snapshot.scores)) - set(players)
        if unknown:
            raise ValueError(f"Snapshot references unknown players: {sorted(unknown)}")

        if snapshot.current_player_id is None:
            index = 0
        elif snapshot.current_player_id in players:
            index = players.index(PlayerID(snapshot.current_player_id))
        else:
            raise ValueError(f"Current player {snapshot.current_player_id!r} is not seated")

        racks = {p: list(snapshot.racks.get(p, [])) for p in players}
        if any(len(rack) > rules.tiles.rack_size for rack in racks.values()):
            raise ValueError(f"Racks hold at most {rules.tiles.rack_size} tiles")
        scores = {p: int(snapshot.scores.get(p, 0)) for p in players}
        if any(value < 0 for value in scores.values()):
            raise ValueError("Scores must be non-negative")

        state = GameState(
            game_id=GameID(snapshot.game_id),
            players=players,
            board=Board.from_rows(snapshot.board, snapshot.blanks),
            bag=list(snapshot.bag),
            racks=racks,
            scores=scores,
            current_player_index=index,
            consecutive_passes=snapshot.consecutive_passes,
            status=GameStatus(snapshot.status),
            game_over_reason=(
                GameOverReason(snapshot.game_over_reason) if snapshot.game_over_reason else None
            ),
        )
        if state.tile_count() != TOTAL_TILES:
            raise ValueError(
                f"Snapshot accounts for {state.tile_count()} tiles, expected {TOTAL_TILES}"
            )
        return cls(state, rng=rng, rules=rules)

    # -- read side ------------------------------------------------------------

    @property
    def game_id(self) -> GameID:
        return self.state.game_id

    @property
    def players(self) -> list[PlayerID]:
        return list(self.state.players)

    @property
    def current_player(self) -> PlayerID | None:
        return self.state.current_player

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    def get_game_state(self) -> GameStateView:
        return GameStateView(
            board=self.state.board.to_rows(),
            current_player=self.state.current_player,
            scores=dict(self.state.scores),
            tiles_remaining=len(self.state.bag),
            status=self.state.status,
        )

    def get_player_hand(self, player_id: str) -> list[str]:
        return list(self.state.racks.get(PlayerID(player_id), []))

    def winners(self) -> list[PlayerID]:
        return turns.winners(self.state)

    def snapshot(self) -> GameSnapshot:
        """Detached, persistable copy of the current state."""

        state = self.state
        return GameSnapshot(
            game_id=state.game_id,
            players=list(state.players),
            board=state.board.to_rows(),
            bag=list(state.bag),
            racks={player: list(rack) for player, rack in state.racks.items()},
            scores=dict(state.scores),
            current_player_id=state.players[state.current_player_index],
            consecutive_passes=state.consecutive_passes,
            status=state.status,
            game_over_reason=state.game_over_reason,
            blanks=sorted(state.board.blanks),
        )

    # -- rules ----------------------------------------------------------------

    def validate_move(self, player_id: str, tiles: Sequence[PlacedTile]) -> ValidationResult:
        return validation.validate_move(self.state, PlayerID(player_id), tiles, self.rules)

    def calculate_score(self, tiles: Sequence[PlacedTile]) -> int:
        return scoring.calculate_score(self.state.board, tiles, self.rules)

    def formed_words(self, tiles: Sequence[PlacedTile]) -> list[FormedWord]:
        return scoring.formed_words(self.state.board, tiles)

    # -- mutators -------------------------------------------------------------

    def apply_move(self, player_id: str, tiles: Sequence[PlacedTile], score: int) -> MoveOutcome:
        return turns.apply_move(self.state, PlayerID(player_id), tiles, score)

    def pass_turn(self, player_id: str) -> PassOutcome:
        return turns.pass_turn(self.state, PlayerID(player_id))

    def exchange_tiles(self, player_id: str, letters: Sequence[str]) -> ExchangeOutcome:
        return turns.exchange_tiles(
            self.state, PlayerID(player_id), list(letters), self.rng, self.rules
        )
