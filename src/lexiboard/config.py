"""Lightweight configuration for the lexiboard engine and game service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lexiboard.domain.rules_config import DEFAULT_RULES, RulesConfig, ScoringRules, TurnRules


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    data_dir: Path = Field(default=Path("games"), description="Where game snapshots live")
    word_list_path: Path | None = Field(
        default=None,
        description="Optional word file used to vet formed words; unset disables the check",
    )
    turn_time_limit_seconds: float = Field(
        default=60.0,
        description="Seconds a player has to act before the turn is passed for them",
        gt=0.0,
    )
    exchange_resets_passes: bool = Field(
        default=False,
        description="Whether a tile exchange resets the consecutive-pass counter",
    )
    score_cross_words: bool = Field(
        default=True,
        description="Score perpendicular words formed by a move in addition to the main word",
    )

    def rules(self) -> RulesConfig:
        """Rule configuration reflecting the toggles above."""

        return RulesConfig(
            board=DEFAULT_RULES.board,
            tiles=DEFAULT_RULES.tiles,
            scoring=ScoringRules(
                bingo_bonus=DEFAULT_RULES.scoring.bingo_bonus,
                score_cross_words=self.score_cross_words,
            ),
            turns=TurnRules(exchange_resets_passes=self.exchange_resets_passes),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
