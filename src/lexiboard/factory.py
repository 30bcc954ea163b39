"""Service Factory for lexiboard.

This module wires the game service from :class:`lexiboard.config.Settings`.
Use it in production code; tests construct :class:`GameService` directly
with a seeded registry and a temporary repository.

Example:
    from lexiboard.factory import create_game_service
    service = create_game_service()
"""

from lexiboard.config import Settings, get_settings
from lexiboard.domain.registry import GameRegistry
from lexiboard.repository import JsonGameRepository
from lexiboard.services.game_service import GameService
from lexiboard.wordlist import WordList


def create_word_list(settings: Settings) -> WordList | None:
    """Load the configured word file; no file means words are not checked."""

    if settings.word_list_path is None:
        return None
    return WordList.from_file(settings.word_list_path)


def create_game_service(settings: Settings | None = None) -> GameService:
    """Create a GameService with all dependencies.

    Args:
        settings: Optional settings; defaults to :func:`get_settings`

    Returns:
        Fully initialized GameService
    """
    settings = settings or get_settings()
    return GameService(
        GameRegistry(rules=settings.rules()),
        JsonGameRepository(settings.data_dir),
        word_list=create_word_list(settings),
        turn_time_limit_seconds=settings.turn_time_limit_seconds,
    )
