"""Random sources for tile shuffling.

All shuffling in the engine goes through an object implementing
:class:`lexiboard.interfaces.IRandomSource`.  Two implementations live here:

- :class:`SystemRandomSource` draws from OS entropy and is used for real games.
- :class:`SeededRandom` is deterministic: the same seed string always produces
  the same sequence of shuffles, which makes bag order reproducible in tests
  and when replaying a bug report.

Examples:
    >>> seed = generate_seed("game-42", "initial_bag")
    >>> rng = SeededRandom(seed)
    >>> tiles = ["A", "B", "C", "D"]
    >>> rng.shuffle(tiles)
    >>> sorted(tiles)
    ['A', 'B', 'C', 'D']
"""

from __future__ import annotations

import hashlib
import random
from collections.abc import MutableSequence
from typing import Any


def generate_seed(game_id: str, context: str) -> str:
    """Generate a deterministic seed string from a game id and a purpose.

    Format: "game_id:context"

    Args:
        game_id: Identifier of the game the randomness belongs to
        context: What the randomness is for (e.g., 'initial_bag', 'exchange_3')

    Returns:
        Seed string in format "game_id:context"

    Raises:
        ValueError: If game_id is empty

    Examples:
        >>> generate_seed("abc", "initial_bag")
        'abc:initial_bag'
    """
    if not game_id:
        raise ValueError("game_id must be a non-empty string")

    return f"{game_id}:{context}"


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    # Use first 8 bytes for a 64-bit integer
    return int.from_bytes(digest[:8], "big", signed=False)


class SeededRandom:
    """Deterministic shuffle source derived from a seed string."""

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self._rng = random.Random(_seed_to_int(seed))

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place (Fisher-Yates via ``random.Random``)."""

        self._rng.shuffle(items)


class SystemRandomSource:
    """Shuffle source backed by OS entropy."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def shuffle(self, items: MutableSequence[Any]) -> None:
        self._rng.shuffle(items)


def default_random_source() -> SystemRandomSource:
    """Return the random source used when none is injected."""

    return SystemRandomSource()
