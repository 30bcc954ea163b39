"""Letter table, bag and rack helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from lexiboard.interfaces import IRandomSource

BLANK = "*"

LETTER_VALUES: Mapping[str, int] = MappingProxyType(
    {
        "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4, "I": 1,
        "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3, "Q": 10, "R": 1,
        "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
        BLANK: 0,
    }
)  # fmt: skip

LETTER_DISTRIBUTION: Mapping[str, int] = MappingProxyType(
    {
        "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3, "H": 2, "I": 9,
        "J": 1, "K": 1, "L": 4, "M": 2, "N": 6, "O": 8, "P": 2, "Q": 1, "R": 6,
        "S": 4, "T": 6, "U": 4, "V": 2, "W": 2, "X": 1, "Y": 2, "Z": 1,
        BLANK: 2,
    }
)  # fmt: skip


def total_tiles(distribution: Mapping[str, int] = LETTER_DISTRIBUTION) -> int:
    """Return the number of tiles in a full set."""

    return sum(distribution.values())


TOTAL_TILES = total_tiles()


def tile_value(letter: str) -> int:
    """Point value of a letter; unknown letters are worth nothing."""

    return LETTER_VALUES.get(letter.upper(), 0)


def initialize_bag(
    rng: IRandomSource, distribution: Mapping[str, int] = LETTER_DISTRIBUTION
) -> list[str]:
    """Build a full bag from ``distribution`` and shuffle it."""

    bag = [letter for letter, count in distribution.items() for _ in range(count)]
    rng.shuffle(bag)
    return bag


def draw_tiles(bag: list[str], count: int) -> list[str]:
    """Remove up to ``count`` letters from the end of ``bag``.

    Returns fewer letters when the bag runs short; never raises.
    """

    drawn: list[str] = []
    while len(drawn) < count and bag:
        drawn.append(bag.pop())
    return drawn


def return_tiles(bag: list[str], letters: Iterable[str], rng: IRandomSource) -> None:
    """Put ``letters`` back into ``bag`` and reshuffle it in place."""

    bag.extend(letters)
    rng.shuffle(bag)


def rack_contains(rack: Iterable[str], letters: Iterable[str]) -> bool:
    """True if every letter can be taken one-for-one from ``rack``."""

    needed = Counter(letters)
    available = Counter(rack)
    return all(available[letter] >= count for letter, count in needed.items())


def remove_from_rack(rack: list[str], letters: Iterable[str]) -> None:
    """Remove one rack tile per letter, in place.

    Raises:
        ValueError: If a letter is missing; the rack is left unchanged
    """
    letters = list(letters)
    if not rack_contains(rack, letters):
        raise ValueError(f"Rack {rack!r} does not hold {letters!r}")
    for letter in letters:
        rack.remove(letter)
