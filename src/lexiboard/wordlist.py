"""Set-backed word list used to vet the words a move forms."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

# Small built-in list for development; production loads a full word file.
DEFAULT_WORDS = frozenset(
    {
        "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN", "AR", "AS", "AT",
        "AW", "AX", "AY", "BE", "BY", "DO", "GO", "HE", "HI", "IN", "IS", "IT", "ME",
        "MY", "NO", "OF", "ON", "OR", "SO", "TO", "UP", "US", "WE",
        "ART", "CAT", "DOG", "RAT", "TAR", "TEA", "TOE",
        "BOOK", "CODE", "GAME", "PLAY", "READ", "TILE", "TREE", "WORD",
        "BOARD", "HELLO", "HOUSE", "SCORE", "WORLD", "WRITE",
    }
)  # fmt: skip


class WordList:
    """Case-insensitive membership test over a fixed set of words."""

    def __init__(self, words: Iterable[str] | None = None) -> None:
        source = DEFAULT_WORDS if words is None else words
        self._words = frozenset(word.strip().upper() for word in source if word.strip())

    def __len__(self) -> int:
        return len(self._words)

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return word.upper() in self._words

    def invalid_words(self, words: Iterable[str]) -> list[str]:
        return [word.upper() for word in words if not self.is_valid(word)]

    @classmethod
    def from_file(cls, path: Path | str) -> WordList:
        """Load one word per line; blank lines and ``#`` comments are skipped."""

        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls(line for line in lines if not line.lstrip().startswith("#"))
