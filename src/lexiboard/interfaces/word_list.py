"""Word List Protocol Interface.

Dictionary legality is decided outside the rule engine.  The game service
accepts any object implementing this protocol to vet the words a move forms.
"""

from collections.abc import Iterable
from typing import Protocol


class IWordList(Protocol):
    """Protocol defining the word-list collaborator."""

    def is_valid(self, word: str) -> bool:
        """Return ``True`` if ``word`` is playable.

        Args:
            word: Candidate word, in any case

        Returns:
            Whether the word is in the list
        """
        ...

    def invalid_words(self, words: Iterable[str]) -> list[str]:
        """Return the words from ``words`` that are not playable, uppercased.

        Args:
            words: Candidate words

        Returns:
            The rejected words, preserving input order
        """
        ...
