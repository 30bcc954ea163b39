"""Random Source Protocol Interface.

The engine never calls the :mod:`random` module directly; every shuffle goes
through an injected object satisfying this protocol.
"""

from collections.abc import MutableSequence
from typing import Any, Protocol


class IRandomSource(Protocol):
    """Protocol for objects able to shuffle a sequence in place."""

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Reorder ``items`` uniformly at random, in place.

        Args:
            items: The sequence to shuffle
        """
        ...
