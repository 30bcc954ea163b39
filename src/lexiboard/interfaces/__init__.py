"""Protocol-based interfaces for lexiboard collaborators.

This module exports the protocols the engine and service depend on, so that
production implementations and test fakes can be swapped freely.
"""

from lexiboard.interfaces.random_source import IRandomSource
from lexiboard.interfaces.word_list import IWordList

__all__ = [
    "IRandomSource",
    "IWordList",
]
