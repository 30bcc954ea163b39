"""Utility functions for the lexiboard engine."""

from lexiboard.utils.rng import (
    SeededRandom,
    SystemRandomSource,
    default_random_source,
    generate_seed,
)

__all__ = [
    "SeededRandom",
    "SystemRandomSource",
    "default_random_source",
    "generate_seed",
]
