"""Tests for the injectable random sources."""

from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lexiboard.utils.rng import (
    SeededRandom,
    SystemRandomSource,
    default_random_source,
    generate_seed,
)


class TestGenerateSeed:
    """Tests for generate_seed function."""

    def test_seed_format(self):
        assert generate_seed("game-1", "initial_bag") == "game-1:initial_bag"

    def test_different_parameters_produce_different_seeds(self):
        seeds = {
            generate_seed("a", "bag"),
            generate_seed("b", "bag"),
            generate_seed("a", "exchange"),
        }
        assert len(seeds) == 3

    def test_empty_game_id_raises_error(self):
        with pytest.raises(ValueError, match="game_id must be a non-empty string"):
            generate_seed("", "bag")


class TestSeededRandom:
    """Determinism of the seeded source."""

    def test_same_seed_same_order(self):
        first = list(range(50))
        second = list(range(50))
        SeededRandom("seed").shuffle(first)
        SeededRandom("seed").shuffle(second)
        assert first == second

    def test_different_seed_different_order(self):
        first = list(range(50))
        second = list(range(50))
        SeededRandom("seed-1").shuffle(first)
        SeededRandom("seed-2").shuffle(second)
        assert first != second

    def test_successive_shuffles_advance_the_stream(self):
        rng = SeededRandom("stream")
        first = list(range(50))
        second = list(range(50))
        rng.shuffle(first)
        rng.shuffle(second)
        assert first != second

    @given(st.text(min_size=1), st.lists(st.integers(), max_size=40))
    def test_shuffle_is_a_permutation(self, seed, items):
        shuffled = list(items)
        SeededRandom(seed).shuffle(shuffled)
        assert Counter(shuffled) == Counter(items)


def test_system_random_source_preserves_elements():
    items = list("SCRABBLE")
    SystemRandomSource().shuffle(items)
    assert sorted(items) == sorted("SCRABBLE")


def test_default_random_source_is_system_backed():
    assert isinstance(default_random_source(), SystemRandomSource)
