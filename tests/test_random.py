"""Tests for the random source."""

import pytest

from py_terra.utils.random import (
    AleaPRNG,
    RandomSource,
    get_random_source,
    set_random_seed,
)


class TestAleaPRNG:
    """Test the seeded float generator."""

    def test_same_seed_same_stream(self):
        a = AleaPRNG("terra")
        b = AleaPRNG("terra")
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds_differ(self):
        a = AleaPRNG("terra")
        b = AleaPRNG("firma")
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_values_in_unit_interval(self):
        prng = AleaPRNG(42)
        for _ in range(1000):
            value = prng.random()
            assert 0 <= value < 1
        assert prng.call_count == 1000


class TestRandomSource:
    """Test integer draws, coin flips and shuffles."""

    def test_uniform_range(self):
        source = RandomSource("uniform")
        draws = [source.uniform(7) for _ in range(2000)]
        assert min(draws) == 0
        assert max(draws) == 6

    def test_uniform_inclusive_reaches_max(self):
        source = RandomSource("inclusive")
        draws = {source.uniform_inclusive(3) for _ in range(2000)}
        assert draws == {0, 1, 2, 3}

    def test_uniform_uses_floor(self, scripted_source):
        source = scripted_source(0.0, 0.5, 0.999)
        assert [source.uniform(10) for _ in range(3)] == [0, 5, 9]

    def test_bernoulli_certain_and_impossible(self, scripted_source):
        source = scripted_source(0.0)
        # Out-of-range probabilities never consume a draw
        assert source.bernoulli(1.5) is True
        assert source.bernoulli(1) is True
        assert source.bernoulli(0) is False
        assert source.bernoulli(-0.2) is False
        assert source.generator.call_count == 0

    def test_bernoulli_threshold(self, scripted_source):
        source = scripted_source(0.3)
        assert source.bernoulli(0.31) is True
        assert source.bernoulli(0.3) is False

    def test_shuffle_is_permutation(self):
        source = RandomSource("shuffle")
        items = list(range(50))
        result = source.shuffle(items)
        assert result is items
        assert sorted(items) == list(range(50))

    def test_shuffle_keeps_duplicates(self):
        source = RandomSource("dupes")
        items = ["a", "a", "b", "c", "c", "c"]
        source.shuffle(items)
        assert sorted(items) == ["a", "a", "b", "c", "c", "c"]

    def test_shuffle_swap_order(self, scripted_source):
        # i=3 -> j=0 swaps ends; i=2 -> j=1 and i=1 -> j=0 are no-ops
        source = scripted_source(0.0, 0.99, 0.0)
        assert source.shuffle(["a", "b", "c"]) == ["c", "b", "a"]

    def test_shuffle_empty(self):
        assert RandomSource("empty").shuffle([]) == []

    def test_seeded_sources_repeat(self):
        a = RandomSource("repeat")
        b = RandomSource("repeat")
        assert [a.uniform(100) for _ in range(10)] == [b.uniform(100) for _ in range(10)]

    def test_unseeded_source_gets_seed(self):
        assert RandomSource().seed is not None


def test_shared_source_reseeding():
    source = set_random_seed("shared")
    assert get_random_source() is source
    first = [source.uniform(1000) for _ in range(5)]

    again = set_random_seed("shared")
    assert [again.uniform(1000) for _ in range(5)] == first
