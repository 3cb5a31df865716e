"""Shared fixtures for terrain tests."""

import itertools

import pytest

from py_terra.utils.random import RandomSource


class ScriptedGenerator:
    """Float generator replaying fixed values, cycling when exhausted."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.call_count = 0

    def random(self):
        self.call_count += 1
        return next(self._values)


@pytest.fixture
def scripted_source():
    """Factory for RandomSources that replay the given floats."""
    def make(*values):
        return RandomSource(generator=ScriptedGenerator(values))
    return make
