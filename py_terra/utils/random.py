"""
Random number generation utilities.

All terrain decisions draw from a RandomSource, which turns a stream of
uniform floats into integer draws, weighted coin flips and shuffles. The
default float stream is Baagøe's Alea generator, seeded from a string so a
world can be regenerated exactly from its seed.
"""

import uuid
from typing import Any, MutableSequence, Optional, Protocol, TypeVar

T = TypeVar("T")

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n) -> int:
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hash. Keeps state between calls, like the reference."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data: Any) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Alea PRNG: three lagged float registers plus a carry.

    Seeds may be a single value or an iterable of values; each is mashed
    into all three registers.
    """

    def __init__(self, seed):
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash = _Mash()
        registers = [mash(" "), mash(" "), mash(" ")]
        for arg in args:
            for i in range(3):
                registers[i] -= mash(arg)
                if registers[i] < 0:
                    registers[i] += 1
        self.s0, self.s1, self.s2 = registers
        self.c = 1

    def random(self) -> float:
        """Next float in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2


class FloatGenerator(Protocol):
    def random(self) -> float: ...


class RandomSource:
    """
    Uniform integers, Bernoulli draws and in-place shuffles.

    Args:
        seed: Seed for a fresh Alea generator. Ignored when ``generator``
            is given. A random seed is chosen when both are omitted.
        generator: Any object with a ``random() -> float`` method returning
            values in [0, 1). Tests inject scripted generators here.
    """

    def __init__(self, seed: Optional[Any] = None, generator: Optional[FloatGenerator] = None):
        if generator is None:
            if seed is None:
                seed = uuid.uuid4().hex
            generator = AleaPRNG(seed)
        self.seed = seed
        self.generator = generator

    def random(self) -> float:
        return self.generator.random()

    def uniform(self, max_val: int) -> int:
        """Integer in [0, max_val)."""
        return int(self.random() * max_val)

    def uniform_inclusive(self, max_val: int) -> int:
        """Integer in [0, max_val]."""
        return self.uniform(max_val + 1)

    def bernoulli(self, probability: float) -> bool:
        """True with the given probability; >= 1 is certain, <= 0 impossible."""
        if probability >= 1:
            return True
        if probability <= 0:
            return False
        return self.random() < probability

    def shuffle(self, seq: MutableSequence[T]) -> MutableSequence[T]:
        """Durstenfeld shuffle, in place. Returns ``seq`` for chaining."""
        for i in range(len(seq), 0, -1):
            j = self.uniform(i)
            seq[i - 1], seq[j] = seq[j], seq[i - 1]
        return seq


# Global source for callers that do not inject one
_source = None


def set_random_seed(seed: Any) -> RandomSource:
    """
    Reseed the shared random source.

    Args:
        seed: Seed string (or number) for the Alea generator

    Returns:
        The new shared RandomSource
    """
    global _source
    _source = RandomSource(seed)
    return _source


def get_random_source() -> RandomSource:
    """
    Get the shared RandomSource, creating an unseeded one on first use.

    Returns:
        RandomSource instance
    """
    global _source
    if _source is None:
        _source = RandomSource()
    return _source
