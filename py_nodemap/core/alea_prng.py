"""
Seedable random sources for node map generation.

Generation only needs uniform reals, inclusive integers and a Bernoulli
draw. Any object providing those methods can be injected; two
implementations are provided:

- AleaPRNG: Johannes Baagøe's Alea generator, seeded from strings or
  numbers, so a map can be reproduced from a human-readable seed.
- NumpyRandom: thin adapter over numpy.random.Generator.
"""

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class RandomSource(Protocol):
    """Random operations consumed by the generation stages."""

    def random(self) -> float: ...

    def uniform(self, low: float, high: float) -> float: ...

    def randint(self, low: int, high: int) -> int: ...

    def chance(self, probability: float) -> bool: ...


class _RandomHelpers:
    """Derived draws built on a single random() primitive."""

    def uniform(self, low: float, high: float) -> float:
        """Uniform real in [low, high)."""
        return low + self.random() * (high - low)

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        if high < low:
            raise ValueError(f"Empty integer range [{low}, {high}]")
        return low + int(self.random() * (high - low + 1))

    def chance(self, probability: float) -> bool:
        """True with the given probability. Always consumes one draw."""
        return self.random() < probability

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]


def _make_mash():
    state = 0xEFC8249D

    def mash(data) -> float:
        nonlocal state
        for char in str(data):
            state += ord(char)
            h = 0.02519603282416938 * state
            state = _uint32(h)
            h -= state
            h *= state
            state = _uint32(h)
            h -= state
            state += h * _TWO_POW_32
        return _uint32(state) * _TWO_POW_NEG_32

    return mash


class AleaPRNG(_RandomHelpers):
    """
    Alea PRNG seeded from a string or number.

    The same seed always yields the same sequence, which is what makes
    node maps reproducible.
    """

    def __init__(self, seed="default"):
        self.seed = seed
        self.call_count = 0

        mash = _make_mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 = self._absorb(self.s0, mash(seed))
        self.s1 = self._absorb(self.s1, mash(seed))
        self.s2 = self._absorb(self.s2, mash(seed))

    @staticmethod
    def _absorb(value: float, mashed: float) -> float:
        value -= mashed
        if value < 0:
            value += 1
        return value

    def random(self) -> float:
        """Next float in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def __repr__(self) -> str:
        return f"AleaPRNG(seed={self.seed!r}, calls={self.call_count})"


class NumpyRandom(_RandomHelpers):
    """RandomSource backed by numpy's default Generator."""

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        self.generator = generator if generator is not None else np.random.default_rng(seed)

    def random(self) -> float:
        return float(self.generator.random())


def make_random_source(seed=None) -> RandomSource:
    """Build the default random source; an unseeded call gets a fresh entropy seed."""
    if seed is None:
        seed = str(np.random.SeedSequence().entropy)
    return AleaPRNG(seed)
