"""
Protocol for the random source the id generator draws from.

``random.Random`` and ``random.SystemRandom`` both satisfy it, so tests can
pass a seeded instance to get reproducible ids.
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Protocol for a source of uniform random draws."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, uniformly."""
        ...

    def getrandbits(self, k: int) -> int:
        """Return a non-negative int with ``k`` random bits."""
        ...
