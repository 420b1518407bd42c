"""Id generator utility for creating human-memorable identifiers."""

import random
import threading
from collections.abc import Sequence
from typing import ClassVar

from cool_id.core.config import get_settings
from cool_id.core.protocols import RandomSource
from cool_id.core.types import Size
from cool_id.core.word_validator import WordListError
from cool_id.words import (
    ADJECTIVES,
    ANIMAL_PREFIXES,
    ANIMALS,
    JOB_PREFIXES,
    JOBS,
    NAMES,
)

_local = threading.local()


def _thread_rng() -> random.Random:
    """Return this thread's generator, seeding it from the OS on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


class CoolIdGenerator:
    """Generates ids like 'happyultra-barista-shane' or
    'gerald-the-brave-and-shyrobot-otter'."""

    NAMES: ClassVar[Sequence[str]] = NAMES
    ADJECTIVES: ClassVar[Sequence[str]] = ADJECTIVES
    ANIMALS: ClassVar[Sequence[str]] = ANIMALS
    JOBS: ClassVar[Sequence[str]] = JOBS
    ANIMAL_PREFIXES: ClassVar[Sequence[str]] = ANIMAL_PREFIXES
    JOB_PREFIXES: ClassVar[Sequence[str]] = JOB_PREFIXES

    @staticmethod
    def _pick(rng: RandomSource, words: Sequence[str]) -> str:
        if not words:
            raise WordListError("Cannot draw from an empty word list")
        return rng.choice(words)

    @classmethod
    def subject(cls, rng: RandomSource) -> str:
        """Draw a prefix-noun pair, animal or job with equal probability."""
        if rng.getrandbits(1):
            prefix = cls._pick(rng, cls.ANIMAL_PREFIXES)
            noun = cls._pick(rng, cls.ANIMALS)
        else:
            prefix = cls._pick(rng, cls.JOB_PREFIXES)
            noun = cls._pick(rng, cls.JOBS)
        return f"{prefix}-{noun}"

    @classmethod
    def generate(cls, size: Size, rng: RandomSource | None = None) -> str:
        """Generate an id of the given size.

        Args:
            size: A ``Size`` member or its value, e.g. ``"long"``.
            rng: Random source to draw from. Defaults to a per-thread
                generator seeded from the OS.

        Raises:
            ValueError: If ``size`` is not a known size.
            WordListError: If a word table is empty.
        """
        size = Size(size)
        if rng is None:
            rng = _thread_rng()

        subject = cls.subject(rng)

        if size is Size.SHORT:
            adjective = cls._pick(rng, cls.ADJECTIVES)
            name = cls._pick(rng, cls.NAMES)
            return f"{adjective}{subject}-{name}"

        if size is Size.LONG:
            name = cls._pick(rng, cls.NAMES)
            adjective1 = cls._pick(rng, cls.ADJECTIVES)
            adjective2 = cls._pick(rng, cls.ADJECTIVES)
            return f"{name}-the-{adjective1}-and-{adjective2}{subject}"

        name1 = cls._pick(rng, cls.NAMES)
        name2 = cls._pick(rng, cls.NAMES)
        adjective1 = cls._pick(rng, cls.ADJECTIVES)
        adjective2 = cls._pick(rng, cls.ADJECTIVES)
        return f"{name1}-{name2}-the-{adjective1}-and-{adjective2}{subject}"

    @classmethod
    def generate_batch(
        cls, size: Size, count: int, rng: RandomSource | None = None
    ) -> list[str]:
        """Generate ``count`` independent ids (may contain duplicates)."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if rng is None:
            rng = _thread_rng()
        return [cls.generate(size, rng) for _ in range(count)]


def generate(size: Size, rng: RandomSource | None = None) -> str:
    """Generate an id of the given size."""
    return CoolIdGenerator.generate(size, rng)


def generate_batch(
    size: Size, count: int, rng: RandomSource | None = None
) -> list[str]:
    """Generate a list of ids of the given size."""
    return CoolIdGenerator.generate_batch(size, count, rng)


def generate_id(size: Size | None = None) -> str:
    """Generate an id, using the configured default size if none is given."""
    if size is None:
        size = get_settings().generator.default_size
    return CoolIdGenerator.generate(size)
