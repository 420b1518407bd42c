"""Worst-case byte lengths and combination counts for each id size.

Every function here is pure. The per-size results are computed once when
``cool_id.core.types`` is imported and cached on ``Size``.
"""

from collections.abc import Sequence

from cool_id.core.word_validator import WordListError
from cool_id.words import (
    ADJECTIVES,
    ANIMAL_PREFIXES,
    ANIMALS,
    JOB_PREFIXES,
    JOBS,
    NAMES,
)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def longest(words: Sequence[str]) -> int:
    """Return the byte length of the longest token in ``words``."""
    if not words:
        raise WordListError("Cannot measure an empty word list")

    largest = 0
    for word in words:
        length = _byte_len(word)
        if length > largest:
            largest = length
    return largest


def larger(a: int, b: int) -> int:
    """Return whichever of ``a`` and ``b`` is larger."""
    return b if a < b else a


def _prefix_max_len() -> int:
    # Only one prefix family is drawn per id.
    return larger(longest(ANIMAL_PREFIXES), longest(JOB_PREFIXES))


def short_id_max_len() -> int:
    """Maximum byte length of ``{adjective}{prefix}-{noun}-{name}``.

    Sums the longest token of every category in the template. Both noun lists
    are counted, and the unused one covers the template's separators.
    """
    return (
        _prefix_max_len()
        + longest(NAMES)
        + longest(ADJECTIVES)
        + longest(ANIMALS)
        + longest(JOBS)
    )


def long_id_max_len() -> int:
    """Maximum byte length of ``{name}-the-{adjective}-and-{adjective}{prefix}-{noun}``."""
    return (
        _prefix_max_len()
        + longest(NAMES)
        + longest(ADJECTIVES)
        + longest(ADJECTIVES)
        + longest(ANIMALS)
        + longest(JOBS)
    )


def very_long_id_max_len() -> int:
    """Maximum byte length of a long id with a second leading name."""
    return longest(NAMES) + long_id_max_len()


def subject_combinations() -> int:
    """Number of distinct prefix-noun pairs across both families."""
    return len(ANIMAL_PREFIXES) * len(ANIMALS) + len(JOB_PREFIXES) * len(JOBS)


def short_id_combinations() -> int:
    return subject_combinations() * len(ADJECTIVES) * len(NAMES)


def long_id_combinations() -> int:
    return subject_combinations() * len(ADJECTIVES) ** 2 * len(NAMES)


def very_long_id_combinations() -> int:
    return subject_combinations() * len(ADJECTIVES) ** 2 * len(NAMES) ** 2
