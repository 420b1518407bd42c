from enum import Enum

from cool_id.utils.max_length import (
    long_id_combinations,
    long_id_max_len,
    short_id_combinations,
    short_id_max_len,
    very_long_id_combinations,
    very_long_id_max_len,
)


class Size(str, Enum):
    """Output size of a generated id.

    ``max_len`` is the largest byte length an id of that size can have, so a
    caller can size a buffer or a column before generating anything.
    """

    # {adjective}{prefix}-{animal|job}-{name}, e.g. "happyultra-barista-shane"
    SHORT = "short"
    # {name}-the-{adjective}-and-{adjective}{prefix}-{animal|job}
    LONG = "long"
    # {name}-{name}-the-{adjective}-and-{adjective}{prefix}-{animal|job}
    VERY_LONG = "very_long"

    @property
    def max_len(self) -> int:
        return _MAX_LENGTHS[self]

    @property
    def combinations(self) -> int:
        """Number of distinct ids this size can produce."""
        return _COMBINATIONS[self]


_MAX_LENGTHS: dict[Size, int] = {
    Size.SHORT: short_id_max_len(),
    Size.LONG: long_id_max_len(),
    Size.VERY_LONG: very_long_id_max_len(),
}

_COMBINATIONS: dict[Size, int] = {
    Size.SHORT: short_id_combinations(),
    Size.LONG: long_id_combinations(),
    Size.VERY_LONG: very_long_id_combinations(),
}
