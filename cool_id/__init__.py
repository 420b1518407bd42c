"""
Human-memorable random ids built from fixed word lists.

Example::

    from cool_id import Size, generate

    generate(Size.SHORT)      # e.g. "happyultra-barista-shane"
    generate(Size.LONG)       # e.g. "gerald-the-brave-and-shyrobot-otter"
    Size.SHORT.max_len        # 55, no short id is ever longer

Ids are not unique and not suitable as secrets.
"""

from cool_id.core.types import Size
from cool_id.core.word_validator import WordListError
from cool_id.utils.max_length import (
    long_id_max_len,
    short_id_max_len,
    very_long_id_max_len,
)
from cool_id.utils.name_generator import (
    CoolIdGenerator,
    generate,
    generate_batch,
    generate_id,
)

__all__ = [
    "CoolIdGenerator",
    "Size",
    "WordListError",
    "generate",
    "generate_batch",
    "generate_id",
    "long_id_max_len",
    "short_id_max_len",
    "very_long_id_max_len",
]
