"""Static word tables the id generator draws from."""

from cool_id.core.word_validator import WordListValidator
from cool_id.words.adjectives import ADJECTIVES
from cool_id.words.animals import ANIMALS
from cool_id.words.jobs import JOBS
from cool_id.words.names import NAMES
from cool_id.words.prefixes import ANIMAL_PREFIXES, JOB_PREFIXES

WORD_LISTS: dict[str, tuple[str, ...]] = {
    "names": NAMES,
    "adjectives": ADJECTIVES,
    "animals": ANIMALS,
    "jobs": JOBS,
    "animal_prefixes": ANIMAL_PREFIXES,
    "job_prefixes": JOB_PREFIXES,
}

WordListValidator(WORD_LISTS).validate_all()

__all__ = [
    "ADJECTIVES",
    "ANIMALS",
    "ANIMAL_PREFIXES",
    "JOBS",
    "JOB_PREFIXES",
    "NAMES",
    "WORD_LISTS",
]
