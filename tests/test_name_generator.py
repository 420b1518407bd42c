import random
import re
import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest
from cool_id import Size, WordListError, generate, generate_batch, generate_id
from cool_id.utils import name_generator
from cool_id.utils.name_generator import CoolIdGenerator
from cool_id.words import (
    ADJECTIVES,
    ANIMAL_PREFIXES,
    ANIMALS,
    JOB_PREFIXES,
    JOBS,
    NAMES,
)


def _split_glued(glued, prefixes):
    """Split '{adjective}{prefix}' into its two tokens, or return None."""
    for prefix in prefixes:
        adjective = glued[: -len(prefix)]
        if glued.endswith(prefix) and adjective in ADJECTIVES:
            return adjective, prefix
    return None


def _decompose_subject(glued, noun):
    """Return (adjective, prefix, branch) for the tail of an id."""
    if noun in ANIMALS:
        parts = _split_glued(glued, ANIMAL_PREFIXES)
        branch = "animal"
    elif noun in JOBS:
        parts = _split_glued(glued, JOB_PREFIXES)
        branch = "job"
    else:
        pytest.fail(f"'{noun}' is neither an animal nor a job")
    assert parts is not None, f"'{glued}' is not an adjective glued to a {branch} prefix"
    return parts[0], parts[1], branch


def _branch(cool_id):
    return "animal" if cool_id.rsplit("-", 1)[1] in ANIMALS else "job"


class TestShortIds:
    """Test ids of Size.SHORT."""

    def test_format(self):
        """Should look like '{adjective}{prefix}-{noun}-{name}'."""
        cool_id = generate(Size.SHORT)

        assert re.match(r"^[a-z]+-[a-z]+-[a-z]+$", cool_id), (
            f"Generated id '{cool_id}' doesn't match expected format"
        )

    def test_uses_predefined_words(self):
        for _ in range(200):
            cool_id = generate(Size.SHORT)
            glued, noun, name = cool_id.split("-")

            _decompose_subject(glued, noun)
            assert name in NAMES

    def test_adjective_is_glued_to_prefix(self, rng):
        cool_id = generate(Size.SHORT, rng)
        glued, noun, _ = cool_id.split("-")
        adjective, prefix, _ = _decompose_subject(glued, noun)

        assert cool_id.startswith(adjective + prefix + "-")

    def test_length_within_bound(self):
        for _ in range(2000):
            assert len(generate(Size.SHORT).encode("utf-8")) <= Size.SHORT.max_len


class TestLongIds:
    """Test ids of Size.LONG."""

    def test_format(self):
        cool_id = generate(Size.LONG)

        assert "-the-" in cool_id
        assert "-and-" in cool_id
        assert len(cool_id.split("-")) == 6

    def test_uses_predefined_words(self):
        for _ in range(200):
            name, the, adjective1, and_, glued, noun = generate(Size.LONG).split("-")

            assert name in NAMES
            assert (the, and_) == ("the", "and")
            assert adjective1 in ADJECTIVES
            _decompose_subject(glued, noun)

    def test_length_within_bound(self):
        for _ in range(2000):
            assert len(generate(Size.LONG).encode("utf-8")) <= Size.LONG.max_len


class TestVeryLongIds:
    """Test ids of Size.VERY_LONG."""

    def test_two_names_before_the(self):
        for _ in range(200):
            cool_id = generate(Size.VERY_LONG)
            head, tail = cool_id.split("-the-", 1)
            name1, name2 = head.split("-")

            assert name1 in NAMES
            assert name2 in NAMES
            adjective1, glued_and_noun = tail.split("-and-", 1)
            assert adjective1 in ADJECTIVES
            glued, noun = glued_and_noun.split("-")
            _decompose_subject(glued, noun)

    def test_length_within_bound(self):
        for _ in range(2000):
            cool_id = generate(Size.VERY_LONG)
            assert len(cool_id.encode("utf-8")) <= Size.VERY_LONG.max_len


@pytest.mark.parametrize("size", list(Size))
@pytest.mark.parametrize("bit", [0, 1])
def test_longest_draws_stay_within_bound(size, bit, longest_word_rng):
    """Picking the longest token in every slot still fits in max_len."""
    cool_id = generate(size, longest_word_rng(bit))

    assert len(cool_id.encode("utf-8")) <= size.max_len


def test_subject_never_mixes_families():
    """A prefix from one family is never paired with a noun from the other."""
    for size in Size:
        for _ in range(300):
            parts = generate(size).split("-")
            glued, noun = parts[:2] if size is Size.SHORT else parts[-2:]
            _decompose_subject(glued, noun)


def test_branch_is_fair():
    """Animal and job subjects are equally likely despite list sizes."""
    rng = random.Random(42)
    samples = 100_000
    animals = sum(
        1 for _ in range(samples) if _branch(CoolIdGenerator.subject(rng)) == "animal"
    )

    assert len(ANIMALS) != len(JOBS)
    assert abs(animals / samples - 0.5) < 0.01


def test_names_are_drawn_uniformly():
    """Every name shows up at roughly the same rate."""
    rng = random.Random(7)
    samples = 100 * len(NAMES)
    counts = Counter(generate(Size.SHORT, rng).rsplit("-", 1)[1] for _ in range(samples))

    assert set(counts) == set(NAMES)
    assert min(counts.values()) > 50
    assert max(counts.values()) < 150


def test_adjectives_are_drawn_uniformly():
    """Every adjective shows up at roughly the same rate."""
    rng = random.Random(8)
    samples = 100 * len(ADJECTIVES)
    counts = Counter(generate(Size.LONG, rng).split("-")[2] for _ in range(samples))

    assert set(counts) == set(ADJECTIVES)
    assert min(counts.values()) > 50
    assert max(counts.values()) < 150


@pytest.mark.parametrize(
    "words, branch_nouns, position",
    [
        (ANIMAL_PREFIXES, ANIMALS, 0),
        (ANIMALS, ANIMALS, 1),
        (JOB_PREFIXES, JOBS, 0),
        (JOBS, JOBS, 1),
    ],
    ids=["animal_prefixes", "animals", "job_prefixes", "jobs"],
)
def test_subject_tokens_are_drawn_uniformly(words, branch_nouns, position):
    """Within a branch, every prefix and noun shows up at roughly the same rate."""
    rng = random.Random(9)
    counts = Counter()
    while sum(counts.values()) < 100 * len(words):
        pair = CoolIdGenerator.subject(rng).split("-")
        if pair[1] in branch_nouns:
            counts[pair[position]] += 1

    assert set(counts) == set(words)
    assert min(counts.values()) > 50
    assert max(counts.values()) < 150


def test_seeded_source_is_reproducible():
    """The same seed gives the same id."""
    for size in Size:
        assert generate(size, random.Random(99)) == generate(size, random.Random(99))


def test_accepts_size_value():
    cool_id = generate("long")

    assert "-the-" in cool_id


def test_unknown_size_raises():
    with pytest.raises(ValueError):
        generate("huge")


def test_empty_word_list_raises(monkeypatch):
    """An empty table is fatal, never a degraded id."""
    monkeypatch.setattr(CoolIdGenerator, "NAMES", ())

    with pytest.raises(WordListError):
        generate(Size.SHORT)


def test_generate_creates_unique_ids():
    """Multiple generations produce different ids (usually)."""
    cool_ids = {generate(Size.SHORT) for _ in range(10)}

    assert len(cool_ids) >= 8, "Expected mostly unique ids from 10 generations"


class TestGenerateBatch:
    """Test batch generation."""

    def test_returns_count_ids(self, rng):
        cool_ids = generate_batch(Size.LONG, 25, rng)

        assert len(cool_ids) == 25
        assert all("-the-" in cool_id for cool_id in cool_ids)

    def test_zero_count(self):
        assert generate_batch(Size.SHORT, 0) == []

    def test_negative_count_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate_batch(Size.SHORT, -1)


class TestGenerateId:
    """Test the convenience function wrapper."""

    def test_uses_configured_default_size(self, monkeypatch):
        monkeypatch.setenv("COOL_ID_GENERATOR__DEFAULT_SIZE", "very_long")

        cool_id = generate_id()

        head, _ = cool_id.split("-the-", 1)
        assert len(head.split("-")) == 2

    def test_explicit_size_wins(self, monkeypatch):
        monkeypatch.setenv("COOL_ID_GENERATOR__DEFAULT_SIZE", "very_long")

        cool_id = generate_id(Size.SHORT)

        assert "-the-" not in cool_id


class TestThreadLocalSource:
    """Test the default per-thread random source."""

    def test_each_thread_has_its_own_source(self):
        sources = {}

        def record(key):
            sources[key] = name_generator._thread_rng()

        threads = [threading.Thread(target=record, args=(i,)) for i in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(source) for source in sources.values()}) == 3

    def test_source_is_reused_within_a_thread(self):
        assert name_generator._thread_rng() is name_generator._thread_rng()

    def test_concurrent_generation(self):
        with ThreadPoolExecutor(max_workers=4) as pool:
            cool_ids = list(pool.map(lambda _: generate(Size.LONG), range(200)))

        assert len(cool_ids) == 200
        assert all(len(c.encode("utf-8")) <= Size.LONG.max_len for c in cool_ids)
