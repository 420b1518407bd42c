import os
import random

import pytest
from cool_id.core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep stray environment, .env and TOML files out of the settings."""
    for key in list(os.environ):
        if key.upper().startswith("COOL_ID_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


class LongestWordRandom:
    """Random source that always picks the longest token."""

    def __init__(self, bit: int) -> None:
        self.bit = bit

    def choice(self, seq):
        return max(seq, key=len)

    def getrandbits(self, k: int) -> int:
        return self.bit


@pytest.fixture
def longest_word_rng():
    return LongestWordRandom
