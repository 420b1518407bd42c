import logging
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


class WordListError(RuntimeError):
    """Raised when a word table breaks its invariants.

    An empty table or an empty token is a packaging defect, not something a
    caller can recover from, so nothing in the package catches this.
    """

    pass


class WordListValidator:
    """Validates the static word tables once at import."""

    def __init__(self, word_lists: Mapping[str, Sequence[str]]) -> None:
        self.word_lists = word_lists
        self.errors: list[str] = []

    def validate_all(self) -> None:
        """Run all word table validations."""
        for name, words in self.word_lists.items():
            self._validate_not_empty(name, words)
            self._validate_tokens(name, words)

        if self.errors:
            error_message = "Word table validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            logger.error(error_message)
            raise WordListError(error_message)

        sizes = ", ".join(
            f"{name}={len(words)}" for name, words in self.word_lists.items()
        )
        logger.debug(f"Word tables loaded: {sizes}")

    def _validate_not_empty(self, name: str, words: Sequence[str]) -> None:
        if not words:
            self.errors.append(f"{name} is empty")

    def _validate_tokens(self, name: str, words: Sequence[str]) -> None:
        for index, word in enumerate(words):
            if not isinstance(word, str) or not word:
                self.errors.append(f"{name}[{index}] is not a non-empty string")
            elif "-" in word:
                self.errors.append(f"{name}[{index}] contains a separator: {word!r}")
