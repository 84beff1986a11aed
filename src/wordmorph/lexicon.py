"""Module for word list management in Word Morph."""

import re
import sys
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import TextIO

from wordmorph.config import config as wm_config

MIN_LEN = 3
MAX_LEN = 14
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

VALID_WORD_PATTERN = re.compile(r"^[a-z]+$")
"""Regex pattern for validating sanitized words (lowercase a-z only)."""


def sanitize_word(text: str) -> str:
    """Lowercase and strip `text`, returning "" unless it consists of letters a-z only."""
    if not text:
        return ""
    word = text.strip().lower()
    return word if VALID_WORD_PATTERN.match(word) else ""


def is_valid_word(word: str) -> bool:
    """Return whether `word` is an already-sanitized word of an admissible length."""
    return bool(VALID_WORD_PATTERN.match(word)) and MIN_LEN <= len(word) <= MAX_LEN


class Lexicon:
    """A set of valid words, partitioned by word length.

    Treat instances as immutable: to change the word list, build a new Lexicon.
    """

    def __init__(self, words_by_length: Mapping[int, frozenset[str]] | None = None) -> None:
        self._by_length: dict[int, frozenset[str]] = {
            length: frozenset(words) for length, words in (words_by_length or {}).items() if words
        }
        self._total = sum(len(words) for words in self._by_length.values())

    @classmethod
    def build(cls, text: str) -> "Lexicon":
        """Build a Lexicon from raw text.

        Tokens are split on whitespace, lowercased, and dropped if they contain anything
        other than a-z or fall outside [MIN_LEN, MAX_LEN].  Never fails: text without any
        valid words gives an empty Lexicon.
        """
        buckets: dict[int, set[str]] = {}
        for token in text.split():
            word = sanitize_word(token)
            if not word or not MIN_LEN <= len(word) <= MAX_LEN:
                continue
            buckets.setdefault(len(word), set()).add(word)
        return cls({length: frozenset(words) for length, words in buckets.items()})

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Lexicon":
        """Build a Lexicon from an iterable of words (same validation as `build`)."""
        return cls.build(" ".join(words))

    def words_of_length(self, length: int) -> frozenset[str]:
        """Return the words of the given length (empty if there are none)."""
        return self._by_length.get(length, frozenset())

    def contains(self, word: str) -> bool:
        """Return whether `word` is in the Lexicon."""
        return word in self._by_length.get(len(word), ())

    def total_count(self) -> int:
        """Total number of words over all lengths."""
        return self._total

    def lengths(self) -> list[int]:
        """Sorted list of lengths for which there is at least one word."""
        return sorted(self._by_length)

    def length_counts(self) -> dict[int, int]:
        """Number of words for each length in [MIN_LEN, MAX_LEN], including zeros."""
        return {
            length: len(self.words_of_length(length)) for length in range(MIN_LEN, MAX_LEN + 1)
        }

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> Iterator[str]:
        for length in self.lengths():
            yield from self._by_length[length]

    def __repr__(self) -> str:
        return f"Lexicon({self._total} words, lengths={self.lengths()})"


def load_lexicon(path: str | Path | None = None, *, out: TextIO | None = None) -> Lexicon:
    """Load a Lexicon from a word list file.

    Args:
        path: Path to the word list.  Defaults to the configured `word_list_path`.
        out: Stream for the progress message (defaults to stdout).

    Returns:
        The loaded Lexicon.
    """
    word_list_path = Path(path if path is not None else wm_config.word_list_path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    text = word_list_path.read_text(encoding="utf-8")
    lexicon = Lexicon.build(text)
    print(
        f"Loaded {lexicon.total_count():,} words from {word_list_path}",
        file=out or sys.stdout,
        flush=True,
    )
    return lexicon
