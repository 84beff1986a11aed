"""Wildcard pattern index for fast same-length substitution lookup."""

from collections import defaultdict
from collections.abc import Iterable
from threading import Lock

from wordmorph.lexicon import Lexicon

WILDCARD = "*"


def blank_patterns(word: str) -> list[str]:
    """Return the `len(word)` patterns of `word`, each with one position replaced by '*'.

    Example: "cat" -> ["*at", "c*t", "ca*"].
    """
    return [word[:i] + WILDCARD + word[i + 1 :] for i in range(len(word))]


class PatternIndex:
    """Map each blank pattern of a fixed word length to the words matching it.

    A word appears in the bucket for pattern `p` if it equals `p` everywhere except at the
    wildcard position.  Two different words share a bucket exactly when they differ at one
    position only.
    """

    def __init__(self, buckets: dict[str, list[str]] | None = None) -> None:
        self.buckets: dict[str, list[str]] = buckets or {}

    @classmethod
    def build(cls, words: Iterable[str]) -> "PatternIndex":
        """Build the index for a collection of same-length words, in O(L * |words|)."""
        buckets: defaultdict[str, list[str]] = defaultdict(list)
        for word in words:
            for pattern in blank_patterns(word):
                buckets[pattern].append(word)
        return cls(dict(buckets))  # Convert defaultdict to regular dict

    def __len__(self) -> int:
        return len(self.buckets)

    def neighbors_by_substitution(self, word: str) -> set[str]:
        """Words reachable from `word` by changing exactly one letter (excluding `word`)."""
        out: set[str] = set()
        for pattern in blank_patterns(word):
            bucket = self.buckets.get(pattern)
            if bucket:
                out.update(bucket)
        out.discard(word)
        return out


class PatternCache:
    """Lazily built, per-length PatternIndex cache bound to a single Lexicon.

    Each length is indexed at most once.  When the Lexicon changes, discard the cache and
    create a new one.
    """

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon
        self._indexes: dict[int, PatternIndex] = {}
        self._lock = Lock()

    def index_for(self, length: int) -> PatternIndex:
        """Get (building on first use) the PatternIndex for words of `length`."""
        index = self._indexes.get(length)
        if index is not None:
            return index
        with self._lock:
            # Another thread may have built it while we waited
            index = self._indexes.get(length)
            if index is None:
                index = PatternIndex.build(self.lexicon.words_of_length(length))
                self._indexes[length] = index
        return index

    def is_built(self, length: int) -> bool:
        """Return whether the index for `length` has already been built."""
        return length in self._indexes

    def clear(self) -> None:
        """Drop all built indexes."""
        with self._lock:
            self._indexes.clear()
