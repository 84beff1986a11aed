"""Generation of legal next words under the two edit modes."""

from collections.abc import Callable, Collection
from enum import Enum

from sortedcontainers import SortedSet

from wordmorph.config import config as wm_config
from wordmorph.lexicon import ALPHABET, Lexicon
from wordmorph.patterns import PatternCache
from wordmorph.search.heuristic import flex_lower_bound, lower_bound

NeighborFn = Callable[[str], Collection[str]]
Heuristic = Callable[[str, str], int]


class EditMode(str, Enum):
    """Enumeration of edit models."""

    CLASSIC = "classic"
    """Substitution only, so word length is fixed."""

    FLEX = "flex"
    """Substitution, insertion and deletion, so length changes by at most one per move."""

    @classmethod
    def parse(cls, value: "str | EditMode") -> "EditMode":
        """Convert a (case-insensitive) string to an EditMode."""
        if isinstance(value, EditMode):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid edit mode: {value!r}") from None

    @property
    def heuristic(self) -> Heuristic:
        """Admissible lower bound for pruning searches under this mode."""
        return lower_bound if self is EditMode.CLASSIC else flex_lower_bound


class NeighborGenerator:
    """Produce the set of dictionary words one move away from a given word.

    Has no state beyond the Lexicon and its (lazily built) PatternCache.
    """

    def __init__(self, lexicon: Lexicon, patterns: PatternCache | None = None) -> None:
        if patterns is not None and patterns.lexicon is not lexicon:
            raise ValueError("PatternCache was built for a different Lexicon.")
        self.lexicon = lexicon
        self.patterns = patterns if patterns is not None else PatternCache(lexicon)

    def substitutions(self, word: str) -> set[str]:
        """Same-length words differing from `word` at exactly one position."""
        return self.patterns.index_for(len(word)).neighbors_by_substitution(word)

    def insertions(self, word: str) -> set[str]:
        """Words formed by inserting one letter anywhere in `word`."""
        longer = self.lexicon.words_of_length(len(word) + 1)
        if not longer:
            return set()
        out: set[str] = set()
        for i in range(len(word) + 1):
            head, tail = word[:i], word[i:]
            for ch in ALPHABET:
                candidate = head + ch + tail
                if candidate in longer:
                    out.add(candidate)
        return out

    def deletions(self, word: str) -> set[str]:
        """Words formed by deleting one letter from `word`."""
        shorter = self.lexicon.words_of_length(len(word) - 1)
        if not shorter:
            return set()
        return {word[:i] + word[i + 1 :] for i in range(len(word))} & shorter

    def neighbors(self, word: str, mode: EditMode = EditMode.CLASSIC) -> set[str]:
        """All legal next words from `word` under `mode`.  Never contains `word` itself."""
        out = self.substitutions(word)
        if mode == EditMode.FLEX:
            out |= self.insertions(word)
            out |= self.deletions(word)
        return out

    def neighbor_fn(self, mode: EditMode, *, deterministic: bool | None = None) -> NeighborFn:
        """Bind `mode` into a single-argument neighbor function for the search.

        Args:
            mode: Edit mode to use.
            deterministic: Whether to return sorted neighbor sets (so that repeated searches
                visit words in the same order).  Defaults to the configured value.
        """
        if deterministic is None:
            deterministic = wm_config.deterministic

        if deterministic:

            def sorted_neighbors(word: str) -> Collection[str]:
                return SortedSet(self.neighbors(word, mode))

            return sorted_neighbors

        def unsorted_neighbors(word: str) -> Collection[str]:
            return self.neighbors(word, mode)

        return unsorted_neighbors

    def is_legal_move(self, current: str, nxt: str, mode: EditMode) -> bool:
        """Return whether moving from `current` to `nxt` is one legal edit under `mode`."""
        if not self.lexicon.contains(nxt):
            return False
        return nxt in self.neighbors(current, mode)
