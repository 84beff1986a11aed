"""Exceptions raised by Word Morph."""


class WordMorphError(Exception):
    """Base class for Word Morph errors."""


class InvalidWord(WordMorphError, ValueError):
    """A word failed the alphabet/length/dictionary checks."""


class SearchExceeded(WordMorphError):
    """The search discovered more states than allowed before reaching an answer.

    This does not mean that no path exists, only that the search gave up.
    """

    def __init__(self, expanded: int, ceiling: int) -> None:
        super().__init__(f"Search exceeded {ceiling:,} states (discovered {expanded:,}).")
        self.expanded = expanded
        self.ceiling = ceiling
