"""Utility functions for Word Morph."""


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def path_str(path: list[str]) -> str:
    """Join a word path with arrows, e.g. "cat -> cot -> dot"."""
    return " -> ".join(path)
