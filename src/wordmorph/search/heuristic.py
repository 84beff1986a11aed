"""Lower bounds on the number of moves between two words."""

from collections import Counter


def lower_bound(a: str, b: str) -> int:
    """Return a cheap lower bound on the edit distance between `a` and `b`.

    For equal lengths this is the Hamming distance, the exact number of substitutions
    needed without dictionary constraints.  For different lengths it is the length
    difference, since every insertion or deletion changes the length by one.
    """
    if len(a) == len(b):
        return sum(1 for x, y in zip(a, b) if x != y)
    return abs(len(a) - len(b))


def flex_lower_bound(a: str, b: str) -> int:
    """Return a lower bound on the edit distance that also holds with insertions/deletions.

    Hamming distance over-estimates when letters can shift position ("abcd" -> "bcd" ->
    "bcda" is two moves apart, Hamming distance four).  Instead count the letters `a` has
    in excess of `b` and those it lacks: one move removes at most one excess letter and
    supplies at most one missing letter.  Never less than the length difference.
    """
    excess = Counter(a)
    excess.subtract(b)
    extra = sum(n for n in excess.values() if n > 0)
    missing = -sum(n for n in excess.values() if n < 0)
    return max(extra, missing)
