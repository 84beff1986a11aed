"""Shared fixtures and brute-force reference implementations."""

from collections import deque
from itertools import product

import pytest

from wordmorph.lexicon import Lexicon
from wordmorph.neighbors import EditMode, NeighborGenerator


def bfs_distance(start: str, target: str, neighbor_fn) -> int | None:
    """Exact shortest number of moves by plain one-sided BFS (None if unreachable)."""
    if start == target:
        return 0
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        word, dist = queue.popleft()
        for nxt in neighbor_fn(word):
            if nxt == target:
                return dist + 1
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, dist + 1))
    return None


def levenshtein(a: str, b: str) -> int:
    """Unconstrained edit distance (insert/delete/substitute)."""
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            cur.append(min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + (ca != cb)))
        prev = cur
    return prev[-1]


def all_words(alphabet: str, lengths: range) -> list[str]:
    return ["".join(p) for n in lengths for p in product(alphabet, repeat=n)]


def assert_legal_path(path, start, target, generator: NeighborGenerator, mode: EditMode):
    assert path[0] == start
    assert path[-1] == target
    for word in path:
        assert generator.lexicon.contains(word)
    for a, b in zip(path, path[1:]):
        assert b in generator.neighbors(a, mode), f"{a} -> {b} is not a legal move"


@pytest.fixture
def ladder_lexicon() -> Lexicon:
    return Lexicon.build("cat cot cog dog dot")


@pytest.fixture
def small_lexicon() -> Lexicon:
    return Lexicon.build(
        """
        cat cot cog dog dot bat bag big bog hat hot hog
        cats cots dots dogs bats coat boat
        cold cord card ward warm word worm wore core
        """
    )


@pytest.fixture
def small_generator(small_lexicon) -> NeighborGenerator:
    return NeighborGenerator(small_lexicon)
