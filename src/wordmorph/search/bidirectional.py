"""Bounded bidirectional breadth-first search over the word graph.

The search grows one tree from the start word and one from the target word, always
expanding the side with the smaller frontier by one full level.  A neighbor is pruned when
even the optimistic estimate `g(v) + h(v)` exceeds the move cap (branch and bound, not A*),
and a hard ceiling on the number of discovered states guarantees termination.

The search is a pure function of its arguments: no I/O, no shared state.
"""

from collections.abc import Callable, Collection
from dataclasses import dataclass, field

from wordmorph.errors import SearchExceeded
from wordmorph.search.heuristic import lower_bound

DEFAULT_EXPANSION_CEILING = 200_000

NeighborFn = Callable[[str], Collection[str]]
Heuristic = Callable[[str, str], int]
Path = list[str]


@dataclass
class _Frontier:
    """Search state for one side of the bidirectional search."""

    root: str
    """Start word (left side) or target word (right side)."""

    depth: dict[str, int] = field(default_factory=dict)
    """Distance from `root` of every word discovered on this side."""

    prev: dict[str, str] = field(default_factory=dict)
    """Predecessor of each discovered word (towards `root`)."""

    level: list[str] = field(default_factory=list)
    """Words discovered in the most recent expansion step, in discovery order."""

    def __post_init__(self) -> None:
        self.depth[self.root] = 0
        self.level.append(self.root)

    def min_depth(self) -> int:
        return min(self.depth[word] for word in self.level)


@dataclass
class _Budget:
    """Counter of newly discovered states, shared by both sides."""

    ceiling: int
    spent: int = 0

    def spend(self) -> None:
        self.spent += 1
        if self.spent > self.ceiling:
            raise SearchExceeded(self.spent, self.ceiling)


def _is_pruned(
    g: int, word: str, other: _Frontier, move_cap: int, heuristic: Heuristic
) -> bool:
    """Whether `word`, reached in `g` moves, cannot reach the opposite root within the cap."""
    return g + heuristic(word, other.root) > move_cap


def _meeting_point(word: str, this: _Frontier, other: _Frontier, move_cap: int) -> bool:
    """Whether `word` joins the two trees into a path no longer than the cap."""
    other_depth = other.depth.get(word)
    return other_depth is not None and this.depth[word] + other_depth <= move_cap


def _expand_step(
    this: _Frontier,
    other: _Frontier,
    neighbor_fn: NeighborFn,
    move_cap: int,
    budget: _Budget,
    heuristic: Heuristic,
) -> str | None:
    """Expand every word in `this.level` by one move.

    Replaces `this.level` with the newly discovered words.

    Returns:
        The meeting word if the two trees met, else None.
    """
    next_level: list[str] = []
    for u in this.level:
        g = this.depth[u] + 1
        for v in neighbor_fn(u):
            if v in this.depth or _is_pruned(g, v, other, move_cap, heuristic):
                continue
            this.depth[v] = g
            this.prev[v] = u
            next_level.append(v)
            budget.spend()
            if _meeting_point(v, this, other, move_cap):
                return v
    this.level = next_level
    return None


def _reconstruct(meet: str, left: _Frontier, right: _Frontier) -> Path:
    """Join the start->meet chain of `left` with the meet->target chain of `right`."""
    head = [meet]
    while head[-1] != left.root:
        head.append(left.prev[head[-1]])
    head.reverse()

    tail: Path = []
    cur = meet
    while cur != right.root:
        cur = right.prev[cur]
        tail.append(cur)
    return head + tail


def search(
    start: str,
    target: str,
    neighbor_fn: NeighborFn,
    move_cap: int,
    expansion_ceiling: int = DEFAULT_EXPANSION_CEILING,
    heuristic: Heuristic = lower_bound,
) -> Path | None:
    """Find a shortest path of at most `move_cap` moves from `start` to `target`.

    Args:
        start: Start word.
        target: Target word.
        neighbor_fn: Function returning the legal next words of a word.  The graph is
            assumed to be undirected (true for both edit modes).
        move_cap: Maximum number of moves allowed (must be >= 0).
        expansion_ceiling: Maximum number of states to discover before giving up.
        heuristic: Lower bound on the moves between two words, used for pruning.  Must
            never over-estimate under the edit mode of `neighbor_fn` (use
            `flex_lower_bound` when insertions and deletions are allowed).

    Returns:
        A shortest path `[start, ..., target]`, or None if no path of at most `move_cap`
        moves exists.

    Raises:
        SearchExceeded: If more than `expansion_ceiling` states were discovered before
            the search could reach a definite answer.
    """
    if move_cap < 0:
        raise ValueError(f"move_cap must be non-negative, got {move_cap}")
    if start == target:
        return [start]
    if heuristic(start, target) > move_cap:
        return None

    left = _Frontier(start)
    right = _Frontier(target)
    budget = _Budget(expansion_ceiling)

    while left.level and right.level:
        # Expand the smaller side, keeping the two trees balanced
        if len(left.level) <= len(right.level):
            meet = _expand_step(left, right, neighbor_fn, move_cap, budget, heuristic)
        else:
            meet = _expand_step(right, left, neighbor_fn, move_cap, budget, heuristic)
        if meet is not None:
            return _reconstruct(meet, left, right)

        if not (left.level and right.level):
            break
        if left.min_depth() + right.min_depth() > move_cap:
            return None

    return None
