"""Word-graph search: heuristic lower bounds and bounded bidirectional search."""

from wordmorph.search.bidirectional import search
from wordmorph.search.heuristic import flex_lower_bound, lower_bound

__all__ = ["flex_lower_bound", "lower_bound", "search"]
