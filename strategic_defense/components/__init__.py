"""Value objects shared across the engine.

Both classes are frozen dataclasses with no behavior beyond their fields, so
they can live inside persistent maps / sets and be compared by value::

    from strategic_defense.components import Position, SearchResult
"""

from .position import Position
from .search_result import SearchResult

__all__ = ["Position", "SearchResult"]
