"""Search result component.

Holds the outcome of one attack-path analysis: the winning path (or ``None``
when every route is blocked), its accumulated traversal cost and the
difficulty score of that path.
"""

import math
from dataclasses import dataclass
from typing import Optional

from strategic_defense.constants import MAX_DIFFICULTY
from strategic_defense.types import Path


@dataclass(frozen=True)
class SearchResult:
    """Outcome of an attack-path search.

    Attributes:
        path: Cells from start to end inclusive, or ``None`` if no route exists.
        cost: Sum of move costs along ``path`` (``inf`` when there is no path).
        difficulty: Defensive pressure on ``path`` in ``[0, 100]``.
    """

    path: Optional[Path]
    cost: float
    difficulty: int

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def length(self) -> Optional[int]:
        """Number of cells on the path (start and end included)."""
        return len(self.path) if self.path is not None else None

    @classmethod
    def no_path(cls) -> "SearchResult":
        """Result reported when the defense blocks every route."""
        return cls(path=None, cost=math.inf, difficulty=MAX_DIFFICULTY)
