"""Position component.

Immutable integer board coordinates. Identity is by value: two ``Position``
objects with the same row and column are interchangeable as map keys and set
members.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Board coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int
