"""Attack-path search.

A best-first search over the board graph guided by Manhattan distance to the
goal. Frontier entries carry their full path and accumulated cost; the entry
with the lowest ``cost + manhattan(pos, end)`` is expanded next, ties going to
the entry pushed first.

Two approximations are kept on purpose because reported paths and costs are
calibrated against them:

* The heuristic is not admissible once diagonal moves exist (a diagonal step
    covers two Manhattan units for one move).
* The first time a cell is popped it is finalized; later, possibly cheaper,
    entries for it are skipped.

Reaching the goal records a candidate and the search carries on until the
frontier is exhausted or ``MAX_CANDIDATE_PATHS`` candidates exist. The
cheapest candidate wins, earliest found on ties. Candidates are not
deduplicated beyond the visited set.
"""

import heapq
import math
from dataclasses import dataclass
from typing import List, Set, Tuple

from strategic_defense.components import Position, SearchResult
from strategic_defense.constants import MAX_CANDIDATE_PATHS
from strategic_defense.moves import neighbors
from strategic_defense.state import State
from strategic_defense.systems.cost import move_cost
from strategic_defense.systems.difficulty import path_difficulty
from strategic_defense.types import Path
from strategic_defense.utils.grid import manhattan_distance

# (priority, seq, position, path, cost)
FrontierEntry = Tuple[float, int, Position, Path, float]


@dataclass(frozen=True)
class SearchOutcome:
    """Everything one search run produced.

    Attributes:
        result: Selected path, or the no-path result.
        expansions: Frontier pops performed, skipped duplicates included.
        candidates: Complete paths in discovery order.
    """

    result: SearchResult
    expansions: int
    candidates: Tuple[SearchResult, ...]


def heuristic(pos: Position, target: Position) -> int:
    return manhattan_distance(pos, target)


def find_attack_path(
    state: State, max_candidates: int = MAX_CANDIDATE_PATHS
) -> SearchOutcome:
    """Search for the cheapest start->end route under the current towers.

    Args:
        state (State): Round state supplying board, towers and endpoints.
        max_candidates (int): Stop once this many complete paths are found.

    Returns:
        SearchOutcome: Selected result plus search statistics.
    """
    start, end = state.start, state.end
    frontier: List[FrontierEntry] = []
    seq = 0
    heapq.heappush(frontier, (heuristic(start, end), seq, start, (start,), 0.0))

    visited: Set[Position] = set()
    candidates: List[SearchResult] = []
    expansions = 0

    while frontier and len(candidates) < max_candidates:
        expansions += 1
        _, _, pos, path, cost = heapq.heappop(frontier)

        if pos in visited:
            continue
        visited.add(pos)

        if pos == end:
            candidates.append(
                SearchResult(
                    path=path,
                    cost=cost,
                    difficulty=path_difficulty(path, state.towers),
                )
            )
            continue

        for neighbor in neighbors(state, pos):
            if neighbor in visited:
                continue
            step_cost = move_cost(state, neighbor)
            if step_cost == math.inf:
                continue
            seq += 1
            next_cost = cost + step_cost
            heapq.heappush(
                frontier,
                (
                    next_cost + heuristic(neighbor, end),
                    seq,
                    neighbor,
                    path + (neighbor,),
                    next_cost,
                ),
            )

    return SearchOutcome(
        result=select_best(candidates),
        expansions=expansions,
        candidates=tuple(candidates),
    )


def select_best(candidates: List[SearchResult]) -> SearchResult:
    """Cheapest candidate, first found on ties; no-path result if empty."""
    if not candidates:
        return SearchResult.no_path()
    return sorted(candidates, key=lambda candidate: candidate.cost)[0]
