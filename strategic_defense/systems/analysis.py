"""Defense analysis system.

Runs the attack-path search against the current towers and stores the
selected :class:`SearchResult` on the state. ``paths_analyzed`` is set to the
number of frontier expansions this analysis performed.

With no towers placed there is nothing to analyze; the state is returned
unchanged so the player keeps the untouched "waiting for towers" view.
"""

from dataclasses import replace

from strategic_defense.state import State
from strategic_defense.systems.search import find_attack_path
from strategic_defense.types import Phase
from strategic_defense.utils.logger import get_logger

logger = get_logger(__name__)


def analysis_system(state: State) -> State:
    """Recompute the predicted attack path (setup phase only)."""
    if state.phase != Phase.SETUP or len(state.towers) == 0:
        return replace(state, analyzing=False) if state.analyzing else state

    outcome = find_attack_path(state)
    result = outcome.result
    logger.debug(
        "Analysis: %d expansions, %d candidates, cost=%s, difficulty=%d",
        outcome.expansions,
        len(outcome.candidates),
        result.cost,
        result.difficulty,
    )

    if result.found:
        message = "Optimal route found"
    else:
        message = "Perfect defense! All routes blocked"

    return replace(
        state,
        analyzing=False,
        paths_analyzed=outcome.expansions,
        result=result,
        message=message,
    )
