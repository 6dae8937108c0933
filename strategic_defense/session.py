"""Round driver with paced feedback.

:class:`GameSession` owns the current :class:`State` for one player and turns
the three player inputs (place tower, start battle, reset) into reducer calls.
Between reducer calls it waits on an injected :class:`Scheduler` so the front
end can show a "thinking" indicator before an analysis result and animate the
battle one cell at a time.

Every round-altering call holds the session lock from its phase check to its
final state swap, so a placement can never interleave with a running battle
even when the front end dispatches from several threads. Listeners are
notified with each intermediate snapshot while the lock is held; they must
not call back into the session.
"""

import threading
from typing import Callable, List, Optional

from strategic_defense.actions import AdvanceBattle, Reset, StartBattle
from strategic_defense.board import new_round
from strategic_defense.components import Position
from strategic_defense.constants import ANALYSIS_DELAY, BATTLE_STEP_DELAY
from strategic_defense.scheduler import Scheduler, SleepScheduler
from strategic_defense.state import State
from strategic_defense.step import step
from strategic_defense.systems.analysis import analysis_system
from strategic_defense.systems.battle import can_start_battle
from strategic_defense.systems.placement import place_tower_system
from strategic_defense.types import Phase
from strategic_defense.utils.grid import can_place_tower
from strategic_defense.utils.logger import get_logger

logger = get_logger(__name__)

Listener = Callable[[State], None]


class GameSession:
    scheduler: Scheduler
    listeners: List[Listener]

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        state: Optional[State] = None,
        analysis_delay: float = ANALYSIS_DELAY,
        battle_step_delay: float = BATTLE_STEP_DELAY,
    ):
        self.scheduler = scheduler or SleepScheduler()
        self.listeners = []
        self.analysis_delay = analysis_delay
        self.battle_step_delay = battle_step_delay
        self._state = state if state is not None else new_round()
        self._lock = threading.Lock()

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def can_place_tower(self, pos: Position) -> bool:
        return can_place_tower(self._state, pos)

    def can_start_battle(self) -> bool:
        return can_start_battle(self._state)

    def place_tower(self, pos: Position) -> State:
        """Place a tower, pause for the analysis delay, then reveal the analysis.

        Invalid placements are ignored and return the current state.
        """
        with self._lock:
            placed = place_tower_system(self._state, pos)
            if placed is self._state:
                return self._state
            logger.info("Tower placed at (%d, %d)", pos.row, pos.col)
            self._publish(placed)
            self.scheduler.wait(self.analysis_delay)
            self._publish(analysis_system(placed))
            return self._state

    def start_battle(self) -> State:
        """Run the whole battle replay, one token move per battle step delay."""
        with self._lock:
            started = step(self._state, StartBattle())
            if started is self._state:
                return self._state
            self._publish(started)
            while self._state.phase == Phase.BATTLE:
                advanced = step(self._state, AdvanceBattle())
                self._publish(advanced)
                if advanced.phase == Phase.BATTLE:
                    self.scheduler.wait(self.battle_step_delay)
            return self._state

    def reset(self) -> State:
        with self._lock:
            self._publish(step(self._state, Reset()))
            return self._state

    def _publish(self, state: State) -> None:
        self._state = state
        for listener in self.listeners:
            listener(state)
