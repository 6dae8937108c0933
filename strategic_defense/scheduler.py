"""Pacing schedulers.

The round driver never sleeps directly; it asks an injected :class:`Scheduler`
to wait. Interactive front ends use :class:`SleepScheduler`; tests use
:class:`ImmediateScheduler`, which returns at once and records every request.
"""

import time
from typing import List, Protocol


class Scheduler(Protocol):
    def wait(self, seconds: float) -> None: ...


class SleepScheduler:
    """Block the calling thread for the requested duration."""

    def wait(self, seconds: float) -> None:
        time.sleep(seconds)


class ImmediateScheduler:
    """Return immediately, keeping a log of requested delays."""

    waits: List[float]

    def __init__(self) -> None:
        self.waits = []

    def wait(self, seconds: float) -> None:
        self.waits.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.waits)
