# game/scheduler.py
import heapq
import itertools
import time
from typing import Callable


class Scheduler:
    """
    Timer queue driven by the frame loop: call run_due() once per frame.

    Events scheduled from inside a firing event are timed from that event's
    due time, so the cadence holds even when a frame is late. Pass
    from_now=True to time from the clock instead.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue = []
        self._seq = itertools.count()
        self._firing_at = None

    def call_later(self, delay: float, fn: Callable[[], None], from_now: bool = False):
        if from_now or self._firing_at is None:
            base = self.clock()
        else:
            base = self._firing_at
        heapq.heappush(self._queue, (base + max(0.0, delay), next(self._seq), fn))

    def run_due(self) -> int:
        """Fire every event due by now, in time order. Returns how many fired."""
        now = self.clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            due, _, fn = heapq.heappop(self._queue)
            self._firing_at = due
            try:
                fn()
            finally:
                self._firing_at = None
            fired += 1
        return fired

    @property
    def pending(self) -> int:
        return len(self._queue)
