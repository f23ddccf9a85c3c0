"""Frame timing for the interactive loop."""

from __future__ import annotations

import logging
import time
from typing import Callable


logger = logging.getLogger(__name__)


class FrameClock:
    """Wall-clock delta between ticks, clamped to ``max_dt`` seconds.

    The clamp keeps a stalled frame (a hidden window, a debugger pause) from
    turning into one huge integration step.
    """

    def __init__(
        self,
        max_dt: float = 0.1,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if max_dt <= 0.0:
            raise ValueError("max_dt must be > 0")
        self.max_dt = float(max_dt)
        self._clock = clock
        self._last = clock()

    def restart(self) -> None:
        self._last = self._clock()

    def tick(self) -> float:
        now = self._clock()
        elapsed = now - self._last
        self._last = now
        if elapsed > self.max_dt:
            logger.debug("frame delta %.3fs clamped to %.3fs", elapsed, self.max_dt)
            return self.max_dt
        return max(elapsed, 0.0)
