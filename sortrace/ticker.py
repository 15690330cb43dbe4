# ============================================================
# ======================= TICK SOURCES =======================
# ============================================================
#
# A tick source calls one callback periodically.  Everything stays on the
# caller's thread: the host (or a test) decides when time is checked.
#
#   start(interval_ms, callback)   no-op while already running
#   stop()                         safe when already stopped
#   running                        bool

import time


class ManualTicker:
    """Tick source for tests and headless drivers: fire() delivers one tick."""

    def __init__(self):
        self.interval_ms = None
        self.starts = 0
        self._callback = None

    @property
    def running(self):
        return self._callback is not None

    def start(self, interval_ms, callback):
        if self.running: return
        self.interval_ms = interval_ms
        self._callback = callback
        self.starts += 1

    def stop(self):
        self._callback = None

    def fire(self, times=1):
        """Deliver up to `times` ticks; returns how many were delivered."""
        n = 0
        for _ in range(times):
            if not self.running: break
            self._callback()
            n += 1
        return n


class ClockTicker:
    """
    Cooperative interval timer.

    The host calls poll() from its frame loop; one tick is delivered per
    interval that has elapsed since the previous tick, so a slow frame
    catches up instead of losing ticks.  At most `max_catchup` ticks are
    delivered per poll; a longer backlog (window drag, stalled frame) is
    dropped and the cadence restarts from now.  `clock` returns seconds.
    """

    def __init__(self, clock=time.monotonic, max_catchup=8):
        self._clock      = clock
        self.max_catchup = max_catchup
        self._callback   = None
        self._interval   = 0.0
        self._next       = 0.0

    @property
    def running(self):
        return self._callback is not None

    def start(self, interval_ms, callback):
        if self.running: return
        self._interval = interval_ms / 1000.0
        self._callback = callback
        self._next     = self._clock() + self._interval

    def stop(self):
        self._callback = None

    def poll(self):
        """Deliver the ticks that are due; returns how many were delivered."""
        fired = 0
        now = self._clock()
        while self._callback is not None and now >= self._next:
            if fired >= self.max_catchup:
                self._next = now + self._interval
                break
            self._next += self._interval
            self._callback()
            fired += 1
        return fired
