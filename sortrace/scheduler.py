# ============================================================
# ========================= SCHEDULER ========================
# ============================================================
#
# Runs several step-wise algorithms side by side.  Each tick pops and
# invokes exactly ONE continuation per still-running algorithm, in
# declaration order, so one tick == one comparison (+ possible swap)
# for every algorithm.
#
# Note that the comparable speed of the algorithms isn't perfectly
# accurate (some steps are heavier than others), but the complexity
# differences show clearly with differently sized arrays.

import logging
import random

from sortrace import algorithms
from sortrace.settings import (DEFAULT_SIZE, DEFAULT_INTERVAL_MS,
                               MAX_ELEMENTS, MAX_INTERVAL_MS)
from sortrace.stack import ContinuationStack
from sortrace.ticker import ManualTicker

log = logging.getLogger(__name__)


def valid_int(value, ceiling):
    """
    Return `value` as an int if it is an integer in [1, ceiling),
    otherwise None.  Strings of digits (form input) are accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if not isinstance(value, int):
        return None
    if 0 < value < ceiling:
        return value
    return None


class AlgorithmInstance:
    """
    One (algorithm, array, stack) triple.

    Attributes
    ----------
    id       : int               - position in the scheduler, fixed order
    name     : str               - display name
    array    : list[int]         - owned copy of the shuffled keys
    stack    : ContinuationStack - pending work; empty once sorted
    finished : bool              - set by the scheduler, exactly once per run
    """
    __slots__ = ('id', 'name', 'array', 'stack', 'finished')

    def __init__(self, id, name, array):
        self.id       = id
        self.name     = name
        self.array    = array
        self.stack    = ContinuationStack()
        self.finished = False

    def __repr__(self):
        return f"AlgorithmInstance({self.id}, {self.name!r}, finished={self.finished})"


class Scheduler:
    """
    Owns the instances, the step counter and the tick source.

    algorithms  : list of (name, entry) pairs, or None for the built-ins;
                  entry(arr, stack, i_min, i_max) must be continuation-style
    ticker      : tick source (see ticker.py); ManualTicker if None
    rng         : random source for shuffling and quicksort pivots
    on_tick     : callback(snapshot) after init and after every tick
    on_finish   : callback(name, step_counter) once per finished instance
    """

    def __init__(self, algorithms=None, size=DEFAULT_SIZE,
                 interval_ms=DEFAULT_INTERVAL_MS, ticker=None, rng=None,
                 on_tick=None, on_finish=None):
        self.rng         = rng if rng is not None else random.Random()
        self.ticker      = ticker if ticker is not None else ManualTicker()
        self.on_tick     = on_tick
        self.on_finish   = on_finish
        self.algorithms  = algorithms if algorithms is not None else self.builtin_algorithms(self.rng)
        self.size        = valid_int(size, MAX_ELEMENTS) or DEFAULT_SIZE
        self.interval_ms = valid_int(interval_ms, MAX_INTERVAL_MS) or DEFAULT_INTERVAL_MS
        self.instances   = []
        self.step_counter = 0
        self.running     = False
        self.init()

    @staticmethod
    def builtin_algorithms(rng=random, keys=None):
        keys = keys if keys is not None else [k for _, k in algorithms.ALGORITHMS]
        return [(algorithms.display_name(k), algorithms.get_entry(k, rng)) for k in keys]

    # ---------------------------------------------------------- lifecycle

    def init(self, num_elements=None):
        """Rebuild every instance from one freshly shuffled array."""
        if num_elements is not None:
            n = valid_int(num_elements, MAX_ELEMENTS)
            if n is None:
                log.debug("Ignoring element count %r, keeping %d", num_elements, self.size)
            else:
                self.size = n

        self.step_counter = 0
        base = list(range(self.size))
        algorithms.shuffle(base, 0, self.size, self.rng)

        self.instances = []
        for idx, (name, entry) in enumerate(self.algorithms):
            inst = AlgorithmInstance(idx, name, list(base))
            inst.stack.push(self._entry_call(entry, inst))
            self.instances.append(inst)
        self._notify()

    def _entry_call(self, entry, inst):
        size = self.size
        return lambda: entry(inst.array, inst.stack, 0, size)

    def start(self, interval_ms=None):
        """Start ticking every interval_ms; no-op if already running."""
        if self.running:
            return
        if interval_ms is not None:
            t = valid_int(interval_ms, MAX_INTERVAL_MS)
            if t is None:
                log.debug("Ignoring interval %r, keeping %d ms", interval_ms, self.interval_ms)
            else:
                self.interval_ms = t
        self.running = True
        self.ticker.start(self.interval_ms, self.tick)

    def stop(self):
        """Stop ticking; state is kept so start() continues where it left."""
        if not self.running:
            return
        self.ticker.stop()
        self.running = False

    def reset(self, num_elements=None):
        self.stop()
        self.init(num_elements)

    # ---------------------------------------------------------- stepping

    def tick(self):
        for inst in self.instances:
            if inst.finished:
                continue
            if not inst.stack.is_empty():
                inst.stack.pop()()
            else:
                inst.finished = True
                log.info("%s finished in %d steps.", inst.name, self.step_counter)
                if self.on_finish:
                    self.on_finish(inst.name, self.step_counter)

        if self.all_finished():
            self.stop()
        else:
            self.step_counter += 1
        self._notify()

    def all_finished(self):
        return all(inst.finished for inst in self.instances)

    def run_to_completion(self, max_ticks=None):
        """Tick synchronously until every instance is finished."""
        ticks = 0
        while not self.all_finished():
            if max_ticks is not None and ticks >= max_ticks: break
            self.tick()
            ticks += 1
        return ticks

    # ---------------------------------------------------------- presentation

    def snapshot(self):
        return dict(
            step=self.step_counter,
            running=self.running,
            size=self.size,
            instances=[
                dict(name=inst.name, array=tuple(inst.array), finished=inst.finished)
                for inst in self.instances
            ],
        )

    def _notify(self):
        if self.on_tick:
            self.on_tick(self.snapshot())
