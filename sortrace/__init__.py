"""
SortRace - several sorting algorithms advanced one comparison at a time,
side by side, so their progress can be compared while they run.

    from sortrace import Scheduler, ClockTicker
"""

from sortrace.algorithms import (ALGORITHMS, bubble_sort, insertion_sort,
                                 quick_sort, get_entry, shuffle, swap)
from sortrace.scheduler import AlgorithmInstance, Scheduler
from sortrace.stack import ContinuationStack, drain
from sortrace.ticker import ClockTicker, ManualTicker

__version__ = "1.0.0"

__all__ = [
    "ALGORITHMS",
    "AlgorithmInstance",
    "ClockTicker",
    "ContinuationStack",
    "ManualTicker",
    "Scheduler",
    "bubble_sort",
    "drain",
    "get_entry",
    "insertion_sort",
    "quick_sort",
    "shuffle",
    "swap",
]
