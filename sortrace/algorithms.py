# ============================================================
# ================ STEP-WISE SORTING ALGORITHMS ==============
# ============================================================
#
# Format of an algorithm entry point:
#
#     def my_sort(arr, stack, i_min, i_max): ...
#
#   - sorts the half-open range arr[i_min:i_max] in place
#   - must NOT loop over the array: it pushes a continuation onto
#     `stack` and returns; each continuation does ONE comparison
#     (+ optional swap) and re-pushes itself (or follow-on work)
#     until nothing is left to do
#   - progress variables live in the enclosing closure (nonlocal),
#     never in a native call frame that would have to survive a return
#
# To add a new algorithm: write the entry function, then add it to
# ALGORITHMS and to the table in get_entry().

import functools
import random

ALGORITHMS = [
    ("Bubble sort",    "bubble"),
    ("Insertion sort", "insertion"),
    ("Quicksort",      "quick"),
]

# key -> {"fn": entry, "name": display name, "path": source file}
_custom_sorters: dict = {}


def swap(arr, i, j):
    arr[i], arr[j] = arr[j], arr[i]


def shuffle(arr, lo, hi, rng=random):
    """
    Shuffle arr[lo:hi] in place.

    j is drawn from [lo, i), never i itself, so every element is moved
    (Sattolo's variant: the result is always a single cycle).
    """
    for i in range(hi - 1, lo, -1):
        j = int(rng.random() * (i - lo)) + lo
        swap(arr, i, j)


def bubble_sort(arr, stack, i_min, i_max):
    """
    Bubble sort.
      O(n^2) worst case and average steps, O(n) best case.
    Each pass stops at the position of the last swap of the previous pass.
    """
    if i_max - i_min <= 1:
        return
    i = i_min
    last = i_max - 1
    new_max = i_min

    def next_step():
        nonlocal i, last, new_max
        if i == last:
            last = new_max
            new_max = i_min
            if last <= i_min:
                return
            i = i_min
        if arr[i] > arr[i+1]:
            swap(arr, i, i+1)
            new_max = i
        i += 1
        stack.push(next_step)

    stack.push(next_step)


def insertion_sort(arr, stack, i_min, i_max):
    """
    Insertion sort; somewhat faster than bubble sort in general.
      O(n^2) worst case and average steps, O(n) best case.
    `marker` is the last index of the sorted prefix; `i` walks the newest
    element leftwards one swap per step.
    """
    if i_max - i_min <= 1:
        return
    i = i_min
    marker = i_min

    def next_step():
        nonlocal i, marker
        if i == i_max - 1:
            return
        if i < i_min:
            i = marker
        if arr[i] > arr[i+1]:
            swap(arr, i, i+1)
            i -= 1
        else:
            marker += 1
            i = marker
        stack.push(next_step)

    stack.push(next_step)


def quick_sort(arr, stack, i_min, i_max, rng=random):
    """
    Quicksort with a random pivot and a one-comparison-per-step partition.
      O(n log n) average steps, O(n^2) worst case.

    Recursive calls are not made directly: once the partition is done the
    two halves are pushed as new entry invocations, right half first so
    the left half is popped (and sorted) first.
    """
    if i_max - i_min <= 1:
        return

    # Random pivot, parked in the last slot for the whole partition.
    pivot = rng.randrange(i_min, i_max)
    swap(arr, pivot, i_max - 1)
    pivot = i_max - 1

    i = i_min
    marker = i_min

    def next_step():
        nonlocal i, marker
        if i == pivot:
            swap(arr, marker, pivot)
            m = marker
            stack.push(lambda: quick_sort(arr, stack, m + 1, i_max, rng))
            stack.push(lambda: quick_sort(arr, stack, i_min, m, rng))
            return
        if arr[i] < arr[pivot]:
            swap(arr, i, marker)
            marker += 1
        i += 1
        stack.push(next_step)

    stack.push(next_step)


def register_custom(key, fn, name, path=None):
    _custom_sorters[key] = {"fn": fn, "name": name, "path": path}


def custom_sorters():
    return dict(_custom_sorters)


def get_entry(key, rng=random):
    """Return the entry point for `key` as entry(arr, stack, i_min, i_max)."""
    builtins = {
        "bubble":    bubble_sort,
        "insertion": insertion_sort,
        "quick":     functools.partial(quick_sort, rng=rng),
    }
    if key in builtins: return builtins[key]
    if key in _custom_sorters: return _custom_sorters[key]["fn"]
    raise KeyError(f"Unknown key: {key}")


def display_name(key):
    for nm, ky in ALGORITHMS:
        if ky == key: return nm
    if key in _custom_sorters: return _custom_sorters[key]["name"]
    raise KeyError(f"Unknown key: {key}")
