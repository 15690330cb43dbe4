import itertools
import random

import pytest

from sortrace.algorithms import (ALGORITHMS, bubble_sort, display_name, get_entry,
                                 insertion_sort, quick_sort, shuffle)
from sortrace.stack import ContinuationStack, drain


def run_entry(entry, arr, i_min=0, i_max=None):
    stack = ContinuationStack()
    i_max = len(arr) if i_max is None else i_max
    stack.push(lambda: entry(arr, stack, i_min, i_max))
    return drain(stack)


@pytest.mark.parametrize("key", [k for _, k in ALGORITHMS])
def test_sorts_every_permutation(key):
    entry = get_entry(key, random.Random(7))
    for n in range(7):
        for perm in itertools.permutations(range(n)):
            arr = list(perm)
            run_entry(entry, arr)
            assert arr == list(range(n)), (key, perm)


@pytest.mark.parametrize("key", [k for _, k in ALGORITHMS])
def test_duplicates_keep_multiset(key):
    rng = random.Random(3)
    entry = get_entry(key, rng)
    for _ in range(50):
        arr = [rng.randrange(5) for _ in range(12)]
        expected = sorted(arr)
        run_entry(entry, arr)
        assert arr == expected


@pytest.mark.parametrize("key", [k for _, k in ALGORITHMS])
def test_single_element_terminates_on_first_pop(key):
    arr = [0]
    stack = ContinuationStack()
    stack.push(lambda: get_entry(key)(arr, stack, 0, 1))
    stack.pop()()
    assert stack.is_empty()
    assert arr == [0]


@pytest.mark.parametrize("key", [k for _, k in ALGORITHMS])
def test_sub_range_only(key):
    arr = [9, 8, 4, 2, 3, 1, 0, -1]
    run_entry(get_entry(key, random.Random(1)), arr, 2, 6)
    assert arr == [9, 8, 1, 2, 3, 4, 0, -1]


def test_bubble_sort_scenario_step_bound():
    arr = [3, 1, 4, 0, 2]
    stack = ContinuationStack()
    bubble_sort(arr, stack, 0, 5)
    steps = drain(stack)
    assert arr == [0, 1, 2, 3, 4]
    # the last step only notices the pass was clean
    assert steps - 1 <= 5 * 4 // 2


def test_bubble_sort_sorted_input_is_one_pass():
    arr = list(range(6))
    stack = ContinuationStack()
    bubble_sort(arr, stack, 0, 6)
    assert drain(stack) == 6


def test_insertion_sort_scenario():
    arr = [3, 1, 4, 0, 2]
    stack = ContinuationStack()
    insertion_sort(arr, stack, 0, 5)
    assert len(stack) == 1
    drain(stack)
    assert arr == [0, 1, 2, 3, 4]


def test_quick_sort_partition_steps(last_pivot):
    arr = [3, 1, 4, 0, 2]
    stack = ContinuationStack()
    quick_sort(arr, stack, 0, 5, last_pivot)

    seen = []
    while not stack.is_empty():
        stack.pop()()
        seen.append(list(arr))

    assert seen[:5] == [
        [3, 1, 4, 0, 2],
        [1, 3, 4, 0, 2],
        [1, 3, 4, 0, 2],
        [1, 0, 4, 3, 2],
        [1, 0, 2, 3, 4],
    ]
    assert arr == [0, 1, 2, 3, 4]
    # left half is partitioned before the right half
    assert last_pivot.calls == [(0, 5), (0, 2), (3, 5)]


def test_quick_sort_trivial_range_never_picks_pivot(last_pivot):
    stack = ContinuationStack()
    quick_sort([5], stack, 0, 1, last_pivot)
    quick_sort([], stack, 0, 0, last_pivot)
    assert stack.is_empty()
    assert last_pivot.calls == []


def test_shuffle_is_single_cycle():
    arr = list(range(10))
    shuffle(arr, 0, 10, random.Random(42))
    assert sorted(arr) == list(range(10))
    pos, length = 0, 0
    while True:
        pos = arr[pos]
        length += 1
        if pos == 0: break
    assert length == 10


def test_shuffle_respects_range():
    arr = list(range(8))
    shuffle(arr, 2, 6, random.Random(5))
    assert arr[:2] == [0, 1] and arr[6:] == [6, 7]
    assert sorted(arr[2:6]) == [2, 3, 4, 5]


def test_shuffle_single_element_untouched():
    arr = [0]
    shuffle(arr, 0, 1, random.Random(0))
    assert arr == [0]


def test_unknown_key():
    with pytest.raises(KeyError):
        get_entry("bogo")
    with pytest.raises(KeyError):
        display_name("bogo")


def test_display_names():
    assert [display_name(k) for _, k in ALGORITHMS] == ["Bubble sort", "Insertion sort", "Quicksort"]
