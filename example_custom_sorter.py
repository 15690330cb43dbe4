# ============================================================
# SortRace - Custom Sorter Template
# ============================================================
#
# Rules:
#   1. Define a function called  sort(arr, stack, i_min, i_max)
#   2. It must NOT sort in a loop.  Push a zero-argument callable onto
#      `stack` instead; each call does ONE comparison (+ optional swap)
#      and pushes whatever work is left.  Push nothing when done.
#   3. Mutate `arr` in-place - do NOT return a new list.
#   4. Optionally set NAME = "My Algorithm"  (used as display name)
#
# Run it with:  python -m sortrace --sorter example_custom_sorter.py
# ============================================================

NAME = "Gnome sort"   # <-- change this to whatever you like


def sort(arr, stack, i_min, i_max):
    """Gnome Sort - O(n^2) - walks back after every swap, like insertion sort."""
    i = i_min + 1

    def step():
        nonlocal i
        if i >= i_max:
            return
        if i == i_min or arr[i] >= arr[i-1]:
            i += 1
        else:
            arr[i], arr[i-1] = arr[i-1], arr[i]
            i -= 1
        stack.push(step)

    if i_max - i_min > 1:
        stack.push(step)
