# sorter.py
# Case-insensitive quicksort over a WordStore.
# Leftmost element is the pivot; the partition loop below is kept exactly as is
# (first cursor move is unconditional) since swap counts depend on it.
# Uses an explicit stack instead of recursion: dictionary files are often
# already sorted, which drives a leftmost-pivot quicksort to depth n.

from __future__ import annotations

from typing import List, Optional, Tuple

from adaptive_speller.core.word_store import WordStore


def partition(store: WordStore, left: int, right: int) -> Tuple[int, int]:
    """
    Place store[left] at its final sorted position within [left, right].
    Everything before it compares <= the pivot, everything after >=.
    Returns (pivot_index, swaps) where swaps counts real exchanges.
    """
    key = store.key_at
    pivot = left
    i = left
    j = right
    swaps = 0

    while True:
        i += 1
        while i < j and key(i) < key(pivot):
            i += 1

        while key(pivot) < key(j):
            j -= 1

        if i < j:
            swaps += store.swap(i, j)
            j -= 1

        if not i < j:
            break

    swaps += store.swap(left, j)
    return j, swaps


def quicksort(store: WordStore, left: int = 0, right: Optional[int] = None) -> int:
    """
    Sort store[left..right] (inclusive) ascending by case-insensitive key.
    `right` defaults to the last word. Returns the number of swaps made.
    Not stable: equal keys may end up in any relative order.
    """
    if right is None:
        right = len(store) - 1

    swaps = 0
    stack: List[Tuple[int, int]] = [(left, right)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        p, n = partition(store, lo, hi)
        swaps += n
        stack.append((p + 1, hi))
        stack.append((lo, p - 1))
    return swaps
