# lookup.py
# Hybrid membership test over a single bucket:
#   1. linear scan of the hot prefix (words already matched, most hits first)
#   2. binary search over the cold suffix (never matched, still sorted)
# A hit is counted with WordStore.touch, which only reorders the hot prefix,
# so the cold suffix stays sorted for later searches.

from __future__ import annotations

import logging

from adaptive_speller.core.word_store import WordStore, fold

logger = logging.getLogger(__name__)


def binary_search(store: WordStore, left: int, right: int, word: str) -> int:
    """Index of `word` in the sorted range store[left..right], or -1."""
    target = fold(word)
    while left <= right:
        middle = (left + right) // 2
        probe = store.key_at(middle)
        if probe == target:
            return middle
        if probe < target:
            left = middle + 1
        else:
            right = middle - 1
    return -1


def lookup(store: WordStore, word: str) -> bool:
    """
    True if `word` is in `store` (ASCII case-insensitive).
    On a match the word's hit count goes up and it moves toward the front.
    A miss leaves the store untouched.
    """
    target = fold(word)
    n = len(store)

    i = 0
    while i < n and store.hits_at(i) != 0:
        if store.key_at(i) == target:
            _hit(store, i, word)
            return True
        i += 1

    # every word is hot and none matched
    if i == n:
        return False

    found = binary_search(store, i, n - 1, word)
    if found < 0:
        return False
    _hit(store, found, word)
    return True


def _hit(store: WordStore, index: int, word: str) -> None:
    moved_to = store.touch(index)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "hit %r at %d -> %d (%d hits)",
            word, index, moved_to, store.hits_at(moved_to),
        )
