# word_store.py
# Growable per-letter word list with parallel hit counters.
# Words that get matched move toward the front ("hot" prefix, most hits first);
# everything after the first zero-hit slot stays alphabetically sorted ("cold").

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from adaptive_speller.errors import FatalAllocationError

logger = logging.getLogger(__name__)

Word = str
HitCount = int
HotEntry = Tuple[Word, HitCount]

DEFAULT_CAPACITY = 2
GROWTH_FACTOR = 2

# ASCII-only case folding; every other character compares by code point
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def fold(word: Word) -> str:
    """Comparison key for case-insensitive ordering (A-Z only)."""
    return word.translate(_ASCII_LOWER)


class WordStore:
    """
    Order-preserving word container with one hit counter per word.

    Storage is reserved up front (`capacity`) and grows geometrically when
    full. Three parallel slots move together on every swap:
      - _words: the stored words as given
      - _keys: their folded comparison keys
      - _hits: int64 hit counters
    Invariant: the prefix up to the first zero hit count is non-increasing.
    """

    __slots__ = ("_words", "_keys", "_hits", "_count", "_growth")

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY,
                 growth_factor: int = GROWTH_FACTOR) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        if growth_factor < 2:
            raise ValueError("growth_factor must be at least 2")
        self._growth = growth_factor
        self._count = 0
        try:
            self._words: List[Optional[Word]] = [None] * initial_capacity
            self._keys: List[Optional[str]] = [None] * initial_capacity
            self._hits = np.zeros(initial_capacity, dtype=np.int64)
        except MemoryError as e:
            raise FatalAllocationError(
                "Memory allocation error while creating a word store."
            ) from e

    # size/capacity ------------------------------------------------------
    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Word]:
        for i in range(self._count):
            yield self._words[i]

    def __repr__(self) -> str:
        return f"WordStore(count={self._count}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return len(self._words)

    # insertion ---------------------------------------------------------
    def append(self, word: Word) -> None:
        """Place `word` at the end with a zero hit count, growing if full."""
        if self._count == self.capacity:
            self._grow()
        self._words[self._count] = word
        self._keys[self._count] = fold(word)
        self._hits[self._count] = 0
        self._count += 1

    def _grow(self) -> None:
        old = self.capacity
        new = old * self._growth
        try:
            extra = new - old
            self._words.extend([None] * extra)
            self._keys.extend([None] * extra)
            self._hits = np.concatenate(
                (self._hits, np.zeros(extra, dtype=np.int64))
            )
        except MemoryError as e:
            raise FatalAllocationError(
                "Memory allocation error while adding an element to the word store. "
                f"(Couldn't extend the capacity to {new} words)"
            ) from e
        logger.debug("word store grew %d -> %d", old, new)

    # element access -----------------------------------------------------
    def _check(self, i: int) -> int:
        if not 0 <= i < self._count:
            raise IndexError(f"index {i} out of range for {self._count} words")
        return i

    def word_at(self, i: int) -> Word:
        return self._words[self._check(i)]

    def key_at(self, i: int) -> str:
        return self._keys[self._check(i)]

    def hits_at(self, i: int) -> HitCount:
        return int(self._hits[self._check(i)])

    def words(self) -> List[Word]:
        """Snapshot of the stored words in current order."""
        return self._words[:self._count]

    def hit_counts(self) -> List[HitCount]:
        """Snapshot of the hit counters in current order."""
        return self._hits[:self._count].tolist()

    # reordering ---------------------------------------------------------
    def swap(self, i: int, j: int) -> bool:
        """Exchange two positions (word, key and hits). Returns False for i == j."""
        self._check(i)
        self._check(j)
        if i == j:
            return False
        w, k = self._words, self._keys
        w[i], w[j] = w[j], w[i]
        k[i], k[j] = k[j], k[i]
        h = self._hits
        h[i], h[j] = h[j], h[i]
        return True

    def touch(self, i: int) -> int:
        """
        Count a hit on position `i` and move the word left past every
        neighbour with fewer hits. Returns the word's new position.
        """
        self._check(i)
        h = self._hits
        h[i] += 1
        while i > 0 and h[i] > h[i - 1]:
            self.swap(i, i - 1)
            i -= 1
        return i

    # hot region -----------------------------------------------------------
    def hot_boundary(self) -> int:
        """Index of the first zero-hit word (== len(self) when every word is hot)."""
        i = 0
        h = self._hits
        while i < self._count and h[i] != 0:
            i += 1
        return i

    def most_accessed(self) -> List[HotEntry]:
        """(word, hits) for the hot prefix, most hits first. Empty if nothing was hit."""
        return [
            (self._words[i], int(self._hits[i]))
            for i in range(self.hot_boundary())
        ]
