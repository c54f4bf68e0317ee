# dictionary.py
# 26 per-letter buckets (a..z, case-insensitive), each a WordStore created
# on the first word for that letter.

from __future__ import annotations

import logging
import string
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from adaptive_speller.core.lookup import lookup
from adaptive_speller.core.sorter import quicksort
from adaptive_speller.core.word_store import (
    DEFAULT_CAPACITY,
    GROWTH_FACTOR,
    WordStore,
)

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26
LETTERS = string.ascii_lowercase


def bucket_index(word: str) -> Optional[int]:
    """
    Bucket for `word` from its first character: 0 for a/A .. 25 for z/Z.
    None for an empty word or one that does not start with an ASCII letter.
    """
    if not word:
        return None
    o = ord(word[0])
    if 97 <= o <= 122:  # 'a'..'z'
        return o - 97
    if 65 <= o <= 90:  # 'A'..'Z'
        return o - 65
    return None


class Dictionary:
    """
    Word list split into per-letter WordStores.

    Build with add()/from_tokens(), call sort() once, then check() words.
    check() reorders the matching bucket as a side effect.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY,
                 growth_factor: int = GROWTH_FACTOR) -> None:
        self.initial_capacity = initial_capacity
        self.growth_factor = growth_factor
        self._slots: List[Optional[WordStore]] = [None] * ALPHABET_SIZE
        self.skipped = 0

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], **kwargs) -> "Dictionary":
        """Build a dictionary from a (lazy) token sequence; empty tokens are ignored."""
        d = cls(**kwargs)
        for tok in tokens:
            if tok:
                d.add(tok)
        return d

    # building ----------------------------------------------------------
    def add(self, word: str) -> bool:
        """Append `word` to its bucket. Returns False if it has no bucket."""
        if not word:
            return False
        idx = bucket_index(word)
        if idx is None:
            self.skipped += 1
            logger.warning("skipping dictionary word %r: no letter bucket", word)
            return False
        store = self._slots[idx]
        if store is None:
            store = WordStore(self.initial_capacity, self.growth_factor)
            self._slots[idx] = store
            logger.debug("created bucket %r", LETTERS[idx])
        store.append(word)
        return True

    def sort(self) -> int:
        """Sort every present bucket alphabetically. Returns total swaps."""
        total = 0
        for letter, store in self.buckets():
            swaps = quicksort(store)
            logger.debug("sorted bucket %r: %d words, %d swaps", letter, len(store), swaps)
            total += swaps
        return total

    # access ------------------------------------------------------------
    def bucket(self, key: Union[int, str]) -> Optional[WordStore]:
        """Bucket by index (0-25) or letter (either case)."""
        if isinstance(key, str):
            idx = bucket_index(key)
            if idx is None or len(key) != 1:
                raise KeyError(key)
            return self._slots[idx]
        if not 0 <= key < ALPHABET_SIZE:
            raise KeyError(key)
        return self._slots[key]

    def bucket_for(self, word: str) -> Optional[WordStore]:
        """The bucket `word` would be searched in, or None."""
        idx = bucket_index(word)
        if idx is None:
            return None
        return self._slots[idx]

    def buckets(self) -> Iterator[Tuple[str, WordStore]]:
        """(letter, store) for every present bucket, a to z."""
        for idx, store in enumerate(self._slots):
            if store is not None:
                yield LETTERS[idx], store

    def bucket_count(self) -> int:
        return sum(1 for s in self._slots if s is not None)

    def __len__(self) -> int:
        return sum(len(s) for s in self._slots if s is not None)

    # query -------------------------------------------------------------
    def check(self, word: str) -> bool:
        """True if `word` is in the dictionary. Counts the hit on success."""
        store = self.bucket_for(word)
        if store is None:
            return False
        return lookup(store, word)
