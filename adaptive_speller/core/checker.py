# checker.py - run a token stream against a sorted Dictionary

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from adaptive_speller.core.dictionary import Dictionary
from adaptive_speller.core.lookup import lookup
from adaptive_speller.core.word_store import WordStore


@dataclass(frozen=True)
class CheckResult:
    """One checked token. `position` is 1-based over all tokens read."""
    position: int
    word: str
    found: bool


@dataclass
class CheckSummary:
    checked: int = 0
    misspelled: int = 0

    def record(self, result: CheckResult) -> None:
        self.checked += 1
        if not result.found:
            self.misspelled += 1


HitHook = Callable[[CheckResult, WordStore], None]


def check_tokens(dictionary: Dictionary, tokens: Iterable[str],
                 on_hit: Optional[HitHook] = None) -> Iterator[CheckResult]:
    """
    Yield a CheckResult for every non-empty token.

    Empty tokens (adjacent delimiters, trailing newline) are not checked but
    still advance the position counter. A word whose letter has no bucket is
    reported as not found. `on_hit` sees each match together with the
    bucket it was found in, after the bucket has been reordered.
    """
    for position, word in enumerate(tokens, start=1):
        if not word:
            continue
        store = dictionary.bucket_for(word)
        found = store is not None and lookup(store, word)
        result = CheckResult(position, word, found)
        if found and on_hit is not None:
            on_hit(result, store)
        yield result
