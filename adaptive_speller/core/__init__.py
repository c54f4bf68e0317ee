"""
adaptive_speller.core

Word storage and search:
 - WordStore: growable word list with per-word hit counters (word_store)
 - quicksort/partition: case-insensitive leftmost-pivot sort (sorter)
 - lookup: hot-prefix scan + cold binary search with promotion (lookup)
 - Dictionary: 26 lazily created letter buckets (dictionary)
 - check_tokens: runs a token stream against a Dictionary (checker)
"""

from .word_store import WordStore, fold
from .sorter import partition, quicksort
from .lookup import binary_search, lookup
from .dictionary import Dictionary, bucket_index
from .checker import CheckResult, CheckSummary, check_tokens

__all__ = [
    "WordStore",
    "fold",
    "partition",
    "quicksort",
    "binary_search",
    "lookup",
    "Dictionary",
    "bucket_index",
    "CheckResult",
    "CheckSummary",
    "check_tokens",
]
