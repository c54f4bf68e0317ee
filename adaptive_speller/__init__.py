"""
adaptive_speller

Dictionary-backed spell checker whose word lists reorder themselves:
words that keep matching move to the front of their letter bucket and are
found by a short linear scan, the rest by binary search.
"""

from .core import CheckResult, Dictionary, WordStore, check_tokens, lookup, quicksort

__all__ = [
    "CheckResult",
    "Dictionary",
    "WordStore",
    "check_tokens",
    "lookup",
    "quicksort",
]

__version__ = "0.1.0"
