import pytest

from adaptive_speller.core.sorter import quicksort
from adaptive_speller.core.word_store import WordStore


def make_store(words, sort=True):
    store = WordStore()
    for w in words:
        store.append(w)
    if sort:
        quicksort(store)
    return store


@pytest.fixture
def fruit():
    """Sorted, never-hit bucket: apple, banana, cherry."""
    return make_store(["cherry", "apple", "banana"])
