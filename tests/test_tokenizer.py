# tests/test_tokenizer.py
import io
import re

import pytest

from adaptive_speller.text.tokenizer import iter_tokens


@pytest.mark.parametrize("text,expected", [
    ("cat dog bird", ["cat", "dog", "bird"]),
    ("cat DOG birdd\n", ["cat", "DOG", "birdd", ""]),
    ("a  b", ["a", "", "b"]),
    ("a\r\nb", ["a", "", "b"]),
    ("tab\tinside", ["tab\tinside"]),
    ("", [""]),
])
def test_fields(text, expected):
    assert list(iter_tokens(io.StringIO(text))) == expected


@pytest.mark.parametrize("chunk", [1, 2, 3, 7])
def test_small_chunks_match_whole_split(chunk):
    text = "supercalifragilistic  expialidocious\r\nshort\nx \n"
    assert list(iter_tokens(io.StringIO(text), chunk_size=chunk)) == re.split(r"[ \n\r]", text)


def test_long_word_is_not_truncated():
    word = "a" * 20000
    assert list(iter_tokens(io.StringIO(word + " b"))) == [word, "b"]
