# adaptive_speller/text/tokenizer.py
# Lazy word splitter for dictionary and text files.

import re
from typing import Iterator, TextIO

# space, newline and carriage return; tabs are part of a word
_DELIMS = re.compile(r"[ \n\r]")

DEFAULT_CHUNK = 4096


def iter_tokens(stream: TextIO, chunk_size: int = DEFAULT_CHUNK) -> Iterator[str]:
    """
    Yield the fields of `stream` separated by single delimiters.
    Same result as re.split on the whole content, read chunk by chunk:
      "cat dog"   -> "cat", "dog"
      "cat  dog\\n" -> "cat", "", "dog", ""
      ""          -> ""
    A word may span chunks and has no length limit.
    """
    pending = []
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        parts = _DELIMS.split(chunk)
        pending.append(parts[0])
        if len(parts) == 1:
            continue
        yield "".join(pending)
        yield from parts[1:-1]
        pending = [parts[-1]]
    yield "".join(pending)
