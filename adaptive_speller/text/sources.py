# adaptive_speller/text/sources.py
# Opens the dictionary and text files for a run.

from contextlib import ExitStack, contextmanager
from typing import Iterator, TextIO, Tuple

from adaptive_speller.errors import FatalIOError


def open_source(path: str, encoding: str = "utf-8") -> TextIO:
    """
    Open `path` read-only as text. newline="" keeps '\\r' in the stream so
    CRLF files tokenize the same way on every platform.
    Any failure to open raises FatalIOError.
    """
    try:
        return open(path, "r", encoding=encoding, errors="replace", newline="")
    except OSError as e:
        raise FatalIOError(path) from e


@contextmanager
def open_sources(dictionary_path: str, text_path: str,
                 encoding: str = "utf-8") -> Iterator[Tuple[TextIO, TextIO]]:
    """Both input streams, dictionary first; closed on exit."""
    with ExitStack() as stack:
        fp_dict = stack.enter_context(open_source(dictionary_path, encoding))
        fp_text = stack.enter_context(open_source(text_path, encoding))
        yield fp_dict, fp_text
