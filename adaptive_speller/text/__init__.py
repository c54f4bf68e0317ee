from .tokenizer import iter_tokens
from .sources import open_source, open_sources

__all__ = ["iter_tokens", "open_source", "open_sources"]
