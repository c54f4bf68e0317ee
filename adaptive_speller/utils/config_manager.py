# config_manager.py - JSON config manager

import codecs
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PATH = "speller.json"


class Config:
    def __init__(self, path=DEFAULT_PATH):
        self.path = path
        self.data = {
            "initial_capacity": 2,   # bucket capacity on creation
            "growth_factor": 2,      # capacity multiplier when a bucket is full
            "encoding": "utf-8",
            "show_dictionary": True,
            "trace_hits": False,     # print most accessed words after each hit
            "color": True,
            "log_path": None,
            "log_echo": False,
        }
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: top level is not an object", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("unknown config option %r in %s", k, self.path)
                continue
            problem = _check_value(k, v, self.data[k])
            if problem:
                logger.warning("ignoring config option %r=%r in %s: %s", k, v, self.path, problem)
                continue
            self.data[k] = v

    def get(self, key, default=None):
        return self.data.get(key, default)


# lower bounds for the integer options
_MINIMUMS = {
    "initial_capacity": 1,
    "growth_factor": 2,
}


def _check_value(key, val, default):
    """Reason `val` cannot replace `default` for `key`, or None if it can."""
    if default is None:
        # optional path: string or null
        if val is not None and not isinstance(val, str):
            return "expected a string or null"
        return None
    # bool is an int subclass, so check it first and exactly
    if isinstance(default, bool) or isinstance(val, bool):
        if not (isinstance(default, bool) and isinstance(val, bool)):
            return f"expected {type(default).__name__}"
        return None
    if not isinstance(val, type(default)):
        return f"expected {type(default).__name__}"
    minimum = _MINIMUMS.get(key)
    if minimum is not None and val < minimum:
        return f"must be at least {minimum}"
    if key == "encoding":
        try:
            codecs.lookup(val)
        except LookupError:
            return "unknown encoding"
    return None
