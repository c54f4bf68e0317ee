# logger_utils.py - run log lines, phase timings and metrics

import logging
import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO


class Log:
    """Lightweight logger for run messages and timing metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "METRIC": "\033[96m",  # cyan
        "RESET": "\033[0m",
    }

    def __init__(self, path: Optional[str] = None, echo: bool = False,
                 use_color: bool = True, stream: Optional[TextIO] = None):
        self.path = path
        self.echo = echo
        self.use_color = use_color
        self.stream = stream

    def write(self, level: str, msg: str):
        """
        Append a log line to the log file (if any) with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # echo goes to stderr so the report on stdout stays clean
        if self.echo:
            out = self.stream or sys.stderr
            if self.use_color and level in self.COLORS:
                out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
            else:
                out.write(line + "\n")

    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = ""):
        """
        Record a metric (timing, counts).
        Example: [2026-10-19 12:45:02] METRIC  | sort done: 0.012s
        """
        self.write("METRIC", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("load"):
                build_dictionary()
        It records how long the block took as a metric.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit, record the block duration (also when it raised)."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False


class LogHandler(logging.Handler):
    """Routes stdlib logging records (core modules, config) into a Log."""

    def __init__(self, log: Log, level=logging.WARNING):
        super().__init__(level)
        self.log = log

    def emit(self, record: logging.LogRecord):
        try:
            self.log.write(record.levelname, f"{record.name}: {record.getMessage()}")
        except Exception:
            self.handleError(record)
