"""
cli.py - command line spell checker
Usage: adaptive-speller <dictionary file> <file to be checked>

Flow:
- Loads the dictionary file into per-letter buckets and sorts them
- Checks every word of the text file, printing the misspelled ones
- Matched words move to the front of their bucket as the run goes on
- Prints the dictionary before sorting, after sorting and after the check
- Uses Rich for console output, Config (speller.json) for options

Always returns 0, also for usage errors, unreadable files and misspellings.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from adaptive_speller.core.checker import CheckSummary, check_tokens
from adaptive_speller.core.dictionary import Dictionary
from adaptive_speller.errors import SpellerError
from adaptive_speller.text.sources import open_sources
from adaptive_speller.text.tokenizer import iter_tokens
from adaptive_speller.utils.config_manager import Config
from adaptive_speller.utils.logger_utils import Log, LogHandler
from adaptive_speller.cli.report import Report

PROG = "adaptive-speller"
PACKAGE_LOGGER = "adaptive_speller"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Report words of a text file that are missing from a dictionary file.",
    )
    parser.add_argument("dictionary", help="word list, separated by spaces or newlines")
    parser.add_argument("text", help="file to be checked")
    return parser


def usage_text() -> str:
    return (
        "Not enough argument.\n"
        f"Usage: {PROG} <dictionary file> <file to be checked>"
    )


def run(dictionary_path: str, text_path: str, cfg: Config,
        report: Report, log: Log) -> CheckSummary:
    """One full pass: load, sort, check, print. Raises SpellerError on fatal errors."""
    show = cfg.get("show_dictionary", True)

    with open_sources(dictionary_path, text_path, cfg.get("encoding", "utf-8")) as (fp_dict, fp_text):
        with log.time_block("load"):
            dictionary = Dictionary.from_tokens(
                iter_tokens(fp_dict),
                initial_capacity=cfg.get("initial_capacity", 2),
                growth_factor=cfg.get("growth_factor", 2),
            )
        log.info(
            f"loaded {len(dictionary)} words into {dictionary.bucket_count()} buckets "
            f"from {dictionary_path} ({dictionary.skipped} skipped)"
        )

        if show:
            report.dictionary("DICTIONARY BEFORE SORTING:", dictionary)

        with log.time_block("sort"):
            swaps = dictionary.sort()
        log.metric("sort swaps", swaps)

        if show:
            report.dictionary("DICTIONARY AFTER SORTING:", dictionary)

        report.section("TEST RESULTS:")
        summary = CheckSummary()
        on_hit = report.hit_trace if cfg.get("trace_hits", False) else None
        with log.time_block("check"):
            for result in check_tokens(dictionary, iter_tokens(fp_text), on_hit=on_hit):
                summary.record(result)
                if not result.found:
                    report.misspelled(result)
        report.completed(summary)
        log.info(f"checked {summary.checked} words in {text_path}, {summary.misspelled} incorrect")

        if show:
            report.dictionary(
                "UPDATED VERSION OF DICTIONARY "
                "(Words are sorted realtime according to their hit counts):",
                dictionary,
            )
    return summary


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None,
         cfg: Optional[Config] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    cfg = cfg or Config()
    report = Report(console, color=cfg.get("color", True))

    # too few arguments is reported, not treated as a failure
    if len(argv) < 2:
        report.usage(usage_text())
        return 0

    # the first two arguments are paths even when they start with '-';
    # extra arguments are ignored
    args = build_parser().parse_args(["--", argv[0], argv[1]])

    log = Log(path=cfg.get("log_path"), echo=cfg.get("log_echo", False),
              use_color=cfg.get("color", True))
    handler = LogHandler(log)
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.addHandler(handler)
    # records go to the Log only, not to logging's stderr fallback
    propagate, pkg_logger.propagate = pkg_logger.propagate, False
    try:
        run(args.dictionary, args.text, cfg, report, log)
    except SpellerError as e:
        report.fatal(str(e))
        log.error(str(e))
    finally:
        pkg_logger.removeHandler(handler)
        pkg_logger.propagate = propagate
    return 0


def entry() -> None:
    """Console-script entry point."""
    sys.exit(main())
