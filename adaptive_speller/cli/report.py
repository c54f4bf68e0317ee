# report.py - console output for a spell-check run (Rich)

from typing import Optional

from rich.console import Console
from rich.text import Text

from adaptive_speller.core.checker import CheckResult, CheckSummary
from adaptive_speller.core.dictionary import Dictionary
from adaptive_speller.core.word_store import WordStore

SEPARATOR = " - "


class Report:
    """Prints each phase of a run: dictionary dumps, misspellings, summary."""

    def __init__(self, console: Optional[Console] = None, color: bool = True):
        self.console = console or Console(highlight=False, soft_wrap=True, no_color=not color)
        self.color = color

    def _style(self, style: str) -> str:
        return style if self.color else ""

    def section(self, title: str):
        self.console.print()
        self.console.print(Text(title, style=self._style("bold magenta")))

    def dictionary(self, title: str, dictionary: Dictionary):
        """One line per present bucket: words joined by ' - ' in current order."""
        self.section(title)
        for _letter, store in dictionary.buckets():
            if len(store):
                self.console.print(Text(SEPARATOR.join(store.words())))

    def misspelled(self, result: CheckResult):
        line = Text(f"Incorrect word detected at {result.position}. word in the file: ")
        line.append(result.word, style=self._style("bold red"))
        self.console.print(line)

    def hit_trace(self, result: CheckResult, store: WordStore):
        """Most accessed words of the bucket the hit landed in, as word(hits)."""
        hot = SEPARATOR.join(f"{w}({n})" for w, n in store.most_accessed())
        self.console.print(Text(
            f'Word "{result.word}" is a hit. Most accessed words beginning with '
            f"letter '{result.word[0]}' are now:",
            style=self._style("dim"),
        ))
        self.console.print(Text(hot, style=self._style("cyan")))

    def completed(self, summary: CheckSummary):
        self.console.print("File check is completed.")
        style = self._style("green") if summary.misspelled == 0 else self._style("yellow")
        self.console.print(Text(
            f"{summary.checked} words checked, {summary.misspelled} incorrect.",
            style=style,
        ))

    def fatal(self, message: str):
        self.console.print(Text(message, style=self._style("bold red")))

    def usage(self, text: str):
        self.console.print(Text(text))
