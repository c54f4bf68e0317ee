# errors.py - fatal conditions that stop a run
# Misspelled words are ordinary results and never raise.


class SpellerError(Exception):
    """Base class for errors that end a spell-check run."""


class FatalAllocationError(SpellerError):
    """Raised when a word store or token buffer cannot grow."""


class FatalIOError(SpellerError):
    """Raised when an input file cannot be opened for reading."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Error reading file: {path}")
