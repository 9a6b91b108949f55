# modules/errors.py

"""
Exception hierarchy for a single ai2fs run.

FatalError subclasses abort the whole run (exit code 1). Everything else is
recoverable: it is reported once, counted, and the run moves on to the next
line of input.
"""

from typing import Optional


def printable(text: str) -> str:
    """
    Paths come from input decoded with surrogateescape; stray bytes show up
    as U+FFFD so the text can always be echoed.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class Ai2fsError(Exception):
    """Base class for every error raised by the engine."""


class FatalError(Ai2fsError):
    exit_code = 1


class InputOpenError(FatalError):
    def __init__(self, input_path: str, os_error: OSError):
        self.input_path = input_path
        self.os_error = os_error
        reason = os_error.strerror or str(os_error)
        super().__init__(f"Error opening input file {printable(str(input_path))}: {reason}")


class OutOfMemoryError(FatalError):
    def __init__(self, path: str, size: int):
        self.path = path
        self.size = size
        super().__init__(
            f"Memory allocation failed while buffering '{printable(path)}' ({size} bytes held)"
        )


class InvalidPathError(Ai2fsError):
    def __init__(self, raw_path: str, reason: str):
        self.raw_path = raw_path
        self.reason = reason
        super().__init__(f"Skipping invalid path '{printable(raw_path)}': {reason}")


class MaterializeError(Ai2fsError):
    """A directory or file under the output root could not be created."""

    def __init__(self, target: str, os_error: OSError, kind: str = "file"):
        self.target = target
        self.os_error = os_error
        self.kind = kind
        super().__init__(f"Error creating {kind} {printable(target)}: {self.reason}")

    @property
    def reason(self) -> Optional[str]:
        return self.os_error.strerror or str(self.os_error)
