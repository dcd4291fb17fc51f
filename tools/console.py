"""Console I/O used by the packager and the interactive shell."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Line-oriented console backed by standard input and output."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream or sys.stdout

    def read_line(self, prompt: str = "") -> str:
        """Read one stripped line. Raises EOFError when input is exhausted."""
        return input(prompt).strip()

    def write(self, message: str = "") -> None:
        print(message, file=self._stream)

    def clear(self) -> None:
        if self._stream.isatty():
            self._stream.write("\033[2J\033[H")
            self._stream.flush()


class SilentConsole(Console):
    """Console that discards output, for callers that only want the result."""

    def read_line(self, prompt: str = "") -> str:
        raise EOFError("SilentConsole has no input")

    def write(self, message: str = "") -> None:
        return None

    def clear(self) -> None:
        return None
