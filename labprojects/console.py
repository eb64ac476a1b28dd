"""Line-oriented console input and output used by the interactive menus."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EndOfInput(EOFError):
    """Raised when the input stream is exhausted."""


class Console:
    """Reads lines and numbers from a text stream and writes prompts to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` as is, without adding a newline."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its trailing newline."""
        line = self.stdin.readline()
        if not line:
            raise EndOfInput("end of input")
        return line[:-1] if line.endswith("\n") else line

    def read_limited(self, max_length: int) -> str:
        """Read one line, keeping at most ``max_length - 1`` characters of it.

        The rest of an overlong line is discarded.
        """
        if max_length < 2:
            raise ValueError("max_length must be at least 2")
        return self.read_line()[: max_length - 1]

    def read_int(self) -> int | None:
        """Read the integer that starts the next non-blank line.

        The rest of the line is discarded. Returns None when the line does not
        start with an integer.
        """
        line = self.read_line()
        while not line.strip():
            line = self.read_line()
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else None