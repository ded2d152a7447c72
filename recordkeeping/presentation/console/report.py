"""
Console report writer.

Application services write their human-readable output through this class
so tests can capture it without patching ``print``.
"""

import sys
from typing import Iterable, TextIO


class ConsoleReport:
    """Line-oriented writer for the demo reports."""

    def __init__(self, stream: TextIO | None = None):
        # None means "whatever sys.stdout is at write time"
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def line(self, text: object = "") -> None:
        self.stream.write(f"{text}\n")

    def lines(self, items: Iterable[object]) -> None:
        for item in items:
            self.line(item)

    def title(self, text: str) -> None:
        """Write a top-level banner, e.g. ``=== Healthcare System ===``."""
        self.line(f"=== {text} ===")

    def section(self, text: str) -> None:
        """Write a section banner preceded by a blank line."""
        self.line()
        self.title(text)
