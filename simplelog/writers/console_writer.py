"""Console writer with ANSI colors"""

import sys
from contextlib import contextmanager
from typing import Iterator

from simplelog.core.log_entry import LogEntry
from simplelog.core.log_level import RESET_CODE
from simplelog.formatters.console_formatter import ConsoleFormatter


class ConsoleWriter:
    """
    Write logs to console with optional colors.

    The current foreground colour is process-wide and shared by every
    ConsoleWriter. Writes from several threads may interleave their
    set/restore pairs; the output can be mis-coloured but never fails
    because of it.
    """

    # "" means the terminal default
    _foreground = ""

    def __init__(
        self,
        colored: bool = True,
        stream=None,
        formatter=None,
        show_source_location: bool = True
    ):
        """
        Initialize console writer.

        Args:
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stderr)
            formatter: Log formatter (default: ConsoleFormatter short form)
            show_source_location: Passed to the default formatter
        """
        self.colored = colored
        self.stream = stream or sys.stderr
        self.formatter = formatter or ConsoleFormatter(
            show_source_location=show_source_location
        )

    @classmethod
    def current_color(cls) -> str:
        """Current process-wide foreground colour ("" for default)."""
        return cls._foreground

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        msg = self.formatter.format(entry)

        with self._color(entry.severity.color_code):
            self.stream.write(msg + "\n")
            self.stream.flush()

    @contextmanager
    def _color(self, color: str) -> Iterator[None]:
        """Switch to color for the block, then restore whatever was set before."""
        previous = ConsoleWriter._foreground
        changed = self.colored and bool(color)
        try:
            if changed:
                self._set_color(color)
            yield
        finally:
            if changed:
                self._set_color(previous)

    def _set_color(self, color: str) -> None:
        ConsoleWriter._foreground = color
        self.stream.write(color or RESET_CODE)

    def flush(self):
        """Flush stream."""
        self.stream.flush()
