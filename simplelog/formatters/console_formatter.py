"""
Short console form

    12:34 (WARN) [storage] low disk
"""

from simplelog.core.log_entry import LogEntry
from simplelog.formatters.base_formatter import BaseFormatter


class ConsoleFormatter(BaseFormatter):
    """Format entries in the short form shown on the console."""

    def __init__(self, time_format: str = "%H:%M", show_source_location: bool = True):
        """
        Initialize console formatter.

        Args:
            time_format: strftime format for the time segment
            show_source_location: Include the source location when the entry has one
        """
        self.time_format = time_format
        self.show_source_location = show_source_location

    def format(self, entry: LogEntry) -> str:
        return (
            f"{entry.created_at.strftime(self.time_format)} "
            f"({entry.severity.name}) "
            f"{self.tags(entry, self.show_source_location)}"
            f"{entry.content}"
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleFormatter(time_format='{self.time_format}')"
