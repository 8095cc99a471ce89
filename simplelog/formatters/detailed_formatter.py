"""
Detailed file form

    12:34:56.789 2026-10-19 (WARN): [storage] low disk
"""

from simplelog.core.log_entry import LogEntry
from simplelog.formatters.base_formatter import BaseFormatter


class DetailedFormatter(BaseFormatter):
    """
    Format entries in the detailed form written to the log file.

    Always carries the full time, the date and the source location
    (when one was passed).
    """

    def __init__(self, time_format: str = "%H:%M:%S.%f", date_format: str = "%Y-%m-%d"):
        """
        Initialize detailed formatter.

        Args:
            time_format: strftime format for the time; a trailing %f is
                         cut to milliseconds
            date_format: strftime format for the date
        """
        self.time_format = time_format
        self.date_format = date_format

    def format(self, entry: LogEntry) -> str:
        time_str = entry.created_at.strftime(self.time_format)
        if self.time_format.endswith("%f"):
            time_str = time_str[:-3]  # Remove last 3 digits
        date_str = entry.created_at.strftime(self.date_format)

        return (
            f"{time_str} {date_str} "
            f"({entry.severity.name}): "
            f"{self.tags(entry)}"
            f"{entry.content}"
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"DetailedFormatter(time_format='{self.time_format}', date_format='{self.date_format}')"
