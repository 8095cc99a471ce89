"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from simplelog.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into single-line strings.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)

    @staticmethod
    def tags(entry: LogEntry, include_location: bool = True) -> str:
        """
        Render the optional module and source location segments.

        Returns:
            "[module] location " with absent parts left out, or ""
        """
        parts = []
        if entry.module:
            parts.append(f"[{entry.module}]")
        location: Optional[str] = entry.source_location if include_location else None
        if location:
            parts.append(location)
        if not parts:
            return ""
        return " ".join(parts) + " "
