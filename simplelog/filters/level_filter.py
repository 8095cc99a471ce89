"""
Severity-based filter
"""

from typing import Optional
from simplelog.core.log_entry import LogEntry
from simplelog.core.log_level import Severity


class LevelFilter:
    """
    Filter log entries based on severity.

    Both bounds are inclusive; the dispatcher's filter threshold is a
    LevelFilter with only min_level set. Rejecting an entry is not an
    error: it simply does not reach the filtered sinks.
    """

    def __init__(
        self,
        min_level: Optional[Severity] = None,
        max_level: Optional[Severity] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum severity (inclusive). If None, no minimum.
            max_level: Maximum severity (inclusive). If None, no maximum.

        Example:
            # Only WARN and above
            filter = LevelFilter(min_level=Severity.WARN)

            # Only INFO and ANN
            filter = LevelFilter(max_level=Severity.ANN)
        """
        if min_level is not None and max_level is not None and min_level > max_level:
            raise ValueError("min_level cannot exceed max_level")
        self.min_level = min_level
        self.max_level = max_level

    def should_log(self, entry: LogEntry) -> bool:
        if self.min_level is not None and entry.severity < self.min_level:
            return False

        if self.max_level is not None and entry.severity > self.max_level:
            return False

        return True

    def __call__(self, entry: LogEntry) -> bool:
        """Allow filters to be callable."""
        return self.should_log(entry)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
