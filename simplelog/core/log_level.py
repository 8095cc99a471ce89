"""
Severity enumeration

Ordered log severities used for filtering and console colouring.
"""

from enum import IntEnum
from typing import Dict


class Severity(IntEnum):
    """
    Log severity enumeration.

    Totally ordered: INFO < ANN < WARN < ERROR.
    Values line up with Python's logging module where a counterpart exists.
    """

    INFO = 20       # Informational messages
    ANN = 25        # Announcements, more visible than INFO
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages

    def __str__(self) -> str:
        """String representation of severity."""
        return self.name

    @classmethod
    def from_string(cls, name: str) -> "Severity":
        """
        Convert string to Severity.

        Args:
            name: Severity name (case-insensitive)

        Returns:
            Severity enum value

        Raises:
            ValueError: If name is not valid
        """
        key = name.strip().upper()
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid severity: {name}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI foreground colour for this severity.

        Returns:
            ANSI escape sequence, or "" to leave the colour unchanged
        """
        return SEVERITY_COLORS.get(self, "")


RESET_CODE = "\033[0m"

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.ANN: "\033[36m",    # Cyan
    Severity.WARN: "\033[33m",   # Yellow
    Severity.ERROR: "\033[31m",  # Red
}
