"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any

from simplelog.core.log_level import Severity


@dataclass(frozen=True)
class LogEntry:
    """
    One logged event.

    Immutable once constructed, so a single entry can be handed to every
    sink on both dispatch paths and kept in the file queue until flushed.
    """

    content: str
    severity: Severity = Severity.INFO
    module: Optional[str] = None
    source_location: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.severity, Severity):
            raise TypeError("severity must be Severity enum")
        if not isinstance(self.content, str):
            # frozen dataclass: bypass __setattr__ for the coercion
            object.__setattr__(self, "content", str(self.content))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "content": self.content,
            "severity": self.severity.name,
            "module": self.module,
            "source_location": self.source_location,
            "created_at": self.created_at.isoformat(),
        }

    def __str__(self) -> str:
        module = f"[{self.module}] " if self.module else ""
        return f"({self.severity.name}) {module}{self.content}"
