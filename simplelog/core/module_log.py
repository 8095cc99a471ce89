"""Per-module forwarding handle"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from simplelog.core.log_level import Severity

if TYPE_CHECKING:
    from simplelog.core.logger import Logger


class ModuleLog:
    """
    Logger handle with a fixed module tag.

    Holds no state besides its name and the logger it forwards to; all
    filtering happens in the logger. Obtain one with Logger.create_module().
    """

    def __init__(self, name: str, logger: "Logger"):
        self.name = name
        self._logger = logger

    def log(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        source_location: Optional[str] = None
    ) -> None:
        """Log a message tagged with this module's name."""
        self._logger.log(
            message,
            severity,
            module=self.name,
            source_location=source_location
        )

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(message, Severity.INFO, **kwargs)

    def ann(self, message: str, **kwargs) -> None:
        """Log announcement."""
        self.log(message, Severity.ANN, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(message, Severity.WARN, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(message, Severity.ERROR, **kwargs)

    def __repr__(self) -> str:
        return f"ModuleLog(name='{self.name}')"
