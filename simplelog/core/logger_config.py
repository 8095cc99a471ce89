"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional, Union
from pathlib import Path

from simplelog.core.log_level import Severity


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Everything the dispatcher needs at construction time. There is no
    configuration file format; build one of these in code or use
    LoggerBuilder.
    """

    # Basic settings
    name: str = "simplelog"
    filter_threshold: Severity = Severity.INFO

    # File settings (None disables the file sink entirely)
    file_path: Optional[Union[Path, str]] = None
    flush_interval_ms: int = 200
    shutdown_timeout: float = 5.0

    # Console settings
    log_to_console: bool = True
    colored_output: bool = True
    show_source_location: bool = True

    # Keep every entry in memory as well
    keep_history: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.filter_threshold, Severity):
            raise ValueError("filter_threshold must be a Severity")
        if self.flush_interval_ms <= 0:
            raise ValueError("flush_interval_ms must be positive")
        if self.shutdown_timeout < 0:
            raise ValueError("shutdown_timeout cannot be negative")

        # Convert file_path to Path if it's a string
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration (console only, everything shown)."""
        return cls()

    @classmethod
    def console_only(cls, threshold: Severity = Severity.INFO) -> "LoggerConfig":
        """Create configuration without a file sink."""
        return cls(filter_threshold=threshold, file_path=None)

    @classmethod
    def production_config(cls, file_path: Union[Path, str]) -> "LoggerConfig":
        """Create configuration for production: everything to file, WARN+ to console."""
        return cls(
            filter_threshold=Severity.WARN,
            file_path=file_path,
            log_to_console=True,
            show_source_location=False,
        )
