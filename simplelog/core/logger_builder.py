"""Logger builder pattern"""

from typing import Any, List, Tuple

from simplelog.core.logger import Logger
from simplelog.core.logger_config import LoggerConfig
from simplelog.core.log_level import Severity


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._custom_writers: List[Tuple[Any, bool]] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_threshold(self, severity: Severity) -> "LoggerBuilder":
        """Set minimum severity for the filtered (console) path."""
        self._config.filter_threshold = severity
        return self

    def with_console(self, colored: bool = True, show_source_location: bool = True) -> "LoggerBuilder":
        """Enable console output."""
        self._config.log_to_console = True
        self._config.colored_output = colored
        self._config.show_source_location = show_source_location
        return self

    def without_console(self) -> "LoggerBuilder":
        """Disable console output."""
        self._config.log_to_console = False
        return self

    def with_file(self, filepath: str) -> "LoggerBuilder":
        """Enable queued file output."""
        self._config.file_path = filepath
        return self

    def with_flush_interval(self, interval_ms: int) -> "LoggerBuilder":
        """Set time between file flush cycles."""
        self._config.flush_interval_ms = interval_ms
        return self

    def with_shutdown_timeout(self, seconds: float) -> "LoggerBuilder":
        """Set how long shutdown waits for the flush loop."""
        self._config.shutdown_timeout = seconds
        return self

    def with_history(self, enabled: bool = True) -> "LoggerBuilder":
        """Keep every entry in memory (Logger.history)."""
        self._config.keep_history = enabled
        return self

    def add_writer(self, writer, filtered: bool = False) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance
            filtered: Register on the filtered path

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .without_console()
                .add_writer(ConsoleWriter(stream=sys.stdout), filtered=True)
                .build())
        """
        self._custom_writers.append((writer, filtered))
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on values set through the with_* methods
        config = LoggerConfig(**vars(self._config))
        logger = Logger(config)

        # Custom writers come after the built-in ones
        for writer, filtered in self._custom_writers:
            logger.add_writer(writer, filtered=filtered)

        return logger
