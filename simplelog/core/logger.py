"""
Main Logger class - dispatches entries to sinks

Every entry goes to the unfiltered sinks (the file writer by default);
entries at or above the filter threshold also go to the filtered sinks
(the console by default).
"""

from __future__ import annotations
from typing import Optional, List, Any
import atexit
import sys
import threading

from simplelog.core.log_level import Severity
from simplelog.core.log_entry import LogEntry
from simplelog.core.logger_config import LoggerConfig
from simplelog.core.module_log import ModuleLog
from simplelog.filters.level_filter import LevelFilter
from simplelog.writers.console_writer import ConsoleWriter
from simplelog.writers.file_writer import QueuedFileWriter

# Module tag of entries the logger emits about itself
INTERNAL_MODULE = "simplelog"


class Logger:
    """Main logger class: builds entries and fans them out to sinks."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._unfiltered_writers: List[Any] = []
        self._filtered_writers: List[Any] = []
        self._threshold_filter = LevelFilter(min_level=self._config.filter_threshold)
        self._modules: List[ModuleLog] = []
        self._history: List[LogEntry] = []
        self._lock = threading.Lock()
        self._reporting = threading.local()
        self._closed = False
        self._metrics = {"logged": 0, "filtered_out": 0, "sink_errors": 0}

        # Directory creation errors propagate from here
        if self._config.file_path is not None:
            self.add_writer(QueuedFileWriter(
                str(self._config.file_path),
                flush_interval_ms=self._config.flush_interval_ms,
                shutdown_timeout=self._config.shutdown_timeout
            ))

        if self._config.log_to_console:
            self.add_writer(
                ConsoleWriter(
                    colored=self._config.colored_output,
                    show_source_location=self._config.show_source_location
                ),
                filtered=True
            )

        atexit.register(self.shutdown)

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def filter_threshold(self) -> Severity:
        return self._config.filter_threshold

    @property
    def modules(self) -> List[ModuleLog]:
        """Handles issued by create_module(), oldest first."""
        with self._lock:
            return list(self._modules)

    @property
    def history(self) -> List[LogEntry]:
        """Every entry logged so far (empty unless keep_history is set)."""
        with self._lock:
            return list(self._history)

    def add_writer(self, writer: Any, filtered: bool = False) -> None:
        """
        Register a sink.

        Args:
            writer: Writer instance with write(entry) method
            filtered: Register on the filtered path (only entries at or
                      above the threshold) instead of the unfiltered one
        """
        if hasattr(writer, 'bind'):
            writer.bind(self)

        with self._lock:
            if filtered:
                self._filtered_writers.append(writer)
            else:
                self._unfiltered_writers.append(writer)

    def get_writers(self, filtered: bool = False) -> List[Any]:
        """Registered sinks of one path, in invocation order."""
        with self._lock:
            return list(self._filtered_writers if filtered else self._unfiltered_writers)

    def log(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        module: Optional[str] = None,
        source_location: Optional[str] = None
    ) -> None:
        """
        Log a message.

        Never raises because of a sink: failing sinks are reported on
        stderr and the remaining sinks still run.

        Args:
            message: Log message
            severity: Entry severity
            module: Optional module tag
            source_location: Optional call site, see simplelog.here()
        """
        entry = LogEntry(
            message,
            severity,
            module=module,
            source_location=source_location
        )

        with self._lock:
            self._metrics["logged"] += 1
            if self._config.keep_history:
                self._history.append(entry)

        self._dispatch(entry)

    def info(self, message: str, module: Optional[str] = None, **kwargs) -> None:
        """Log info message."""
        self.log(message, Severity.INFO, module, **kwargs)

    def ann(self, message: str, module: Optional[str] = None, **kwargs) -> None:
        """Log announcement."""
        self.log(message, Severity.ANN, module, **kwargs)

    def warn(self, message: str, module: Optional[str] = None, **kwargs) -> None:
        """Log warning message."""
        self.log(message, Severity.WARN, module, **kwargs)

    def error(self, message: str, module: Optional[str] = None, **kwargs) -> None:
        """Log error message."""
        self.log(message, Severity.ERROR, module, **kwargs)

    def create_module(self, name: str) -> ModuleLog:
        """
        Create a handle that logs with module=name.

        Args:
            name: Module tag

        Returns:
            New ModuleLog bound to this logger
        """
        module = ModuleLog(name, self)
        with self._lock:
            self._modules.append(module)
        return module

    def _dispatch(self, entry: LogEntry, exclude: Any = None) -> None:
        """Unfiltered sinks first, then filtered sinks if the entry passes."""
        for writer in self.get_writers():
            if writer is not exclude:
                self._write(writer, entry)

        if not self._threshold_filter.should_log(entry):
            with self._lock:
                self._metrics["filtered_out"] += 1
            return

        for writer in self.get_writers(filtered=True):
            if writer is not exclude:
                self._write(writer, entry)

    def _write(self, writer: Any, entry: LogEntry) -> None:
        try:
            writer.write(entry)
        except Exception as e:
            with self._lock:
                self._metrics["sink_errors"] += 1
            print(f"Writer error ({type(writer).__name__}): {e}", file=sys.stderr)

    def _report_internal_error(self, message: str, origin: Any = None) -> None:
        """
        Log an ERROR about the logger itself to every sink except origin.

        A report raised while another report is in progress on the same
        thread goes to stderr instead, so a failing sink cannot recurse.
        """
        if getattr(self._reporting, "active", False):
            print(f"simplelog: {message}", file=sys.stderr)
            return

        self._reporting.active = True
        try:
            entry = LogEntry(message, Severity.ERROR, module=INTERNAL_MODULE)
            self._dispatch(entry, exclude=origin)
        finally:
            self._reporting.active = False

    def flush(self):
        """Run one flush cycle on every writer that buffers."""
        for writer in self.get_writers() + self.get_writers(filtered=True):
            if hasattr(writer, 'flush'):
                try:
                    writer.flush()
                except Exception as e:
                    print(f"Writer flush error ({type(writer).__name__}): {e}", file=sys.stderr)

    def shutdown(self):
        """Shutdown logger gracefully, writing out everything still queued."""
        with self._lock:
            if self._closed:
                return
            self._closed = True

        for writer in self.get_writers() + self.get_writers(filtered=True):
            if hasattr(writer, 'close'):
                try:
                    writer.close()
                except Exception as e:
                    print(f"Writer close error ({type(writer).__name__}): {e}", file=sys.stderr)

        atexit.unregister(self.shutdown)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
