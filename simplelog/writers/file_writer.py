"""
Queued file writer

Log calls only enqueue; a background flush loop drains the queue on a
fixed interval and appends the whole batch to the file in one write.
The file is opened and closed on every cycle, so external rotation or
truncation between cycles is tolerated.
"""

from __future__ import annotations

import queue
import sys
import threading
import time
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional

from simplelog.formatters.detailed_formatter import DetailedFormatter

if TYPE_CHECKING:
    from simplelog.core.log_entry import LogEntry


@dataclass
class FileWriterStats:
    """
    Statistics for queued file writing.

    Tracks queue traffic, flush cycles and failures.
    """

    entries_enqueued: int = 0
    entries_written: int = 0
    entries_dropped: int = 0
    batches_flushed: int = 0
    write_failures: int = 0
    queue_inconsistencies: int = 0
    total_flush_time_ms: float = 0.0
    last_flush_time: Optional[datetime] = None

    def record_flush(self, batch_size: int, flush_time_ms: float) -> None:
        """Record a successful batch append."""
        self.entries_written += batch_size
        self.batches_flushed += 1
        self.total_flush_time_ms += flush_time_ms
        self.last_flush_time = datetime.now()

    def record_failure(self, batch_size: int) -> None:
        """Record a batch lost to an I/O error."""
        self.write_failures += 1
        self.entries_dropped += batch_size

    def to_dict(self) -> dict:
        """Convert stats to dictionary for serialization."""
        return {
            "entries_enqueued": self.entries_enqueued,
            "entries_written": self.entries_written,
            "entries_dropped": self.entries_dropped,
            "batches_flushed": self.batches_flushed,
            "write_failures": self.write_failures,
            "queue_inconsistencies": self.queue_inconsistencies,
            "total_flush_time_ms": self.total_flush_time_ms,
            "average_flush_time_ms": (
                self.total_flush_time_ms / self.batches_flushed
                if self.batches_flushed > 0
                else 0.0
            ),
            "last_flush_time": (
                self.last_flush_time.isoformat()
                if self.last_flush_time
                else None
            ),
        }


class QueuedFileWriter:
    """
    Writer that queues entries and appends them to a file in batches.

    Features:
    - Non-blocking write() on an unbounded thread-safe queue
    - Background flush loop on a fixed interval
    - One append per cycle for the whole drained batch
    - Graceful shutdown: stop signal, bounded join, final drain

    Thread Safety:
        write() may be called from any thread. Flush cycles are serialized,
        whether they come from the background loop or from flush().

    Example:
        writer = QueuedFileWriter("logs/app.log", flush_interval_ms=200)
        logger = LoggerBuilder().add_writer(writer).build()
    """

    def __init__(
        self,
        filepath: str,
        flush_interval_ms: int = 200,
        formatter=None,
        encoding: str = "utf-8",
        shutdown_timeout: float = 5.0,
        autostart: bool = True,
    ):
        """
        Initialize queued file writer.

        Creates the parent directory of filepath; any OSError from that
        propagates to the caller.

        Args:
            filepath: Path to log file (appended to, never truncated)
            flush_interval_ms: Time between flush cycles
            formatter: Log formatter (default: DetailedFormatter)
            encoding: File encoding (default: 'utf-8')
            shutdown_timeout: Seconds close() waits for the flush loop
            autostart: Start the flush loop immediately
        """
        if flush_interval_ms <= 0:
            raise ValueError("flush_interval_ms must be positive")

        self.filepath = Path(filepath)
        self.flush_interval_ms = flush_interval_ms
        self.formatter = formatter or DetailedFormatter()
        self.encoding = encoding
        self.shutdown_timeout = shutdown_timeout

        self._queue: "queue.Queue[LogEntry]" = queue.Queue()
        self._stats = FileWriterStats()
        self._stats_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._flush_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._closed = False
        self._logger: Optional[Any] = None

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        if autostart:
            self.start()

    def bind(self, logger: Any) -> None:
        """Report internal errors through logger instead of stderr."""
        self._logger = logger

    def start(self) -> None:
        """Start the background flush loop (no-op if running or closed)."""
        with self._state_lock:
            if self._closed or self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run,
                name=f"simplelog-flush-{self.filepath.name}",
                daemon=True
            )
            self._thread.start()

    @property
    def is_running(self) -> bool:
        """Whether the flush loop thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def write(self, entry: "LogEntry") -> None:
        """
        Enqueue a log entry.

        Never blocks on I/O. Entries written after close() are dropped
        and counted.

        Args:
            entry: Log entry to write
        """
        with self._state_lock:
            if self._closed:
                with self._stats_lock:
                    self._stats.entries_dropped += 1
                return
            self._queue.put_nowait(entry)

        with self._stats_lock:
            self._stats.entries_enqueued += 1

    def flush(self) -> None:
        """Run one flush cycle on the calling thread."""
        self._flush_cycle()

    def _run(self) -> None:
        """Flush loop (background thread)."""
        interval = self.flush_interval_ms / 1000.0

        while not self._stop_event.wait(interval):
            try:
                self._flush_cycle()
            except Exception as e:
                # Nothing raised here may kill the loop
                self._report(f"Flush cycle failed for {self.filepath}: {e}")

    def _flush_cycle(self, timeout: float = -1) -> None:
        """Drain everything queued right now and append it in one write."""
        if not self._flush_lock.acquire(timeout=timeout):
            print(
                f"simplelog: flush of {self.filepath} still in progress, "
                f"skipping final drain",
                file=sys.stderr
            )
            return

        try:
            batch = self._drain()
            if not batch:
                return

            start_time = time.perf_counter()
            lines = self._render(batch)
            if not lines:
                return
            data = "".join(lines)

            try:
                with open(self.filepath, "a", encoding=self.encoding) as f:
                    f.write(data)
            except OSError as e:
                # Dropped, not re-queued: retrying a broken file forever helps no one
                with self._stats_lock:
                    self._stats.record_failure(len(lines))
                print(
                    f"simplelog: failed to append {len(lines)} entries "
                    f"to {self.filepath}: {e}",
                    file=sys.stderr
                )
                return

            flush_time_ms = (time.perf_counter() - start_time) * 1000
            with self._stats_lock:
                self._stats.record_flush(len(lines), flush_time_ms)
        finally:
            self._flush_lock.release()

    def _render(self, batch: List["LogEntry"]) -> List[str]:
        """Format each entry; an entry that fails is dropped on its own."""
        lines: List[str] = []
        for entry in batch:
            try:
                lines.append(self.formatter.format(entry) + "\n")
            except Exception as e:
                with self._stats_lock:
                    self._stats.entries_dropped += 1
                self._report(f"Could not format entry for {self.filepath}: {e}")
        return lines

    def _drain(self) -> List["LogEntry"]:
        """
        Dequeue the entries present when the drain starts.

        Entries enqueued meanwhile stay for the next cycle. Caller must
        hold the flush lock.
        """
        expected = self._queue.qsize()
        batch: List["LogEntry"] = []
        missing = 0

        for _ in range(expected):
            try:
                batch.append(self._queue.get_nowait())
            except queue.Empty:
                missing += 1

        if missing:
            with self._stats_lock:
                self._stats.queue_inconsistencies += missing
            self._report(
                f"File queue for {self.filepath} reported {expected} entries "
                f"but {missing} could not be dequeued"
            )

        return batch

    def _report(self, message: str) -> None:
        """Send an internal error to the bound logger, or stderr when unbound."""
        if self._logger is not None:
            self._logger._report_internal_error(message, origin=self)
        else:
            print(f"simplelog: {message}", file=sys.stderr)

    def close(self) -> None:
        """Stop the flush loop and write out everything still queued."""
        with self._state_lock:
            if self._closed:
                return
            self._closed = True

        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=self.shutdown_timeout)

        self._flush_cycle(timeout=self.shutdown_timeout)

    def get_stats(self) -> FileWriterStats:
        """
        Get writer statistics.

        Returns:
            Copy of current statistics
        """
        with self._stats_lock:
            return replace(self._stats)

    def get_queue_size(self) -> int:
        """
        Get current queue size.

        Returns:
            Number of entries waiting for the next flush cycle
        """
        return self._queue.qsize()

    def __enter__(self) -> "QueuedFileWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
