"""Writers module - Log sinks"""

from simplelog.writers.console_writer import ConsoleWriter
from simplelog.writers.file_writer import FileWriterStats, QueuedFileWriter

__all__ = ["ConsoleWriter", "FileWriterStats", "QueuedFileWriter"]
