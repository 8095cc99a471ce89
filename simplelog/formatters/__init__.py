"""
Log formatters module

Formatters are the presentation hook: they turn a LogEntry into the
line a sink writes.
"""

from simplelog.formatters.base_formatter import BaseFormatter
from simplelog.formatters.console_formatter import ConsoleFormatter
from simplelog.formatters.detailed_formatter import DetailedFormatter
from simplelog.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "ConsoleFormatter",
    "DetailedFormatter",
    "TextFormatter",
]
