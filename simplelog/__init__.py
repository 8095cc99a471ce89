"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Simple Logging System - leveled, module-tagged logging with a
filtered console sink and an asynchronous batched file sink
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from simplelog.core.logger import Logger
from simplelog.core.logger_builder import LoggerBuilder
from simplelog.core.module_log import ModuleLog
from simplelog.core.log_entry import LogEntry
from simplelog.core.log_level import Severity
from simplelog.core.logger_config import LoggerConfig
from simplelog.core.source_location import here

# Import submodules (not all classes by default)
from simplelog import filters
from simplelog import formatters
from simplelog import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "ModuleLog",
    "LogEntry",
    "Severity",
    "LoggerConfig",
    "here",
    "filters",
    "formatters",
    "writers",
]
