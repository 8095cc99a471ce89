"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Dispatcher that fans entries out to sinks
- LoggerBuilder: Builder pattern for logger construction
- ModuleLog: Handle with a fixed module tag
- LogEntry: Log entry data structure
- Severity: Severity enumeration
- LoggerConfig: Configuration management
"""

from simplelog.core.logger import Logger
from simplelog.core.logger_builder import LoggerBuilder
from simplelog.core.module_log import ModuleLog
from simplelog.core.log_entry import LogEntry
from simplelog.core.log_level import Severity
from simplelog.core.logger_config import LoggerConfig
from simplelog.core.source_location import here

__all__ = [
    "Logger",
    "LoggerBuilder",
    "ModuleLog",
    "LogEntry",
    "Severity",
    "LoggerConfig",
    "here",
]
