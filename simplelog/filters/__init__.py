"""
Log filters module

Decides which entries reach the filtered dispatch path.
"""

from simplelog.filters.level_filter import LevelFilter

__all__ = [
    "LevelFilter",
]
