"""
Text formatter with customizable template

Formats log entries using a template string with placeholders
"""

from simplelog.core.log_entry import LogEntry
from simplelog.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    Supports placeholders for all LogEntry fields.
    """

    DEFAULT_TEMPLATE = "{time} ({severity}) {tags}{message}"

    def __init__(
        self,
        template: str = None,
        time_format: str = "%H:%M:%S",
        date_format: str = "%Y-%m-%d"
    ):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {time}: Time of creation
                     - {date}: Date of creation
                     - {severity}: Severity name
                     - {severity:5}: Severity with padding
                     - {module}: Module tag ("" when absent)
                     - {location}: Source location ("" when absent)
                     - {tags}: "[module] location " with absent parts left out
                     - {message}: Log message
            time_format: strftime format for {time}
            date_format: strftime format for {date}

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{severity} - {message}")

            # Date first
            formatter = TextFormatter(
                "{date} {time} [{severity:5}] {module}: {message}"
            )
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.time_format = time_format
        self.date_format = date_format

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        format_dict = {
            "time": entry.created_at.strftime(self.time_format),
            "date": entry.created_at.strftime(self.date_format),
            "severity": entry.severity.name,
            "module": entry.module or "",
            "location": entry.source_location or "",
            "tags": self.tags(entry),
            "message": entry.content,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {entry.content}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
