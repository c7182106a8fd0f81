"""Logging formatters for console output.

- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- HybridConsoleFormatter: Message only for INFO, colored and structured
  for everything else
"""

import logging

from gitconf.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for different log levels."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level name.

        The record's levelname is swapped for the colored variant only for
        the duration of the call.

        Args:
            record: The log record to format

        Returns:
            Formatted log message

        """
        if record.levelname not in LOG_COLORS:
            return super().format(record)

        color = LOG_COLORS[record.levelname]
        reset = LOG_COLORS["RESET"]
        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{reset}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with plain INFO messages and structured others.

    Example Output:
        INFO:     "Set user.name"
        WARNING:  "12:30:45 - WARNING - Lock file is stale"

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for non-INFO messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record using the plain or structured layout."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._colored_formatter.format(record)
