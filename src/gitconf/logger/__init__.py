"""Logging utilities for gitconf.

This package provides:
- Colored console output on stderr (stdout carries command output)
- Optional rotating file log, enabled with GITCONF_LOG_DIR
- Non-blocking logging via QueueHandler/QueueListener
- Hierarchical logger naming (e.g., gitconf.config.parser)

Usage:
    >>> from gitconf.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Loaded %s", path)

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__) outside gitconf.config;
       engine modules use logging.getLogger(__name__) and never configure
       handlers
    2. Never call logging.basicConfig()
    3. Never use f-strings in log calls
    4. Handlers are ONLY attached to the root 'gitconf' logger
"""

from gitconf.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from gitconf.logger.handlers import ConfigurationError
from gitconf.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
    temporary_console_level,
)
from gitconf.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
    "temporary_console_level",
]
