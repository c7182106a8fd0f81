"""Centralized constants module for gitconf.

This module serves as the single source of truth for all shared constants
across the gitconf codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from gitconf.constants import BARE_VALUE
"""

from typing import Final

# =============================================================================
# Grammar Constants
# =============================================================================

# Characters that start a comment outside of a quoted value
COMMENT_CHARS: Final[tuple[str, ...]] = ("#", ";")

# Whitespace recognised between tokens and trimmed around unquoted values
WHITESPACE_CHARS: Final[tuple[str, ...]] = (" ", "\t")

# Escape sequences accepted inside values (escape letter -> decoded char)
VALUE_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "t": "\t",
    "b": "\b",
}

# Reverse table used when rendering values canonically
VALUE_ENCODINGS: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\b": "\\b",
}

# Characters that force a rendered value to be double-quoted
QUOTE_TRIGGER_CHARS: Final[tuple[str, ...]] = ("#", ";", "\\", '"')

# Value returned for a bare key (no "=") such as "[core]\n\tbare"
BARE_VALUE: Final[str] = "true"

# Indentation used for entries created by set/append
DEFAULT_INDENT: Final[str] = "\t"

# Line terminators
NEWLINE_LF: Final[str] = "\n"
NEWLINE_CRLF: Final[str] = "\r\n"

# UTF-8 byte order mark as decoded text
UTF8_BOM: Final[str] = "\ufeff"

# Encoding used to turn file bytes into text and back
FILE_ENCODING: Final[str] = "utf-8"
FILE_ENCODING_ERRORS: Final[str] = "surrogateescape"

# =============================================================================
# File Location Constants
# =============================================================================

GIT_DIR_NAME: Final[str] = ".git"
LOCAL_CONFIG_FILE_NAME: Final[str] = "config"
GLOBAL_CONFIG_FILE_NAME: Final[str] = ".gitconfig"
XDG_CONFIG_SUBPATH: Final[tuple[str, ...]] = ("git", "config")
LOCK_SUFFIX: Final[str] = ".lock"
LOCK_ACQUIRE_ATTEMPTS: Final[int] = 3

# =============================================================================
# CLI Exit Codes (mirrors `git config`)
# =============================================================================

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_KEY_NOT_FOUND: Final[int] = 1
EXIT_INVALID_PATH: Final[int] = 1
EXIT_PARSE_ERROR: Final[int] = 3
EXIT_IO_ERROR: Final[int] = 4
EXIT_NOTHING_TO_UNSET: Final[int] = 5

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "DEBUG"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
LOG_FILE_NAME: Final[str] = "gitconf.log"
LOG_LEVEL_ENV: Final[str] = "GITCONF_LOG_LEVEL"
LOG_DIR_ENV: Final[str] = "GITCONF_LOG_DIR"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}
