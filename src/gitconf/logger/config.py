"""Bootstrap settings for the logging system.

gitconf has no settings file of its own; logging is configured from the
environment:

    GITCONF_LOG_LEVEL: Console log level (default: WARNING)
    GITCONF_LOG_DIR: Directory for gitconf.log; file logging is off when
        unset
"""

import logging
import os
from pathlib import Path

from gitconf.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
    LOG_LEVEL_ENV,
)


def _valid_level(name: str | None, default: str) -> str:
    if name and isinstance(logging.getLevelName(name.upper()), int):
        return name.upper()
    return default


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load console level, file level and log file path.

    Returns:
        Tuple of (console_level, file_level, log_path) where log_path is
        None when file logging is disabled

    Example:
        >>> # GITCONF_LOG_DIR=~/logs GITCONF_LOG_LEVEL=info
        >>> load_log_settings()
        ('INFO', 'DEBUG', PosixPath('/home/user/logs/gitconf.log'))

    """
    console_level = _valid_level(
        os.getenv(LOG_LEVEL_ENV), DEFAULT_CONSOLE_LOG_LEVEL
    )
    env_log_dir = os.getenv(LOG_DIR_ENV)
    log_path = (
        Path(env_log_dir).expanduser() / LOG_FILE_NAME if env_log_dir else None
    )
    return console_level, DEFAULT_LOG_LEVEL, log_path
