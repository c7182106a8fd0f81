"""Main logger module providing public API functions.

- setup_logging(): Configure the queue-based root logger once
- get_logger(): Get a module logger, initializing the root if needed
- temporary_console_level(): Change console verbosity for one command
- flush_all_handlers(): Wait for queued records to be written
- clear_logger_state(): Reset everything, for tests
"""

import atexit
import contextlib
import logging
import time
from collections.abc import Iterator
from pathlib import Path

from gitconf.logger.config import load_log_settings
from gitconf.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from gitconf.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    timeout = 5.0
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > timeout:
            break
        time.sleep(0.01)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the logger called ``name``.

    The root ``gitconf`` logger is initialized exactly once; child loggers
    propagate to it. Arguments left as None come from load_log_settings().

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level
        log_file: Path to log file; None keeps the environment default

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
            )
    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create a logger.

    Best Practice:
        >>> logger = get_logger(__name__)
        >>> logger.info("Set %s", path)  # %-style, never f-strings

    """
    return setup_logging(name=name)


@contextlib.contextmanager
def temporary_console_level(level: str) -> Iterator[None]:
    """Temporarily change the console handler level.

    Args:
        level: Level name to use inside the block (e.g. "DEBUG")

    """
    state = get_state()
    handler = state.console_handler
    if handler is None:
        yield
        return

    state.saved_console_level = handler.level
    handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    try:
        yield
    finally:
        flush_all_handlers()
        handler.setLevel(state.saved_console_level)
        state.saved_console_level = None


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Warning:
        Intended for tests only; it disrupts all active logging.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.console_handler = None
        state.saved_console_level = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
