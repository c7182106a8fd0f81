"""Logger state management module.

Holds the global logger state singleton shared by every gitconf module so
that the root logger is configured exactly once.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        queue_listener: Background thread processing log records
        log_queue: Queue for log records
        console_handler: Console handler, kept for level changes
        saved_console_level: Level to restore after a temporary change

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None
        self.console_handler: logging.Handler | None = None
        self.saved_console_level: int | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state
