"""Exception classes for gitconf operations."""


class GitConfError(Exception):
    """Base exception for gitconf operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ParseError(GitConfError):
    """Raised when configuration text does not follow the grammar."""

    error_prefix = "Bad config"

    def __init__(self, line: int, reason: str) -> None:
        """Initialize parse error.

        Args:
            line: 1-based number of the offending line.
            reason: Human-readable description of the problem.

        """
        super().__init__(reason, target=f"line {line}")
        self.line = line
        self.reason = reason


class InvalidPathError(GitConfError):
    """Raised when a dotted key path cannot be resolved."""

    error_prefix = "Invalid key"

    def __init__(self, path: str, reason: str) -> None:
        """Initialize path error.

        Args:
            path: The dotted path as supplied by the caller.
            reason: Why the path was rejected.

        """
        super().__init__(reason, target=path)
        self.path = path
        self.reason = reason


class LockError(GitConfError):
    """Raised when the config file lock cannot be acquired."""

    error_prefix = "Lock failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize lock error.

        Args:
            message: Error message describing the failure.
            target: Optional lock file path.
            cause: Underlying OS error, when there is one.

        """
        super().__init__(message, target=target)
        self.cause = cause
