"""Custom exceptions for locksentinel."""


class LockSentinelError(Exception):
    """Base exception for all locksentinel errors."""


class LockParseError(LockSentinelError):
    """Raised when lock-file text has no recognizable structure."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)


class BatchFormatError(LockSentinelError):
    """Raised when a batch file header matches no known layout."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(f"Unrecognized batch file format: {header!r}")
