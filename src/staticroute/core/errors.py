"""Classified errors for file reads.

All of them end up as a plain 404 for the client. The classes only exist so
the embedding application can tell them apart in logs and diagnostics.
"""


class ReadError(Exception):
    """A candidate file could not be read."""

    def __init__(self, path: object, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"{path}: {reason}" if reason else str(path)
        super().__init__(message)


class AccessError(ReadError):
    """File is missing, is a directory, or permission was denied."""


class PathEscapeError(AccessError):
    """Resolved path would leave the root directory.

    Subclasses AccessError so that it is handled exactly like a missing file.
    """


class UnknownError(ReadError):
    """Any other I/O failure while reading a file."""
