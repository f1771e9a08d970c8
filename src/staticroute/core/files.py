"""Filesystem access for resolved candidates.

Reads whole files and classifies failures. Holds no resolution logic.
"""

import asyncio
import os
from pathlib import Path
from typing import Protocol

from staticroute.core.errors import AccessError, PathEscapeError, UnknownError

_ACCESS_ERRORS = (
    FileNotFoundError,
    NotADirectoryError,
    IsADirectoryError,
    PermissionError,
)


class FileSystem(Protocol):
    """Read-only file access used by the resolver."""

    async def read(self, path: Path) -> bytes:
        """Return the full contents of a file.

        Raises:
            AccessError: File missing, is a directory, or permission denied
            UnknownError: Any other I/O failure
        """
        ...


class LocalFileSystem:
    """Reads files from the local disk in a worker thread."""

    def __init__(self, root: Path, *, follow_symlinks: bool = False) -> None:
        """Initialize filesystem access for a site root.

        Args:
            root: Site root directory
            follow_symlinks: Allow symlinks that point outside root
        """
        self._root = Path(os.path.abspath(root))
        self._follow_symlinks = follow_symlinks

    async def read(self, path: Path) -> bytes:
        try:
            return await asyncio.to_thread(self._read_sync, path)
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            raise UnknownError(path, "read cancelled") from None

    def _read_sync(self, path: Path) -> bytes:
        if not self._follow_symlinks:
            self._check_real_path(path)
        try:
            return path.read_bytes()
        except _ACCESS_ERRORS as e:
            raise AccessError(path, e.strerror or type(e).__name__) from e
        except ValueError as e:
            raise AccessError(path, str(e)) from e
        except OSError as e:
            raise UnknownError(path, e.strerror or str(e)) from e

    def _check_real_path(self, path: Path) -> None:
        real_root = os.path.realpath(self._root)
        real_path = os.path.realpath(path)
        if real_path != real_root and os.path.commonpath([real_root, real_path]) != real_root:
            raise PathEscapeError(path, "symlink points outside root directory")
