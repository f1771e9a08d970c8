"""Request path model.

A request path is a tuple of directory segments plus an optional file name.
Paths whose last segment carries an extension are "file-shaped", all others
are "directory-shaped":

    /                      -> segments=(), file=None
    /about/                -> segments=("about",), file=None
    /about/index.html      -> segments=("about",), file=FileName("index", "html")
    /assets/app.min.js     -> segments=("assets",), file=FileName("app.min", "js")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from staticroute.core.errors import PathEscapeError

INDEX_FILE = "index.html"


@dataclass(frozen=True)
class FileName:
    """File name split at its last dot."""

    stem: str
    extension: str

    @classmethod
    def from_segment(cls, segment: str) -> FileName | None:
        """Classify a single path segment.

        Returns:
            FileName if the segment has at least two non-empty dot-separated
            parts, None if it should be treated as a directory
        """
        parts = segment.split(".")
        if len([part for part in parts if part]) < 2 or not parts[-1]:
            return None
        return cls(stem=".".join(parts[:-1]), extension=parts[-1])

    def __str__(self) -> str:
        return f"{self.stem}.{self.extension}"


@dataclass(frozen=True)
class RequestPath:
    """Parsed, immutable request path."""

    segments: tuple[str, ...] = ()
    file: FileName | None = None

    @classmethod
    def root(cls) -> RequestPath:
        """Return the empty directory-shaped path ("/")."""
        return cls()

    @classmethod
    def parse(cls, raw: str) -> RequestPath:
        """Parse a decoded URL path.

        Empty segments (leading, trailing and repeated slashes) are dropped.
        Never raises; "" and "/" both parse to the root path.

        Args:
            raw: URL path, e.g. "/docs/guide/index.html"

        Returns:
            Parsed RequestPath
        """
        segments = [segment for segment in raw.split("/") if segment]
        if not segments:
            return cls.root()
        return cls._from_segments(tuple(segments[:-1]), segments[-1])

    @classmethod
    def _from_segments(cls, directories: tuple[str, ...], last: str) -> RequestPath:
        file = FileName.from_segment(last)
        if file is None:
            return cls(segments=(*directories, last))
        return cls(segments=directories, file=file)

    @property
    def is_file(self) -> bool:
        return self.file is not None

    @property
    def is_root(self) -> bool:
        """True when the path has no directory segments."""
        return not self.segments

    @property
    def is_index(self) -> bool:
        """True when the file name is exactly index.html."""
        return self.file is not None and str(self.file) == INDEX_FILE

    @property
    def extension(self) -> str:
        return self.file.extension if self.file is not None else ""

    def parts(self) -> tuple[str, ...]:
        """All segments including the file name, if any."""
        if self.file is None:
            return self.segments
        return (*self.segments, str(self.file))

    def append(self, segment: str) -> RequestPath:
        """Return a new path with a trailing segment added.

        An existing file name becomes a directory segment; the new segment is
        classified the same way parse() classifies the last segment.
        """
        return self._from_segments(self.parts(), segment)

    def parent(self) -> RequestPath | None:
        """Return the path without its last segment, or None at the root.

        The result is always directory-shaped.
        """
        if self.file is not None:
            return RequestPath(segments=self.segments)
        if not self.segments:
            return None
        return RequestPath(segments=self.segments[:-1])

    def with_root(self, root: Path) -> Path:
        """Join the path onto a root directory.

        The result is lexically normalized ("." and ".." resolved, separators
        collapsed) and must stay inside root.

        Args:
            root: Root directory (absolute or relative to the process)

        Returns:
            Absolute filesystem path beneath root

        Raises:
            PathEscapeError: If the normalized path is outside root
        """
        base = os.path.abspath(root)
        parts = self.parts()
        if any("\x00" in part for part in parts):
            raise PathEscapeError(self, "invalid character in path")

        joined = os.path.normpath(os.path.join(base, *parts))
        if joined != base and os.path.commonpath([base, joined]) != base:
            raise PathEscapeError(self, "outside root directory")
        return Path(joined)

    def __str__(self) -> str:
        if self.file is not None:
            return "/" + "/".join(self.parts())
        if not self.segments:
            return "/"
        return "/" + "/".join(self.segments) + "/"
