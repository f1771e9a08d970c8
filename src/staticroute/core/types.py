"""Core type definitions."""

from __future__ import annotations

from enum import StrEnum


class Mode(StrEnum):
    """Serving strategy for a site root.

    Fixed when the server starts; every request is resolved with the same mode.
    """

    NORMAL = "normal"
    PRETTY_URL = "pretty_url"
    SINGLE_PAGE_APP = "spa"

    @classmethod
    def parse(cls, value: str) -> Mode:
        """Parse a mode name from config or command line.

        Accepts any case and hyphens in place of underscores
        (e.g. "pretty-url", "SPA", "single-page-app").

        Raises:
            ValueError: If the name is not a known mode
        """
        normalized = value.strip().lower().replace("-", "_")
        if normalized == "single_page_app":
            return cls.SINGLE_PAGE_APP
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown mode {value!r} (expected one of: {choices})") from None
