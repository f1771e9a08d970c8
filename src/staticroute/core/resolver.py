"""Request resolution.

Ties the resolution plan to file reads and response assembly. A request reads
at most MAX_ATTEMPTS files: the primary candidate and, in single-page app
mode, the root index.html.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from staticroute.core.errors import AccessError, ReadError
from staticroute.core.files import FileSystem, LocalFileSystem
from staticroute.core.mime import mime_type_for
from staticroute.core.paths import RequestPath
from staticroute.core.resolution import MAX_ATTEMPTS, ResolutionPlan, build_plan
from staticroute.core.response import Response, ResponseTemplate
from staticroute.core.types import Mode

if TYPE_CHECKING:
    from staticroute.config import SiteConfig

logger = logging.getLogger(__name__)


class Resolver:
    """Resolves request paths to responses for one site root.

    Holds no per-request state, so a single instance serves all concurrent
    requests.
    """

    def __init__(
        self,
        root: Path,
        mode: Mode,
        filesystem: FileSystem,
        template: ResponseTemplate | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            root: Site root directory
            mode: Serving mode
            filesystem: File access used for every read
            template: Response settings (default: no extra headers, empty 404)
        """
        self._root = root
        self._mode = mode
        self._filesystem = filesystem
        self._template = template or ResponseTemplate()

    @classmethod
    def from_config(cls, config: SiteConfig) -> Resolver:
        """Create a resolver reading from the local disk.

        Loads the custom not-found page once, if configured.

        Raises:
            FileNotFoundError: If not_found_page is configured but missing
        """
        template = ResponseTemplate(headers=dict(config.headers))
        if config.not_found_page is not None:
            page_path = config.root_dir / config.not_found_page
            if not page_path.is_file():
                raise FileNotFoundError(f"Not-found page not found: {page_path}")
            template = ResponseTemplate(
                headers=template.headers,
                not_found_body=page_path.read_bytes(),
                not_found_content_type=mime_type_for(page_path.suffix),
            )

        filesystem = LocalFileSystem(config.root_dir, follow_symlinks=config.follow_symlinks)
        return cls(config.root_dir, config.mode, filesystem, template)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def mode(self) -> Mode:
        return self._mode

    def plan(self, path: str | RequestPath) -> ResolutionPlan:
        """Build the resolution plan for a request path."""
        if isinstance(path, str):
            path = RequestPath.parse(path)
        return build_plan(self._mode, path)

    async def resolve(self, path: str | RequestPath) -> Response:
        """Resolve a request path to a 200 or 308 response.

        Args:
            path: Decoded URL path or parsed RequestPath

        Returns:
            Response for the first candidate that could be read

        Raises:
            ReadError: If no candidate could be read; the error of the last
                attempt is raised
        """
        plan = self.plan(path)
        last_error: ReadError | None = None

        for attempt, step in enumerate(plan.attempts(), start=1):
            if attempt > MAX_ATTEMPTS:
                raise RuntimeError(f"Resolution plan for {path} exceeds {MAX_ATTEMPTS} attempts")
            try:
                body = await self._read(step.candidate)
            except ReadError as e:
                last_error = e
                if step.fallback is not None:
                    logger.debug(
                        f"{step.candidate} not readable, falling back to {step.fallback.candidate}"
                    )
                continue

            if step.redirect is not None:
                return self._template.redirect(step.redirect)
            return self._template.ok(body, step.candidate.extension)

        assert last_error is not None
        raise last_error

    async def respond(self, path: str | RequestPath) -> Response:
        """Resolve a request path, answering 404 when nothing can be read."""
        try:
            return await self.resolve(path)
        except AccessError as e:
            logger.debug(f"Not found: {e}")
        except ReadError as e:
            logger.warning(f"Read failed for {path}: {e}")
        return self._template.not_found()

    async def _read(self, candidate: RequestPath) -> bytes:
        fs_path = candidate.with_root(self._root)
        return await self._filesystem.read(fs_path)
