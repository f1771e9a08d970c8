"""Mode-aware resolution of request paths.

Decides which file to try for a request, without touching the filesystem:

    Mode           Shape                         Plan
    -------------  ----------------------------  ---------------------------------
    normal         any                           path
    pretty_url     directory                     path + index.html
    pretty_url     file, index.html              path, redirect to parent
    pretty_url     file, other                   path
    spa            directory                     /index.html
    spa            file, index.html at root      /index.html, redirect to /
    spa            file, other                   path, fallback to plan for /

Rows are checked top to bottom and the first match wins.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from staticroute.core.paths import INDEX_FILE, RequestPath
from staticroute.core.types import Mode

# Primary candidate plus the single-page app fallback.
MAX_ATTEMPTS = 2


@dataclass(frozen=True)
class ResolutionPlan:
    """What to read for a request and what to do with the result.

    Attributes:
        candidate: Path to read, relative to the site root
        redirect: If set, a successful read answers with a 308 to this path
        fallback: Plan to try when reading candidate fails
    """

    candidate: RequestPath
    redirect: RequestPath | None = None
    fallback: ResolutionPlan | None = None

    def attempts(self) -> Iterator[ResolutionPlan]:
        """Yield this plan followed by its fallbacks, in order."""
        plan: ResolutionPlan | None = self
        while plan is not None:
            yield plan
            plan = plan.fallback


def build_plan(mode: Mode, path: RequestPath) -> ResolutionPlan:
    """Build the resolution plan for a request path.

    Args:
        mode: Serving mode of the site
        path: Parsed request path

    Returns:
        ResolutionPlan for the request
    """
    match mode:
        case Mode.NORMAL:
            return ResolutionPlan(candidate=path)
        case Mode.PRETTY_URL:
            return _pretty_url_plan(path)
        case Mode.SINGLE_PAGE_APP:
            return _single_page_app_plan(path)
    raise ValueError(f"Unsupported mode: {mode!r}")


def _pretty_url_plan(path: RequestPath) -> ResolutionPlan:
    if not path.is_file:
        return ResolutionPlan(candidate=path.append(INDEX_FILE))
    if path.is_index:
        return ResolutionPlan(
            candidate=path,
            redirect=path.parent() or RequestPath.root(),
        )
    return ResolutionPlan(candidate=path)


def _single_page_app_plan(path: RequestPath) -> ResolutionPlan:
    root_index = RequestPath.root().append(INDEX_FILE)
    if not path.is_file:
        return ResolutionPlan(candidate=root_index)
    if path.is_index and path.is_root:
        return ResolutionPlan(candidate=root_index, redirect=RequestPath.root())
    # The root plan comes from the directory row, which never has a fallback.
    return ResolutionPlan(
        candidate=path,
        fallback=_single_page_app_plan(RequestPath.root()),
    )
