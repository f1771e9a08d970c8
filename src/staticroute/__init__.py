"""staticroute - static site server with pretty URL and single-page app modes."""

from staticroute.core.errors import AccessError, PathEscapeError, ReadError, UnknownError
from staticroute.core.paths import RequestPath
from staticroute.core.resolution import ResolutionPlan, build_plan
from staticroute.core.resolver import Resolver
from staticroute.core.response import Response, ResponseTemplate
from staticroute.core.types import Mode

__all__ = [
    "AccessError",
    "Mode",
    "PathEscapeError",
    "ReadError",
    "RequestPath",
    "ResolutionPlan",
    "Resolver",
    "Response",
    "ResponseTemplate",
    "UnknownError",
    "build_plan",
]
