"""Response assembly.

Builds framework-independent responses that the HTTP layer turns into
aiohttp responses.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from staticroute.core.mime import mime_type_for
from staticroute.core.paths import RequestPath


@dataclass(frozen=True)
class Response:
    """Outgoing response."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class ResponseTemplate:
    """Site-wide response settings.

    Attributes:
        headers: Extra headers added to every response
        not_found_body: Body for 404 responses (empty by default)
        not_found_content_type: Content-Type of not_found_body
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    not_found_body: bytes = b""
    not_found_content_type: str | None = None

    def ok(self, body: bytes, extension: str) -> Response:
        headers = {**self.headers, "Content-Type": mime_type_for(extension)}
        return Response(status=200, headers=headers, body=body)

    def redirect(self, target: RequestPath) -> Response:
        """308 to the canonical form of target, without a body."""
        headers = {**self.headers, "Location": str(target)}
        return Response(status=308, headers=headers)

    def not_found(self) -> Response:
        headers = dict(self.headers)
        if self.not_found_body and self.not_found_content_type:
            headers["Content-Type"] = self.not_found_content_type
        return Response(status=404, headers=headers, body=self.not_found_body)
