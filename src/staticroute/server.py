"""aiohttp server for staticroute.

Application factory and the catch-all route that hands every request path to
the resolver.
"""

import logging
from urllib.parse import quote

from aiohttp import web

from staticroute.app_keys import resolver_key
from staticroute.config import Config
from staticroute.core.resolver import Resolver
from staticroute.core.response import Response

logger = logging.getLogger(__name__)


async def serve_path(request: web.Request) -> web.Response:
    """Serve a request path from the site root.

    HEAD is routed here as well; aiohttp drops the body for it.
    """
    resolver = request.app[resolver_key]
    response = await resolver.respond(request.match_info["path"])
    return _to_web_response(response, request)


def _to_web_response(response: Response, request: web.Request) -> web.Response:
    headers = dict(response.headers)
    location = headers.get("Location")
    if location is not None:
        location = quote(location, safe="/")
        query = request.rel_url.raw_query_string
        if query:
            location = f"{location}?{query}"
        headers["Location"] = location

    return web.Response(
        status=response.status,
        headers=headers,
        body=response.body or None,
    )


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        FileNotFoundError: If the configured not-found page is missing
    """
    app = web.Application()

    site = config.site
    if not site.root_dir.is_dir():
        logger.warning(f"Root directory does not exist: {site.root_dir}")

    app[resolver_key] = Resolver.from_config(site)

    app.router.add_get("/{path:.*}", serve_path)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
