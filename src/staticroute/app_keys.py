"""Application keys for type-safe app configuration access."""

from aiohttp import web

from staticroute.core.resolver import Resolver

resolver_key = web.AppKey("resolver", Resolver)
