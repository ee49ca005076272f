"""
CORS middleware with paths that answer their own CORS.

The function endpoints accept any origin and send their own headers
(including on preflight), so the app-wide origin allow-list must not
intercept them.
"""
from typing import Sequence

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PathExemptCORSMiddleware(CORSMiddleware):
    def __init__(self, app: ASGIApp, exempt_prefixes: Sequence[str] = (), **kwargs):
        super().__init__(app, **kwargs)
        self.exempt_prefixes = tuple(exempt_prefixes)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self.exempt_prefixes and scope["path"].startswith(self.exempt_prefixes):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
