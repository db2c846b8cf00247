"""ASGI middlewares applied to every request."""

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


class ForceHTMLMiddleware:
    """Overrides the Content-Type of every HTTP response with UTF-8 HTML."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_as_html(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers["Content-Type"] = HTML_CONTENT_TYPE
            await send(message)

        await self.app(scope, receive, send_as_html)


class RemoveTrailingSlashMiddleware:
    """Strips one trailing slash from the request path before routing, except for ``/``."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path: str = scope["path"]
            if path != "/" and path.endswith("/"):
                scope = dict(scope)
                scope["path"] = path[:-1]
                raw_path = scope.get("raw_path")
                if raw_path and raw_path.endswith(b"/"):
                    scope["raw_path"] = raw_path[:-1]

        await self.app(scope, receive, send)
