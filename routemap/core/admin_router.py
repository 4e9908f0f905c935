import logging
from starlette.types import Scope, Receive, Send
from starlette.requests import Request
from starlette.responses import PlainTextResponse, JSONResponse, Response
from routemap.core.metrics import record_route_table, render_prometheus_metrics
from routemap.core.mount_admin import normalize_admin_prefix
from routemap.core.router import Router

logger = logging.getLogger(__name__)


class AdminRouter:
    def __init__(self, router: Router, prefix: str = "/__") -> None:
        self.router = router
        self.prefix = normalize_admin_prefix(prefix)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        path = scope.get("path", "")
        if path == f"{self.prefix}health":
            await self.health(scope, receive, send)
        elif path == f"{self.prefix}routes":
            await self.routes(scope, receive, send)
        elif path == f"{self.prefix}metrics":
            await self.metrics(scope, receive, send)
        elif path == f"{self.prefix}resolve":
            await self.resolve(scope, receive, send)
        else:
            await PlainTextResponse("Not Found", status_code=404)(scope, receive, send)

    async def health(self, scope: Scope, receive: Receive, send: Send) -> None:
        await PlainTextResponse("OK")(scope, receive, send)

    async def routes(self, scope: Scope, receive: Receive, send: Send) -> None:
        table = {
            method: [
                {"matcher": entry.matcher.describe(), **entry.target.as_dict()}
                for entry in entries
            ]
            for method, entries in self.router.routes.items()
        }
        await JSONResponse({"frozen": self.router.frozen, "routes": table})(scope, receive, send)

    async def metrics(self, scope: Scope, receive: Receive, send: Send) -> None:
        record_route_table(self.router.routes)
        data, content_type = render_prometheus_metrics()
        await Response(content=data, media_type=content_type)(scope, receive, send)

    async def resolve(self, scope: Scope, receive: Receive, send: Send) -> None:
        params = Request(scope, receive).query_params
        method = params.get("method", "GET")
        path = params.get("path")
        if not path:
            await JSONResponse({"error": "Missing 'path' query parameter"},
                               status_code=400)(scope, receive, send)
            return

        route = self.router.resolve(method, path)
        if route is None:
            logger.info(f"Admin resolve found no route for {method} {path}")
            await JSONResponse({"error": "No route", "method": method, "path": path},
                               status_code=404)(scope, receive, send)
            return

        await JSONResponse(route.describe())(scope, receive, send)
