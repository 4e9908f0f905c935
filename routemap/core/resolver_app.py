import logging
from typing import Optional
from starlette.types import ASGIApp, Scope, Receive, Send
from starlette.responses import JSONResponse, PlainTextResponse
from .router import Router

logger = logging.getLogger(__name__)


class ResolverApp:
    """ASGI host that maps each request to a route target.

    Without a downstream ``app`` the resolved target is returned as JSON.
    With one, the ``Route`` is put on ``scope["route"]`` and the request is
    handed over; invoking the named class and method is up to that app.
    """

    def __init__(self, router: Router, app: Optional[ASGIApp] = None):
        self.router = router
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        if scope["type"] != "http":
            await PlainTextResponse("Unsupported", status_code=400)(scope, receive, send)
            return

        await self._handle_http(scope, receive, send)

    async def _handle_http(self, scope: Scope, receive: Receive, send: Send):
        method = scope["method"]
        path = scope["path"]
        logger.info(f"Incoming request: {method} {path}")

        route = self.router.route_for_scope(scope)
        if route is None:
            logger.warning(f"No route match for {method} {path}")
            await PlainTextResponse("Route not found", status_code=404)(scope, receive, send)
            return

        logger.info(f"Resolved {method} {path} -> {route.class_name}#{route.method}")

        if self.app is None:
            await JSONResponse(route.describe())(scope, receive, send)
            return

        scope["route"] = route
        await self.app(scope, receive, send)

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send):
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self.router.freeze()
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                logger.info("[routemap] Shutdown complete.")
                await send({"type": "lifespan.shutdown.complete"})
                return
