from typing import Optional
from starlette.types import ASGIApp
from routemap.config.routes import ROUTE_CONFIG
from routemap.config.settings import Settings
from routemap.core.admin_router import AdminRouter
from routemap.core.mount_admin import MountAdmin
from routemap.core.resolver_app import ResolverApp
from routemap.core.route_config import load_route_config, load_route_file
from routemap.core.router import Router
from routemap.core.trace import TraceMiddleware


def build_router(settings: Settings) -> Router:
    router = Router()
    if settings.routes_file:
        return load_route_file(router, settings.routes_file)
    return load_route_config(router, ROUTE_CONFIG)


def create_app(router: Router, admin_prefix: str = "/__", app: Optional[ASGIApp] = None) -> ASGIApp:
    resolver = TraceMiddleware(ResolverApp(router, app=app))
    admin = AdminRouter(router, prefix=admin_prefix)
    return MountAdmin(admin, resolver, prefix=admin_prefix)
