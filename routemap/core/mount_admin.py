from starlette.types import ASGIApp, Scope, Receive, Send


def normalize_admin_prefix(prefix: str) -> str:
    """``/_admin`` becomes ``/_admin/``; prefixes ending in ``/`` or ``_`` are kept."""
    if prefix.endswith(("/", "_")):
        return prefix
    return f"{prefix}/"


class MountAdmin:
    """Send admin-prefixed HTTP paths to ``admin_app``, everything else to ``main_app``."""

    def __init__(self, admin_app: ASGIApp, main_app: ASGIApp, prefix: str = "/__") -> None:
        self.admin_app = admin_app
        self.main_app = main_app
        self.prefix = normalize_admin_prefix(prefix)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].startswith(self.prefix):
            await self.admin_app(scope, receive, send)
        else:
            await self.main_app(scope, receive, send)
