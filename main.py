import uvicorn
from routemap.config.settings import load_settings
from routemap.core.app_factory import build_router, create_app
from routemap.core.logging_setup import configure_logging

settings = load_settings()
configure_logging(settings.log_level)

router = build_router(settings)
app = create_app(router, admin_prefix=settings.admin_prefix)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
