from routemap.config.settings import Settings, load_settings
from routemap.core.app_factory import build_router
from routemap.core.route import Target


def test_defaults(monkeypatch):
    for name in ("ROUTEMAP_HOST", "ROUTEMAP_PORT", "ROUTEMAP_LOG_LEVEL",
                 "ROUTEMAP_ROUTES_FILE", "ROUTEMAP_ADMIN_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("routemap.config.settings.load_dotenv", lambda: None)

    assert load_settings() == Settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setattr("routemap.config.settings.load_dotenv", lambda: None)
    monkeypatch.setenv("ROUTEMAP_PORT", "9000")
    monkeypatch.setenv("ROUTEMAP_LOG_LEVEL", "debug")
    monkeypatch.setenv("ROUTEMAP_ADMIN_PREFIX", "/_admin/")

    settings = load_settings()
    assert settings.port == 9000
    assert settings.log_level == "debug"
    assert settings.admin_prefix == "/_admin/"


def test_build_router_uses_default_config():
    router = build_router(Settings())
    assert router.resolve("GET", "/widgets/blue-one").target == Target("Widgets", "show")


def test_build_router_uses_routes_file(tmp_path):
    routes_file = tmp_path / "routes.json"
    routes_file.write_text('{"get": [{"path": "/only", "to": "only#here"}]}')

    router = build_router(Settings(routes_file=str(routes_file)))
    assert len(router) == 1
    assert router.resolve("GET", "/only").target == Target("Only", "here")
