import uuid
import logging
import pytest
import httpx
from httpx import ASGITransport
from asgi_lifespan import LifespanManager
from starlette.responses import PlainTextResponse
from routemap.core.app_factory import create_app
from routemap.core.logging_setup import TraceLogFilter
from routemap.core.router import Router
from routemap.core.trace import trace_id_var


def build_app(downstream=None):
    router = Router()
    router.get("/api", to="api#index")
    return create_app(router, app=downstream)


# Downstream app that logs with the trace ID in context
async def app_with_logging(scope, receive, send):
    logger = logging.getLogger("test-observability")
    logger.info(f"Log triggered by trace ID: {trace_id_var.get()}")
    await PlainTextResponse("logged")(scope, receive, send)


@pytest.mark.anyio
async def test_trace_id_is_generated():
    app = build_app()

    async with LifespanManager(app):
        async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            res = await client.get("/api")
            trace_id = res.headers.get("X-Trace-ID")

            assert res.status_code == 200
            assert trace_id is not None
            assert uuid.UUID(trace_id)


@pytest.mark.anyio
async def test_trace_id_is_preserved_if_sent_by_client():
    app = build_app()

    async with LifespanManager(app):
        async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            given_id = str(uuid.uuid4())
            res = await client.get("/api", headers={"X-Trace-ID": given_id})
            assert res.headers["X-Trace-ID"] == given_id

            # 404s carry it too
            res = await client.get("/missing", headers={"X-Trace-ID": given_id})
            assert res.status_code == 404
            assert res.headers["X-Trace-ID"] == given_id


@pytest.mark.anyio
async def test_trace_id_appears_in_logs(caplog):
    caplog.set_level(logging.INFO, logger="test-observability")
    app = build_app(app_with_logging)

    async with LifespanManager(app):
        async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            res = await client.get("/api")
            assert res.status_code == 200

    trace_id = res.headers.get("X-Trace-ID")
    assert trace_id is not None
    assert f"Log triggered by trace ID: {trace_id}" in caplog.text
    assert trace_id_var.get() is None


def test_trace_log_filter_defaults_to_dash():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert TraceLogFilter().filter(record)
    assert record.trace_id == "-"
