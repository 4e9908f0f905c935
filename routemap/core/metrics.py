from prometheus_client import (
    Counter,
    Gauge,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST
)

registry = CollectorRegistry()

ROUTE_RESOLUTIONS = Counter(
    "routemap_resolutions_total",
    "Route resolutions by HTTP method and outcome",
    ["method", "outcome"],
    registry=registry
)

ROUTES_REGISTERED = Gauge(
    "routemap_registered_routes",
    "Number of routes per HTTP method in the most recently configured or served router",
    ["method"],
    registry=registry
)


def render_prometheus_metrics() -> tuple[bytes, str]:
    return generate_latest(registry), CONTENT_TYPE_LATEST


def record_route_table(routes: dict[str, tuple]) -> None:
    ROUTES_REGISTERED.clear()
    for method, entries in routes.items():
        ROUTES_REGISTERED.labels(method=method).set(len(entries))
