import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping, Union

from .errors import RouteConfigError
from .matchers import build_matcher
from .route import parse_target
from .router import Router

logger = logging.getLogger(__name__)


def load_route_config(router: Router, config: Mapping[str, Any]) -> Router:
    r"""Register every route in a declarative config, preserving order.

    The config maps an HTTP method to a list of route items. Each item has
    a ``to`` target and exactly one of ``path`` (exact match) or
    ``pattern`` (regular expression)::

        {
            "get": [
                {"path": "/users", "to": "users#index"},
                {"pattern": "\\A/users/\\d+\\Z", "to": "users#show"},
            ]
        }
    """
    if not isinstance(config, Mapping):
        raise RouteConfigError(f"Route config must be a mapping, got {type(config).__name__}")

    # everything is validated before the first registration; the table has no delete
    validated = []
    for method, items in config.items():
        if not isinstance(method, str):
            raise RouteConfigError(f"HTTP method must be a string, got {method!r}")
        if not isinstance(items, list):
            raise RouteConfigError(f"Routes for {method!r} must be a list")
        for index, item in enumerate(items):
            matcher = build_matcher(_matcher_from_item(method, index, item))
            parse_target(item["to"])
            validated.append((method, matcher, item["to"]))

    for method, matcher, to in validated:
        router.register(method, matcher, to)

    logger.info(f"Loaded {len(validated)} routes from config")
    return router


def load_route_file(router: Router, path: Union[str, Path]) -> Router:
    try:
        config = json.loads(Path(path).read_text())
    except json.JSONDecodeError as e:
        raise RouteConfigError(f"Route file {path} is not valid JSON: {e}") from e
    return load_route_config(router, config)


def _matcher_from_item(method: str, index: int, item: Any) -> Union[str, re.Pattern]:
    where = f"{method}[{index}]"
    if not isinstance(item, Mapping):
        raise RouteConfigError(f"{where}: route item must be a mapping")
    if "to" not in item:
        raise RouteConfigError(f"{where}: missing 'to'")

    has_path = "path" in item
    has_pattern = "pattern" in item
    if has_path == has_pattern:
        raise RouteConfigError(f"{where}: exactly one of 'path' or 'pattern' is required")

    if has_path:
        return item["path"]
    try:
        return re.compile(item["pattern"])
    except (re.error, TypeError) as e:
        raise RouteConfigError(f"{where}: bad pattern {item['pattern']!r}: {e}") from e
