import logging
import re
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .errors import RouterFrozenError
from .matchers import Matcher, build_matcher
from .metrics import ROUTE_RESOLUTIONS, ROUTES_REGISTERED
from .route import Route, RouteEntry, parse_target

logger = logging.getLogger(__name__)

PathSpec = Union[str, re.Pattern, Matcher]


def normalize_method(method: str) -> str:
    return method.strip().lower()


class Router:
    r"""Method-bucketed route table with first-match resolution.

    Entries are kept per HTTP method in registration order, and the first
    entry whose matcher accepts the path wins. There is no specificity
    ranking, so register narrow patterns before broad ones::

        router = Router()
        router.get("/users", to="users#index")
        router.get(re.compile(r"\A/users/\d+\Z"), to="users#show")

        router.resolve("GET", "/users/42").target  # Target("Users", "show")
    """

    def __init__(self) -> None:
        self._routes: dict[str, Sequence[RouteEntry]] = {}
        self._frozen = False

    def register(self, method: str, path: PathSpec, to: str) -> RouteEntry:
        if self._frozen:
            raise RouterFrozenError(
                f"Cannot register {method.upper()} {path!r}: router is frozen"
            )

        http_method = normalize_method(method)
        entry = RouteEntry(matcher=build_matcher(path), target=parse_target(to))
        bucket = self._routes.setdefault(http_method, [])
        bucket.append(entry)
        ROUTES_REGISTERED.labels(method=http_method).set(len(bucket))

        logger.debug(f"Registered {http_method.upper()} {entry.matcher.describe()} -> {to}")
        return entry

    def get(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("get", path, to)

    def post(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("post", path, to)

    def put(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("put", path, to)

    def delete(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("delete", path, to)

    def patch(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("patch", path, to)

    def head(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("head", path, to)

    def options(self, path: PathSpec, to: str) -> RouteEntry:
        return self.register("options", path, to)

    def configure(self, block: Callable[["Router"], Any]) -> "Router":
        """Run ``block(self)`` so a batch of registrations reads as one unit.

        Returns the router, which also lets ``@router.configure`` decorate a
        plain function.
        """
        block(self)
        return self

    def freeze(self) -> None:
        if self._frozen:
            return
        self._frozen = True
        self._routes = {method: tuple(entries) for method, entries in self._routes.items()}
        logger.info(f"Route table frozen with {len(self)} routes")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def entries(self, method: str) -> tuple[RouteEntry, ...]:
        return tuple(self._routes.get(normalize_method(method), ()))

    @property
    def routes(self) -> dict[str, tuple[RouteEntry, ...]]:
        return {method: tuple(entries) for method, entries in self._routes.items()}

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._routes.values())

    def resolve(self, request_method: str, request_path: str) -> Optional[Route]:
        http_method = normalize_method(request_method)
        # one series per registered method, plus "other"
        metric_method = http_method if http_method in self._routes else "other"

        for entry in self._routes.get(http_method, ()):
            if entry.matcher.matches(request_path):
                ROUTE_RESOLUTIONS.labels(method=metric_method, outcome="matched").inc()
                return Route(http_method=http_method, entry=entry)

        ROUTE_RESOLUTIONS.labels(method=metric_method, outcome="unmatched").inc()
        logger.debug(f"No route for {http_method.upper()} {request_path}")
        return None

    def route_for(self, environ: Mapping[str, Any]) -> Optional[Route]:
        return self.resolve(environ["REQUEST_METHOD"], environ["PATH_INFO"])

    def route_for_scope(self, scope: Mapping[str, Any]) -> Optional[Route]:
        return self.resolve(scope["method"], scope["path"])
