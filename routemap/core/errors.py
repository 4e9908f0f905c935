class RoutingError(Exception):
    """Base class for everything the router raises."""


class InvalidTargetError(RoutingError, ValueError):
    def __init__(self, target: str, reason: str = "expected 'class#method'"):
        self.target = target
        super().__init__(f"Invalid route target {target!r}: {reason}")


class InvalidMatcherError(RoutingError, TypeError):
    def __init__(self, path: object):
        self.path = path
        super().__init__(
            f"Route path must be a str or compiled pattern, got {type(path).__name__}"
        )


class RouterFrozenError(RoutingError, RuntimeError):
    pass


class RouteConfigError(RoutingError, ValueError):
    pass
