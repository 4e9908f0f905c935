from dataclasses import dataclass
from typing import Any

from .errors import InvalidTargetError
from .matchers import Matcher

TARGET_SEPARATOR = "#"


@dataclass(frozen=True)
class Target:
    class_name: str
    method: str

    def as_dict(self) -> dict[str, str]:
        return {"class": self.class_name, "method": self.method}


def parse_target(to: str) -> Target:
    """Turn ``"users#index"`` into ``Target("Users", "index")``.

    The class segment is capitalized the way ``str.capitalize`` does it,
    so ``"USERS#index"`` and ``"users#index"`` name the same class.
    """
    if not isinstance(to, str):
        raise InvalidTargetError(repr(to), "target must be a string")

    parts = to.split(TARGET_SEPARATOR)
    if len(parts) != 2:
        raise InvalidTargetError(to, f"expected exactly one {TARGET_SEPARATOR!r}")

    klass, method = parts
    if not klass or not method:
        raise InvalidTargetError(to, "class and method must both be non-empty")

    return Target(class_name=klass.capitalize(), method=method)


@dataclass(frozen=True)
class RouteEntry:
    matcher: Matcher
    target: Target


@dataclass(frozen=True)
class Route:
    """Read-only view over the entry that matched a request."""

    http_method: str
    entry: RouteEntry

    @property
    def matcher(self) -> Matcher:
        return self.entry.matcher

    @property
    def target(self) -> Target:
        return self.entry.target

    @property
    def class_name(self) -> str:
        return self.entry.target.class_name

    @property
    def method(self) -> str:
        return self.entry.target.method

    def describe(self) -> dict[str, Any]:
        return {
            "http_method": self.http_method,
            "matcher": self.matcher.describe(),
            **self.target.as_dict(),
        }
