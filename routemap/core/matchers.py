import re
from dataclasses import dataclass
from typing import Union

from .errors import InvalidMatcherError


@dataclass(frozen=True)
class ExactMatcher:
    path: str

    def matches(self, path: str) -> bool:
        return path == self.path

    def describe(self) -> dict[str, str]:
        return {"type": "exact", "path": self.path}


@dataclass(frozen=True)
class PatternMatcher:
    pattern: re.Pattern

    def matches(self, path: str) -> bool:
        # unanchored, like re.search; patterns anchor themselves when they need to
        return self.pattern.search(path) is not None

    def describe(self) -> dict[str, str]:
        return {"type": "pattern", "pattern": self.pattern.pattern}


Matcher = Union[ExactMatcher, PatternMatcher]


def build_matcher(path: Union[str, re.Pattern, Matcher]) -> Matcher:
    if isinstance(path, (ExactMatcher, PatternMatcher)):
        return path
    if isinstance(path, str):
        return ExactMatcher(path)
    if isinstance(path, re.Pattern):
        return PatternMatcher(path)
    raise InvalidMatcherError(path)
