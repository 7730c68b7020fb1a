"""StringType: `str` values, optionally constrained by a regex."""

import re
from typing import Any

from rulekit.kernel.context import Context, ReasonKind
from rulekit.kernel.rule import Check, Rule, RuleOptions, TypeMatch, as_step


class StringOptions(RuleOptions):
    pattern: str | None = None  # Matched with re.search


def is_string(value: Any, path: tuple, context: Context) -> str:
    if not isinstance(value, str):
        raise context.error(path, "String", ReasonKind.TYPE, "String", value)
    return value


def to_pattern_check(pattern: re.Pattern[str]) -> Check:
    def check(value: str, path: tuple, context: Context) -> str:
        if pattern.search(value) is None:
            raise context.error(path, "String", ReasonKind.PATTERN, pattern.pattern, value)
        return value

    return check


class StringType(Rule):
    type = "String"
    options_class = StringOptions

    def __init__(self, options: StringOptions | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self.pattern = re.compile(self.options.pattern) if self.options.pattern is not None else None

        self.tests.append(as_step(is_string))
        if self.pattern is not None:
            self.tests.append(as_step(to_pattern_check(self.pattern)))

    def is_type(self, value: Any) -> TypeMatch:
        if not isinstance(value, str):
            return TypeMatch.NO_MATCH
        if self.pattern is not None and self.pattern.search(value) is None:
            return TypeMatch.NO_MATCH
        return TypeMatch.MATCH
