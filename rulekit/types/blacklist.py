"""BlacklistType: rejects any value found in an exclusion list."""

from typing import Any

from rulekit.kernel.context import Context, ReasonKind
from rulekit.kernel.rule import Check, Rule, RuleOptions, TypeMatch, as_step


class BlacklistOptions(RuleOptions):
    blacklist: list[Any] | None = None


def to_blacklist_check(blacklist: list[Any]) -> Check:
    def check(value: Any, path: tuple, context: Context) -> Any:
        if value in blacklist:
            raise context.error(path, "Blacklist", ReasonKind.BLACKLIST, blacklist, value)
        return value

    return check


class BlacklistType(Rule):
    type = "Blacklist"
    options_class = BlacklistOptions

    def __init__(self, options: BlacklistOptions | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self.blacklist = list(self.options.blacklist) if self.options.blacklist is not None else []

        if self.options.blacklist is not None:
            self.tests.append(as_step(to_blacklist_check(self.blacklist)))

    def is_type(self, value: Any) -> TypeMatch:
        return TypeMatch.NO_MATCH if value in self.blacklist else TypeMatch.MATCH
