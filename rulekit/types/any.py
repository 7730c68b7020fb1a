"""AnyType: accepts every value."""

from typing import Any

from rulekit.kernel.rule import Rule, TypeMatch


class AnyType(Rule):
    """Rule with no built-in tests; useful as a value rule in patterns."""

    type = "Any"

    def is_type(self, value: Any) -> TypeMatch:
        return TypeMatch.MATCH
