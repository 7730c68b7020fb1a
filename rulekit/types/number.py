"""NumberType: int/float values with optional bounds."""

from typing import Any

from rulekit.kernel.context import Context, ReasonKind
from rulekit.kernel.rule import Rule, RuleOptions, TypeMatch, as_step


class NumberOptions(RuleOptions):
    min: float | None = None
    max: float | None = None


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_number(value: Any, path: tuple, context: Context) -> Any:
    if not _is_number(value):
        raise context.error(path, "Number", ReasonKind.TYPE, "Number", value)
    return value


class NumberType(Rule):
    type = "Number"
    options_class = NumberOptions

    def __init__(self, options: NumberOptions | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self.min = self.options.min
        self.max = self.options.max

        self.tests.append(as_step(is_number))

        if self.min is not None:
            minimum = self.min

            def check_min(value: Any, path: tuple, context: Context) -> Any:
                if value < minimum:
                    raise context.error(path, "Number", ReasonKind.MIN, minimum, value)
                return value

            self.tests.append(as_step(check_min))

        if self.max is not None:
            maximum = self.max

            def check_max(value: Any, path: tuple, context: Context) -> Any:
                if value > maximum:
                    raise context.error(path, "Number", ReasonKind.MAX, maximum, value)
                return value

            self.tests.append(as_step(check_max))

    def is_type(self, value: Any) -> TypeMatch:
        return TypeMatch.MATCH if _is_number(value) else TypeMatch.NO_MATCH
