"""DateType: `datetime.date` (and `datetime.datetime`) values.

`None` is skipped, so an optional date field validates when absent.
"""

import datetime
from typing import Any

from rulekit.kernel.context import Context, ReasonKind
from rulekit.kernel.rule import Rule, RuleOptions, TypeMatch, skip_empty


def is_date(value: Any, path: tuple, context: Context) -> datetime.date:
    if not isinstance(value, datetime.date):
        raise context.error(path, "Date", ReasonKind.TYPE, "Date", value)
    return value


class DateType(Rule):
    type = "Date"

    def __init__(self, options: RuleOptions | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self.tests.append(skip_empty(is_date))

    def is_type(self, value: Any) -> TypeMatch:
        return TypeMatch.MATCH if isinstance(value, datetime.date) else TypeMatch.NO_MATCH
