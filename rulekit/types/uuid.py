"""UuidType: canonical UUID strings, optionally pinned to one version.

Syntax is delegated to jsonschema's `uuid` format checker, on top of a
strict 8-4-4-4-12 layout (`UUID()` alone tolerates braces and stray hyphens).
"""

import re
from typing import Any
from uuid import UUID

from jsonschema import Draft202012Validator

from rulekit.kernel.context import Context, ReasonKind
from rulekit.kernel.rule import Check, Rule, RuleOptions, TypeMatch, as_step
from rulekit.types.string import is_string

FORMAT_CHECKER = Draft202012Validator.FORMAT_CHECKER

CANONICAL_UUID = re.compile(r"[0-9a-fA-F]{8}(?:-[0-9a-fA-F]{4}){3}-[0-9a-fA-F]{12}")


class UuidOptions(RuleOptions):
    version: int | None = None


def is_uuid(value: str, version: int | None = None) -> bool:
    """Return True if `value` is a hyphenated UUID (of `version`, when given)."""
    if CANONICAL_UUID.fullmatch(value) is None:
        return False
    if not FORMAT_CHECKER.conforms(value, "uuid"):
        return False
    if version is not None:
        return UUID(value).version == version
    return True


def to_uuid_check(version: int | None) -> Check:
    def check(value: str, path: tuple, context: Context) -> str:
        if not is_uuid(value, version):
            raise context.error(path, "Uuid", ReasonKind.TYPE, "Uuid", value)
        return value

    return check


class UuidType(Rule):
    type = "Uuid"
    options_class = UuidOptions

    def __init__(self, options: UuidOptions | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self.version = self.options.version

        self.tests.append(as_step(is_string))
        self.tests.append(as_step(to_uuid_check(self.version)))

    def is_type(self, value: Any) -> TypeMatch:
        if isinstance(value, str) and is_uuid(value, self.version):
            return TypeMatch.MATCH
        return TypeMatch.NO_MATCH
