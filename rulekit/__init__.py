"""rulekit: composable asynchronous schema validation."""

from rulekit.kernel import (
    Context,
    ReasonKind,
    Rule,
    RuleOptions,
    SchemaValidator,
    TypeMatch,
    ValidationError,
    validate_every,
)
from rulekit.types import (
    AnyType,
    BlacklistType,
    DateType,
    NumberType,
    ObjectType,
    StringType,
    UuidType,
)

__version__ = "0.1.0"

__all__ = [
    "Context",
    "ReasonKind",
    "Rule",
    "RuleOptions",
    "SchemaValidator",
    "TypeMatch",
    "ValidationError",
    "validate_every",
    "AnyType",
    "BlacklistType",
    "DateType",
    "NumberType",
    "ObjectType",
    "StringType",
    "UuidType",
]
