"""Kernel: rule contract, validation context and the task executor."""

from rulekit.kernel.context import Context, ReasonKind, ValidationError
from rulekit.kernel.executor import validate_every
from rulekit.kernel.rule import (
    Rule,
    RuleOptions,
    TypeMatch,
    as_step,
    compose,
    identity,
    skip_empty,
)
from rulekit.kernel.schema_validator import SchemaValidator

__all__ = [
    "Context",
    "ReasonKind",
    "ValidationError",
    "validate_every",
    "Rule",
    "RuleOptions",
    "TypeMatch",
    "as_step",
    "compose",
    "identity",
    "skip_empty",
    "SchemaValidator",
]
