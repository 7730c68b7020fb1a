"""Context: path tracking and classified validation errors.

A Context travels alongside the value being validated. It never raises on
its own; test steps build an error through `Context.error` and raise it.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any


class ReasonKind(str, Enum):
    """Why a value failed a rule."""

    TYPE = "type"  # Value is not of the rule's kind
    BLACKLIST = "blacklist"  # Value is explicitly excluded
    PATTERN = "pattern"  # String does not match the configured pattern
    MIN = "min"  # Number below the configured minimum
    MAX = "max"  # Number above the configured maximum


def to_reason(reason: ReasonKind | str) -> ReasonKind | str:
    """Return the built-in `ReasonKind` for `reason`, or the rule-specific string."""
    try:
        return ReasonKind(reason)
    except ValueError:
        return str(reason)


def format_path(path: Sequence[Any]) -> str:
    """Render a path as a dotted string (`users.0.name`)."""
    return ".".join(str(key) for key in path)


class ValidationError(Exception):
    """Raised when a value fails a declared rule.

    This is the only recoverable error kind. Anything else raised during
    validation is treated as a defect and stops the run.

    Attributes:
        path: Keys/indices from the root to the failing value
        rule: Type tag of the rule that failed
        reason: Classification of the failure (a `ReasonKind`, or a rule-specific string)
        expected: Descriptor of what the rule expected
        actual: The value that was rejected
        message: Human-readable error description
    """

    def __init__(
        self,
        path: Sequence[Any],
        rule: str,
        reason: ReasonKind | str,
        expected: Any,
        actual: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            path: Keys/indices from the root to the failing value
            rule: Type tag of the rule that failed
            reason: Classification of the failure (a `ReasonKind`, or a rule-specific string)
            expected: Descriptor of what the rule expected
            actual: The value that was rejected
        """
        self.path = tuple(path)
        self.rule = rule
        self.reason = to_reason(reason)
        self.expected = expected
        self.actual = actual
        reason_text = self.reason.value if isinstance(self.reason, ReasonKind) else self.reason
        self.message = (
            f"Expected {expected!r} at `{format_path(self.path)}` "
            f"({rule} {reason_text}), got {actual!r}"
        )
        super().__init__(self.message)


class Context:
    """Validation context shared by every rule in a single run.

    Attributes:
        path: Path of the value the run started from (empty at the root)
    """

    def __init__(self, path: Sequence[Any] = ()) -> None:
        self.path = tuple(path)

    def error(
        self,
        path: Sequence[Any],
        rule: str,
        reason: ReasonKind | str,
        expected: Any,
        actual: Any,
    ) -> ValidationError:
        """Build (but do not raise) a validation error.

        Args:
            path: Path of the failing value
            rule: Type tag of the rule that failed
            reason: Classification of the failure (a `ReasonKind`, or a rule-specific string)
            expected: Descriptor of what the rule expected
            actual: The value that was rejected

        Returns:
            ValidationError ready to be raised by the caller
        """
        return ValidationError(path, rule, reason, expected, actual)
