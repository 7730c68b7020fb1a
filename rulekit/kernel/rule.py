"""Rule: the uniform contract every validator satisfies.

A rule owns an ordered list of test steps. `compile()` composes them into a
single asynchronous validator; each step either raises a `ValidationError`
or hands a (possibly transformed) value to the next step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from functools import partial
from typing import Any

from pydantic import BaseModel, ConfigDict

from rulekit.kernel.context import Context

Proceed = Callable[[Any], Awaitable[Any]]
TestStep = Callable[[Any, tuple, Context, Proceed], Awaitable[Any]]
CompiledValidator = Callable[..., Awaitable[Any]]
Check = Callable[[Any, tuple, Context], Any]


class TypeMatch(str, Enum):
    """Outcome of a cheap, synchronous `Rule.is_type` classification."""

    MATCH = "match"
    NO_MATCH = "no_match"
    INDETERMINATE = "indeterminate"  # Decision deferred to a nested rule


class RuleOptions(BaseModel):
    """Construction options shared by every rule kind.

    All fields are optional; an unset option adds no test step.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)


async def identity(value: Any) -> Any:
    """Terminal step of every pipeline."""
    return value


def compose(tests: Sequence[TestStep]) -> CompiledValidator:
    """Compose test steps into one validator, first step runs first.

    Args:
        tests: Ordered test steps

    Returns:
        async validate(value, path=(), context=None, proceed=identity)
    """
    steps = tuple(tests)

    async def validate(
        value: Any,
        path: Sequence[Any] = (),
        context: Context | None = None,
        proceed: Proceed = identity,
    ) -> Any:
        path = tuple(path)
        if context is None:
            context = Context(path)

        async def dispatch(index: int, current: Any) -> Any:
            if index == len(steps):
                return await proceed(current)
            return await steps[index](current, path, context, partial(dispatch, index + 1))

        return await dispatch(0, value)

    return validate


def as_step(check: Check) -> TestStep:
    """Turn a synchronous `check(value, path, context) -> value` into a test step."""

    async def step(value: Any, path: tuple, context: Context, proceed: Proceed) -> Any:
        return await proceed(check(value, path, context))

    return step


def skip_empty(check: Check) -> TestStep:
    """Like `as_step`, but `None` bypasses the check."""

    async def step(value: Any, path: tuple, context: Context, proceed: Proceed) -> Any:
        if value is None:
            return await proceed(value)
        return await proceed(check(value, path, context))

    return step


class Rule(ABC):
    """Base contract for all rules.

    Subclasses set `type` and `options_class`, then append their test steps
    in `__init__`. Tests are never removed, so a constructed rule (and its
    compiled validator) is safe to share between concurrent validations.

    Attributes:
        type: Type tag reported in validation errors
        options: Parsed construction options
        tests: Ordered test steps
    """

    type: str = "Rule"
    options_class: type[RuleOptions] = RuleOptions

    def __init__(self, options: RuleOptions | None = None, **kwargs: Any) -> None:
        """Initialize rule.

        Args:
            options: Pre-built options model
            **kwargs: Options as keyword arguments (used when `options` is None)

        Raises:
            TypeError: If both `options` and keyword options are given
        """
        if options is None:
            options = self.options_class(**kwargs)
        elif kwargs:
            raise TypeError(f"{self.type} accepts either an options model or keyword options, not both")

        self.options = options
        self.tests: list[TestStep] = []
        self._compiled: CompiledValidator | None = None

    def compile(self) -> CompiledValidator:
        """Return the executable validator, composing it on first use."""
        if self._compiled is None:
            self._compiled = compose(self.tests)
        return self._compiled

    @abstractmethod
    def is_type(self, value: Any) -> TypeMatch:
        """Classify `value` without running the pipeline. Must not raise."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.options!r})"
