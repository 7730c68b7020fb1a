"""validate_every: run validation tasks in order, collecting recoverable failures.

Tasks run strictly one after another. A `ValidationError` is recorded (the
latest one wins) and the walk moves on; any other error stops the walk at
once and propagates. This is sequencing, not concurrency.
"""

import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

import structlog

from rulekit.kernel.context import ValidationError

T = TypeVar("T")

logger = structlog.get_logger(__name__)


async def validate_every(tasks: Sequence[Callable[[], Awaitable[T]]]) -> list[T]:
    """Run every task and return their results by position.

    Args:
        tasks: Ordered nullary callables, each returning an awaitable

    Returns:
        List where item i is task i's result

    Raises:
        ValidationError: The last recorded failure, once every task ran
        Exception: The first non-validation error, unchanged; later tasks never start
    """
    results: list[Any] = [None] * len(tasks)
    error: ValidationError | None = None

    for index, task in enumerate(tasks):
        try:
            result = task()
            if inspect.isawaitable(result):
                result = await result
        except ValidationError as exc:
            logger.debug("validation_failure_recorded", index=index, path=exc.path, rule=exc.rule)
            error = exc
            continue
        except Exception as exc:
            logger.debug("validation_stopped", index=index, remaining=len(tasks) - index - 1, error=repr(exc))
            raise

        results[index] = result

    if error is not None:
        raise error

    return results
