"""SchemaValidator: entry point that validates values against a rule tree.

Compiles the root rule once and reuses the compiled validator for every
call, so one instance can serve many concurrent validations.
"""

import asyncio
from collections.abc import Sequence
from typing import Any

import structlog

from rulekit.kernel.context import Context
from rulekit.kernel.rule import CompiledValidator, Rule

logger = structlog.get_logger(__name__)


class SchemaValidator:
    """Validates data against a rule tree.

    Example:
        validator = SchemaValidator(Object(properties={"id": Uuid(version=4)}))
        data = await validator.validate({"id": "..."})
    """

    def __init__(self, rule: Rule) -> None:
        """Initialize schema validator.

        Args:
            rule: Root rule of the schema
        """
        self.rule = rule
        self._validator: CompiledValidator | None = None

    @property
    def compiled(self) -> CompiledValidator:
        """Compiled validator for the root rule."""
        if self._validator is None:
            self._validator = self.rule.compile()
        return self._validator

    async def validate(self, data: Any, path: Sequence[Any] = ()) -> Any:
        """Validate data against the schema.

        Args:
            data: Data to validate
            path: Position of `data` in an enclosing structure (empty at the root)

        Returns:
            The validated value; rules may transform it (e.g. drop unknown keys)

        Raises:
            ValidationError: If the data violates the schema
        """
        result = await self.compiled(data, path, Context(path))
        logger.debug("validated", rule=self.rule.type, path=tuple(path))
        return result

    def validate_sync(self, data: Any, path: Sequence[Any] = ()) -> Any:
        """Run `validate` on a fresh event loop. Not for use inside a running loop."""
        return asyncio.run(self.validate(data, path))
