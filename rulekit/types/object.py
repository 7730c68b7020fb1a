"""ObjectType: validates a mapping against exact keys and key/value patterns.

Every declared property and every pattern becomes one task for
`validate_every`, so sibling failures do not hide each other until the last
one is reported. Keys matched by neither are dropped from the output.
"""

from collections.abc import Mapping
from functools import partial
from typing import Any

from rulekit.kernel.context import Context, ReasonKind
from rulekit.kernel.executor import validate_every
from rulekit.kernel.rule import (
    CompiledValidator,
    Proceed,
    Rule,
    RuleOptions,
    TestStep,
    TypeMatch,
    as_step,
)


class ObjectOptions(RuleOptions):
    properties: dict[str, Rule] | None = None
    property_types: list[tuple[Rule, Rule]] | None = None


def is_object(value: Any, path: tuple, context: Context) -> Mapping:
    if not isinstance(value, Mapping):
        raise context.error(path, "Object", ReasonKind.TYPE, "Object", value)
    return value


def to_pairs(results: list[Any]) -> dict[Any, Any]:
    """Zip `(key, value)` results into a dict, skipping tasks that produced nothing."""
    output: dict[Any, Any] = {}

    for pair in results:
        # Unmatched patterns and missing keys produce nothing
        if pair is None:
            continue
        key, value = pair
        output[key] = value

    return output


def to_properties_test(
    properties: dict[str, Rule],
    property_types: list[tuple[Rule, Rule]],
) -> TestStep:
    """Build the test step that validates every property of a mapping.

    Args:
        properties: Exact key -> rule
        property_types: Ordered (key rule, value rule) patterns

    Returns:
        Test step yielding the validated mapping
    """
    property_tests: list[tuple[str, CompiledValidator]] = [
        (key, rule.compile()) for key, rule in properties.items()
    ]
    property_type_tests: list[tuple[Rule, CompiledValidator, CompiledValidator]] = [
        (key_rule, key_rule.compile(), value_rule.compile()) for key_rule, value_rule in property_types
    ]

    async def test(obj: Mapping, path: tuple, context: Context, proceed: Proceed) -> Any:
        # Keys with an exact rule are never matched against patterns
        keys = [key for key in obj.keys() if key not in properties]

        def property_task(key: str, validate: CompiledValidator):
            async def task() -> tuple[str, Any] | None:
                value = await validate(obj.get(key), path + (key,), context)
                if value is None and key not in obj:
                    return None
                return key, value

            return task

        def pattern_task(key_rule: Rule, validate_key: CompiledValidator, validate_value: CompiledValidator):
            async def task() -> tuple[Any, Any] | None:
                for key in keys:
                    if key_rule.is_type(key) is not TypeMatch.MATCH:
                        continue

                    key_path = path + (key,)
                    validated_key, validated_value = await validate_every(
                        [
                            partial(validate_key, key, key_path, context),
                            partial(validate_value, obj[key], key_path, context),
                        ]
                    )
                    return validated_key, validated_value

                return None

            return task

        tasks = [pattern_task(*entry) for entry in property_type_tests]
        tasks += [property_task(*entry) for entry in property_tests]

        return await proceed(to_pairs(await validate_every(tasks)))

    return test


class ObjectType(Rule):
    """Composite rule for mappings.

    Attributes:
        properties: Exact key -> rule
        property_types: Ordered (key rule, value rule) pairs for other keys
    """

    type = "Object"
    options_class = ObjectOptions

    def __init__(self, options: ObjectOptions | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self.properties: dict[str, Rule] = dict(self.options.properties or {})
        self.property_types: list[tuple[Rule, Rule]] = list(self.options.property_types or [])

        self.tests.append(as_step(is_object))
        self.tests.append(to_properties_test(self.properties, self.property_types))

    def is_type(self, value: Any) -> TypeMatch:
        """Match only if every key is matched by a property or a pattern."""
        if not isinstance(value, Mapping):
            return TypeMatch.NO_MATCH

        indeterminate = False

        for key, item in value.items():
            outcome = self._classify_entry(key, item)
            if outcome is TypeMatch.NO_MATCH:
                return TypeMatch.NO_MATCH
            if outcome is TypeMatch.INDETERMINATE:
                indeterminate = True

        return TypeMatch.INDETERMINATE if indeterminate else TypeMatch.MATCH

    def _classify_entry(self, key: Any, item: Any) -> TypeMatch:
        if key in self.properties:
            return self.properties[key].is_type(item)

        outcomes = [
            value_rule.is_type(item)
            for key_rule, value_rule in self.property_types
            if key_rule.is_type(key) is TypeMatch.MATCH
        ]

        if TypeMatch.MATCH in outcomes:
            return TypeMatch.MATCH
        if TypeMatch.INDETERMINATE in outcomes:
            return TypeMatch.INDETERMINATE
        return TypeMatch.NO_MATCH
