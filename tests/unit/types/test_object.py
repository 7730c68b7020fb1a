"""ObjectType: fixed properties, key/value patterns and error aggregation.

Test Coverage:
- Empty schema over empty mapping
- Exact-key validation and error paths
- Pattern matching on keys, unknown keys dropped
- Non-mapping input fails before any sub-validation
- Last failure wins; defects stop sibling validation
- is_type classification
"""

from typing import Any

import pytest

from rulekit.kernel.context import ReasonKind, ValidationError
from rulekit.kernel.rule import Rule, TypeMatch
from rulekit.types import AnyType, NumberType, ObjectType, StringType


class SpyType(Rule):
    """Accepts everything and records each value it validates."""

    type = "Spy"

    def __init__(self, outcome: TypeMatch = TypeMatch.MATCH) -> None:
        super().__init__()
        self.outcome = outcome
        self.calls: list = []

        async def record(value, path, context, proceed):
            self.calls.append((value, path))
            return await proceed(value)

        self.tests.append(record)

    def is_type(self, value: Any) -> TypeMatch:
        return self.outcome


class BrokenType(Rule):
    """Fails with a defect instead of a validation error."""

    type = "Broken"

    def __init__(self) -> None:
        super().__init__()

        async def explode(value, path, context, proceed):
            raise RuntimeError("predicate crashed")

        self.tests.append(explode)

    def is_type(self, value: Any) -> TypeMatch:
        return TypeMatch.MATCH


def x_keys() -> StringType:
    return StringType(pattern="^x")


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.oracle_schema
class TestObjectValidation:
    @pytest.mark.asyncio
    async def test_empty_schema_empty_object(self) -> None:
        validate = ObjectType(properties={}, property_types=[]).compile()

        assert await validate({}, []) == {}

    @pytest.mark.asyncio
    async def test_exact_property_accepted(self) -> None:
        validate = ObjectType(properties={"a": NumberType()}).compile()

        assert await validate({"a": 1}, []) == {"a": 1}

    @pytest.mark.asyncio
    async def test_exact_property_rejected_at_path(self) -> None:
        validate = ObjectType(properties={"a": NumberType()}).compile()

        with pytest.raises(ValidationError) as exc_info:
            await validate({"a": "x"}, [])

        assert exc_info.value.path == ("a",)
        assert exc_info.value.rule == "Number"

    @pytest.mark.asyncio
    async def test_pattern_keys_and_unknown_keys_dropped(self) -> None:
        validate = ObjectType(property_types=[(x_keys(), NumberType())]).compile()

        assert await validate({"xFoo": 1, "other": 2}, []) == {"xFoo": 1}

    @pytest.mark.asyncio
    async def test_pattern_value_rejected_at_key_path(self) -> None:
        validate = ObjectType(property_types=[(x_keys(), NumberType())]).compile()

        with pytest.raises(ValidationError) as exc_info:
            await validate({"xFoo": "one"}, ["root"])

        assert exc_info.value.path == ("root", "xFoo")

    @pytest.mark.asyncio
    async def test_pattern_uses_first_matching_key_only(self) -> None:
        validate = ObjectType(property_types=[(x_keys(), NumberType())]).compile()

        assert await validate({"x1": 1, "x2": 2}, []) == {"x1": 1}

    @pytest.mark.asyncio
    async def test_pattern_without_match_yields_nothing(self) -> None:
        validate = ObjectType(
            properties={"a": NumberType()},
            property_types=[(x_keys(), NumberType())],
        ).compile()

        assert await validate({"a": 1, "b": 2}, []) == {"a": 1}

    @pytest.mark.asyncio
    async def test_exact_keys_not_matched_by_patterns(self) -> None:
        validate = ObjectType(
            properties={"xA": NumberType()},
            property_types=[(x_keys(), StringType())],
        ).compile()

        assert await validate({"xA": 1, "xB": "b"}, []) == {"xA": 1, "xB": "b"}

    @pytest.mark.asyncio
    async def test_missing_optional_value_omitted(self) -> None:
        validate = ObjectType(properties={"a": AnyType(), "b": NumberType()}).compile()

        assert await validate({"b": 2}, []) == {"b": 2}

    @pytest.mark.asyncio
    async def test_explicit_none_value_kept(self) -> None:
        validate = ObjectType(
            properties={"a": AnyType()},
            property_types=[(x_keys(), AnyType())],
        ).compile()

        assert await validate({"a": None}, []) == {"a": None}
        assert await validate({"a": None, "xB": None}, []) == {"a": None, "xB": None}

    @pytest.mark.asyncio
    async def test_nested_object_paths(self) -> None:
        validate = ObjectType(
            properties={"user": ObjectType(properties={"age": NumberType()})}
        ).compile()

        assert await validate({"user": {"age": 3}}, []) == {"user": {"age": 3}}

        with pytest.raises(ValidationError) as exc_info:
            await validate({"user": {"age": "3"}}, [])

        assert exc_info.value.path == ("user", "age")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [1, "text", None, ["a"], 2.5])
    async def test_non_mapping_rejected_before_sub_validation(self, value: Any) -> None:
        spy = SpyType()
        validate = ObjectType(properties={"a": spy}, property_types=[(x_keys(), spy)]).compile()

        with pytest.raises(ValidationError) as exc_info:
            await validate(value, ["field"])

        assert exc_info.value.path == ("field",)
        assert exc_info.value.rule == "Object"
        assert exc_info.value.reason is ReasonKind.TYPE
        assert spy.calls == []


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.oracle_schema
class TestObjectErrorAggregation:
    @pytest.mark.asyncio
    async def test_last_invalid_property_reported(self) -> None:
        spy = SpyType()
        validate = ObjectType(
            properties={"a": NumberType(), "b": NumberType(), "c": spy}
        ).compile()

        with pytest.raises(ValidationError) as exc_info:
            await validate({"a": "x", "b": "y", "c": 3}, [])

        assert exc_info.value.path == ("b",)
        assert spy.calls == [(3, ("c",))]

    @pytest.mark.asyncio
    async def test_patterns_run_before_exact_properties(self) -> None:
        validate = ObjectType(
            properties={"a": NumberType()},
            property_types=[(x_keys(), NumberType())],
        ).compile()

        with pytest.raises(ValidationError) as exc_info:
            await validate({"a": "bad", "xFoo": "bad"}, [])

        assert exc_info.value.path == ("a",)

    @pytest.mark.asyncio
    async def test_defect_stops_remaining_properties(self) -> None:
        spy = SpyType()
        validate = ObjectType(
            properties={"a": NumberType(), "b": BrokenType(), "c": spy}
        ).compile()

        with pytest.raises(RuntimeError, match="predicate crashed"):
            await validate({"a": "invalid", "b": 1, "c": 2}, [])

        assert spy.calls == []


@pytest.mark.unit
@pytest.mark.deterministic
class TestObjectIsType:
    def test_non_mapping_no_match(self) -> None:
        assert ObjectType().is_type("text") is TypeMatch.NO_MATCH
        assert ObjectType().is_type(["a"]) is TypeMatch.NO_MATCH

    def test_every_key_matched(self) -> None:
        rule = ObjectType(
            properties={"a": NumberType()},
            property_types=[(x_keys(), StringType())],
        )

        assert rule.is_type({}) is TypeMatch.MATCH
        assert rule.is_type({"a": 1, "xB": "b"}) is TypeMatch.MATCH

    def test_unmatched_key_no_match(self) -> None:
        rule = ObjectType(properties={"a": NumberType()})

        assert rule.is_type({"a": 1, "b": 2}) is TypeMatch.NO_MATCH
        assert rule.is_type({"a": "1"}) is TypeMatch.NO_MATCH

    def test_pattern_value_mismatch_no_match(self) -> None:
        rule = ObjectType(property_types=[(x_keys(), StringType())])

        assert rule.is_type({"xA": 1}) is TypeMatch.NO_MATCH

    def test_any_pattern_may_match(self) -> None:
        rule = ObjectType(
            property_types=[(x_keys(), StringType()), (x_keys(), NumberType())]
        )

        assert rule.is_type({"xA": 1}) is TypeMatch.MATCH

    def test_indeterminate_propagates(self) -> None:
        rule = ObjectType(properties={"a": SpyType(TypeMatch.INDETERMINATE), "b": NumberType()})

        assert rule.is_type({"a": 1, "b": 2}) is TypeMatch.INDETERMINATE
        assert rule.is_type({"a": 1, "b": "2"}) is TypeMatch.NO_MATCH
