"""Rule variants: leaf predicates and the composite object rule."""

from rulekit.types.any import AnyType
from rulekit.types.blacklist import BlacklistOptions, BlacklistType
from rulekit.types.date import DateType
from rulekit.types.number import NumberOptions, NumberType
from rulekit.types.object import ObjectOptions, ObjectType
from rulekit.types.string import StringOptions, StringType
from rulekit.types.uuid import UuidOptions, UuidType

__all__ = [
    "AnyType",
    "BlacklistOptions",
    "BlacklistType",
    "DateType",
    "NumberOptions",
    "NumberType",
    "ObjectOptions",
    "ObjectType",
    "StringOptions",
    "StringType",
    "UuidOptions",
    "UuidType",
]
