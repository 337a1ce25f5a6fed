"""
Pydantic models for the environment schema.
"""
import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import InvalidVariableTypeError

Scalar = Union[bool, int, float, str]

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_BOOLEAN_VALUES = {"true": True, "false": False}


class VariableType(str, Enum):
    """Types a registered variable may declare."""
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"

    @classmethod
    def names(cls):
        return [member.value for member in cls]

    @classmethod
    def parse(cls, token, variable_name: str = None) -> "VariableType":
        """Normalise a type token, case-insensitively.

        Raises:
            InvalidVariableTypeError: If the token is not a known type
        """
        if isinstance(token, cls):
            return token
        normalized = str(token).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidVariableTypeError(token, cls.names(), variable_name=variable_name)


class TypeMismatch(ValueError):
    """Raised by parse_value when a raw string does not fit its type."""
    def __init__(self, value: str, expected: VariableType):
        self.value = value
        self.expected = expected
        super().__init__(f"{value!r} is not a valid {expected.value}")


def parse_value(var_type: Optional[VariableType], raw: str) -> Scalar:
    """Parse a raw environment string into the value its type describes.

    The checks are pattern based: integers are an optional minus and
    digits, floats need at least one digit with an optional decimal point
    (``"3."`` and ``".5"`` both parse), booleans are ``true``/``false`` in
    any case. Strings and untyped variables always parse.

    Args:
        var_type: Declared type, or None for no constraint
        raw: Value as found in the environment table

    Returns:
        The typed value

    Raises:
        TypeMismatch: If the value does not conform
    """
    if var_type is None or var_type is VariableType.STRING:
        return raw
    if var_type is VariableType.INTEGER:
        if _INTEGER_PATTERN.fullmatch(raw):
            return int(raw)
    elif var_type is VariableType.FLOAT:
        if _FLOAT_PATTERN.fullmatch(raw):
            return float(raw)
    elif var_type is VariableType.BOOLEAN:
        lowered = raw.lower()
        if lowered in _BOOLEAN_VALUES:
            return _BOOLEAN_VALUES[lowered]
    raise TypeMismatch(raw, var_type)


def stringify(value: Scalar) -> str:
    """Canonical string form written to the environment table."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class VariableSpec(BaseModel):
    """A single registered environment variable with its validation options."""
    model_config = ConfigDict(frozen=True)

    key: str
    type: Optional[VariableType] = None
    required: bool = False
    strict: bool = False
    default: Optional[Scalar] = None
    description: Optional[str] = None

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("variable key cannot be empty")
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value):
        if value is None:
            return None
        return VariableType.parse(value)

    def conforms(self, raw: str) -> bool:
        try:
            parse_value(self.type, raw)
        except TypeMismatch:
            return False
        return True
