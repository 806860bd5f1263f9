"""
Value kinds for structured documents.

Documents are decoded JSON: dicts keyed by strings whose values are strings,
numbers, booleans, None, nested dicts or lists. Every component classifies
values through `kind_of` and branches on the resulting `ValueKind`.
"""

import json
from enum import Enum
from typing import Any, Optional


class _Missing:
    """Marker for a location that does not exist in a document."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'MISSING'


MISSING = _Missing()


class ValueKind(Enum):
    """Closed set of value kinds a document may hold."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    LIST = "list"

    @property
    def is_scalar(self) -> bool:
        return self not in (ValueKind.OBJECT, ValueKind.LIST)


def kind_of(value: Any) -> ValueKind:
    """
    Classify a document value.

    Args:
        value: Any value found in a document

    Returns:
        The matching ValueKind

    Raises:
        TypeError: If the value is outside the document model
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it is checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    raise TypeError(f"Unsupported document value type: {type(value).__name__}")


def kind_of_or_none(value: Any) -> Optional[ValueKind]:
    """kind_of() returning None for values outside the document model."""
    try:
        return kind_of(value)
    except TypeError:
        return None


def stringify(value: Any) -> str:
    """
    Render a document value as text, the way it reads in JSON.

    Booleans become 'true'/'false', None becomes '', containers are dumped as
    compact JSON. Anything else falls back to str().
    """
    try:
        kind = kind_of(value)
    except TypeError:
        return str(value)

    if kind is ValueKind.NULL:
        return ''
    if kind is ValueKind.BOOLEAN:
        return 'true' if value else 'false'
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NUMBER:
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'), default=str)
