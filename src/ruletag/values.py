"""Value model used by the rule functions.

Rules receive arbitrary Python values. Rather than inspecting types ad hoc in
every rule, values are classified once into a small set of kinds and then
stringified through a single canonical conversion.
"""

import dataclasses
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel

_INT_PATTERN = re.compile(r"^[-+]?(?:0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|[0-9]+)$")


class ValueKind(str, Enum):
    """Kinds of values a rule can be asked to check."""
    ABSENT = "absent"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    AGGREGATE = "aggregate"
    SEQUENCE = "sequence"
    OTHER = "other"


def is_aggregate(value: Any) -> bool:
    """Check whether value is a record the walker can descend into."""
    if value is None or isinstance(value, type):
        return False
    if isinstance(value, BaseModel) or dataclasses.is_dataclass(value):
        return True
    return hasattr(type(value), "__rule_fields__")


def classify(value: Any) -> ValueKind:
    """Map a Python value onto its ValueKind."""
    if value is None:
        return ValueKind.ABSENT
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if is_aggregate(value):
        return ValueKind.AGGREGATE
    if isinstance(value, (list, tuple, set, frozenset, dict, bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def is_empty(value: Any) -> bool:
    """Check whether value counts as empty for the ``required`` rule.

    Blank or whitespace-only strings, zero numbers, ``False``, ``None`` and
    zero-length containers are empty. Records are never empty.
    """
    kind = classify(value)
    if kind == ValueKind.ABSENT:
        return True
    if kind == ValueKind.STRING:
        return not value.strip()
    if kind in (ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.BOOLEAN):
        return not value
    if kind == ValueKind.SEQUENCE:
        return len(value) == 0
    if kind == ValueKind.OTHER and hasattr(value, "__len__"):
        return len(value) == 0
    return False


def to_string(value: Any) -> str:
    """Convert any value to the string form the predicates check."""
    kind = classify(value)
    if kind == ValueKind.STRING:
        return value
    if kind == ValueKind.ABSENT:
        return ""
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.FLOAT and value.is_integer():
        return str(int(value))
    return str(value)


def to_int(text: str) -> int | None:
    """Parse an integer, accepting a sign and 0x/0o/0b prefixes.

    Returns None when the text is not an integer literal, or has more digits
    than the interpreter converts (``sys.get_int_max_str_digits``).
    """
    text = text.strip()
    if not _INT_PATTERN.match(text):
        return None
    # int(x, 0) rejects leading zeros such as "007", so plain decimals use base 10
    base = 10 if text.lstrip("+-").isdigit() else 0
    try:
        return int(text, base)
    except ValueError:
        return None
