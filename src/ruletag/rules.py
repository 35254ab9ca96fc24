"""Built-in rule functions.

Every rule has the signature ``(value, field, rule, is_required)`` and returns
an error message or None:

- value: the field's value as found on the record
- field: the field path used in the message
- rule: the raw rule segment, e.g. ``min:3``
- is_required: True once ``required`` has been seen earlier in the tag

Emptiness is judged by ``required`` alone. Every other rule passes an empty
value: without the flag the field is optional, and with it ``required`` has
already reported the missing value.
"""

import re
from collections.abc import Callable
from typing import Any

from . import predicates
from .tags import PARAM_SEPARATOR, rule_name
from .values import ValueKind, classify, is_empty, to_int, to_string

RuleFunction = Callable[[Any, str, str, bool], str | None]

REQUIRED = "required"

# Names implemented outside this package (file uploads); reserved so that
# custom rules cannot shadow them.
EXTERNAL_RULES = frozenset({"size", "mime", "ext"})

MSG_REQUIRED = "The {field} field is required"
MSG_INVALID_FORMAT = "The {field} field invalid rule format {rule}"
MSG_MIN_NUMBER = "The {field} field should be greater than or equal {limit}"
MSG_MIN_LENGTH = "The {field} field should be minimum length {limit}"
MSG_MAX_NUMBER = "The {field} field should be less than or equal {limit}"
MSG_MAX_LENGTH = "The {field} field should be maximum length {limit}"
MSG_IN = "The {field} field should be contain in: {values}"
MSG_INVALID_PATTERN = "The {field} field invalid rule regular expression {pattern}: {error}"
MSG_NOT_STRING = "invalid type, expected string found {type}"
MSG_NO_MATCH = "The {field} field has invalid format value"


def required(value: Any, field: str, rule: str, is_required: bool) -> str | None:
    if is_empty(value):
        return MSG_REQUIRED.format(field=field)
    return None


def _param(rule: str) -> str:
    """Return the parameter part of a raw rule segment."""
    return rule.partition(PARAM_SEPARATOR)[2].strip()


def _measure(value: Any) -> int | float:
    """Return the number min/max compare against.

    Numbers and integer strings compare by value, everything else by length.
    """
    kind = classify(value)
    if kind in (ValueKind.INTEGER, ValueKind.FLOAT):
        return value
    if kind == ValueKind.SEQUENCE:
        return len(value)

    text = to_string(value)
    if not predicates.is_numeric(text.strip()):
        return len(text)

    number = to_int(text)
    if number is None:
        # too many digits for int(); float keeps the sign and saturates to inf
        return float(text)
    return number


def _is_numeric_value(value: Any) -> bool:
    kind = classify(value)
    if kind in (ValueKind.INTEGER, ValueKind.FLOAT):
        return True
    return kind != ValueKind.SEQUENCE and predicates.is_numeric(to_string(value).strip())


def valid_min(value: Any, field: str, rule: str, is_required: bool) -> str | None:
    if is_empty(value):
        return None

    limit = _param(rule)
    bound = to_int(limit)
    if bound is None:
        return MSG_INVALID_FORMAT.format(field=field, rule=rule)

    if _measure(value) >= bound:
        return None
    if _is_numeric_value(value):
        return MSG_MIN_NUMBER.format(field=field, limit=limit)
    return MSG_MIN_LENGTH.format(field=field, limit=limit)


def valid_max(value: Any, field: str, rule: str, is_required: bool) -> str | None:
    if is_empty(value):
        return None

    limit = _param(rule)
    bound = to_int(limit)
    if bound is None:
        return MSG_INVALID_FORMAT.format(field=field, rule=rule)

    if _measure(value) <= bound:
        return None
    if _is_numeric_value(value):
        return MSG_MAX_NUMBER.format(field=field, limit=limit)
    return MSG_MAX_LENGTH.format(field=field, limit=limit)


def valid_in(value: Any, field: str, rule: str, is_required: bool) -> str | None:
    if is_empty(value):
        return None

    # strip the literal "in:" prefix only; values may start or end with i, n or ':'
    allowed = rule.removeprefix(rule_name(rule)).removeprefix(PARAM_SEPARATOR)
    if predicates.is_in(allowed.split(","), to_string(value)):
        return None
    return MSG_IN.format(field=field, values=allowed)


def match(value: Any, field: str, pattern: str, message: str = "") -> str | None:
    """Check a string value against a regular expression.

    Meant for custom rules that need a one-off pattern. ``message`` replaces
    the default failure message when given.
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        return MSG_INVALID_PATTERN.format(field=field, pattern=pattern, error=e)

    if not isinstance(value, str):
        return MSG_NOT_STRING.format(type=type(value).__name__)
    if regex.search(value):
        return None
    return message or MSG_NO_MATCH.format(field=field)


def _format_rule(predicate: Callable[[str], bool], message: str) -> RuleFunction:
    """Build a rule that checks the stringified value with a predicate."""

    def rule_fn(value: Any, field: str, rule: str, is_required: bool) -> str | None:
        if is_empty(value):
            return None
        if predicate(to_string(value)):
            return None
        return message.format(field=field)

    rule_fn.__name__ = f"valid_{predicate.__name__.removeprefix('is_')}"
    rule_fn.__doc__ = f"Rule backed by predicates.{predicate.__name__}."
    return rule_fn


BUILTIN_RULES: dict[str, RuleFunction] = {
    REQUIRED: required,
    "numeric": _format_rule(predicates.is_numeric, "The {field} field should be a valid numeric"),
    "float": _format_rule(predicates.is_float, "The {field} field should be a valid float number"),
    "max": valid_max,
    "min": valid_min,
    "alpha": _format_rule(predicates.is_alpha, "The {field} field should contain: [a-zA-Z]"),
    "alpha_num": _format_rule(predicates.is_alpha_numeric, "The {field} field should contain: [a-zA-Z0-9]"),
    "alpha_space": _format_rule(
        predicates.is_alpha_space, "The {field} field should contain: [a-zA-Z0-9], underscore (_), space"
    ),
    "alpha_dash": _format_rule(
        predicates.is_alpha_dash, "The {field} field should contain: [a-zA-Z0-9], underscore (_), dash (-)"
    ),
    "email": _format_rule(predicates.is_email, "The {field} field should be a valid email address"),
    "uuid": _format_rule(predicates.is_uuid, "The {field} field should be a valid UUID"),
    "uuid3": _format_rule(predicates.is_uuid3, "The {field} field should be a valid UUID3"),
    "uuid4": _format_rule(predicates.is_uuid4, "The {field} field should be a valid UUID4"),
    "uuid5": _format_rule(predicates.is_uuid5, "The {field} field should be a valid UUID5"),
    "url": _format_rule(predicates.is_url, "The {field} field should be a valid URL"),
    "credit_card": _format_rule(predicates.is_credit_card, "The {field} field should be a valid credit card number"),
    "latitude": _format_rule(predicates.is_latitude, "The {field} field should be a valid latitude"),
    "longitude": _format_rule(predicates.is_longitude, "The {field} field should be a valid longitude"),
    "mac_address": _format_rule(predicates.is_mac_address, "The {field} field should be a valid mac address"),
    "coordinate": _format_rule(predicates.is_coordinate, "The {field} field should be a valid coordinate"),
    "ip": _format_rule(predicates.is_ip, "The {field} field should be a valid IP address"),
    "ipv4": _format_rule(predicates.is_ipv4, "The {field} field should be a valid IPv4 address"),
    "ipv6": _format_rule(predicates.is_ipv6, "The {field} field should be a valid IPv6 address"),
    "imei": _format_rule(predicates.is_imei, "The {field} field should be a valid IMEI"),
    "hex_color": _format_rule(predicates.is_hex_color, "The {field} field should be a valid hex color"),
    "css_color": _format_rule(predicates.is_css_color, "The {field} field should be a valid CSS color"),
    "isbn10": _format_rule(predicates.is_isbn10, "The {field} field should be a valid ISBN10"),
    "isbn13": _format_rule(predicates.is_isbn13, "The {field} field should be a valid ISBN13"),
    "date": _format_rule(predicates.is_date, "The {field} field should be a valid date (yyyy-mm-dd)"),
    "date_ddmmyy": _format_rule(predicates.is_date_ddmmyy, "The {field} field should be a valid date (dd-mm-yyyy)"),
    "json": _format_rule(predicates.is_json, "The {field} field should be a valid JSON"),
    "bool": _format_rule(predicates.is_boolean, "The {field} field should be a valid boolean"),
    "in": valid_in,
    "id_phone": _format_rule(predicates.is_id_phone_number, "The {field} field should be a valid mobile phone number"),
}
