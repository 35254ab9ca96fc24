"""Format predicates used by the built-in rules.

Every predicate takes a string and returns a bool. Patterns are compiled once
at import time and never mutated, so the functions are safe to call from any
number of threads.
"""

import ipaddress
import json
import re
from datetime import datetime

BOOLEAN_LITERALS = frozenset({"0", "1", "true", "false", "True", "False"})

_ALPHA = re.compile(r"^[a-zA-Z]+$")
_ALPHA_NUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
_ALPHA_DASH = re.compile(r"^[a-zA-Z0-9_-]+$")
_ALPHA_SPACE = re.compile(r"^[a-zA-Z0-9_ ]+$")
_NUMERIC = re.compile(r"^[-+]?[0-9]+$")
_FLOAT = re.compile(r"^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$")

_EMAIL = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
_URL = re.compile(
    r"^(?:https?|ftps?)://"
    r"(?:[^\s:@/]+(?::[^\s@/]*)?@)?"
    r"(?:localhost"
    r"|(?:[0-9]{1,3}\.){3}[0-9]{1,3}"
    r"|\[[0-9a-fA-F:.]+\]"
    r"|(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,63})"
    r"(?::[0-9]{1,5})?"
    r"(?:[/?#][^\s]*)?$"
)
_MAC_ADDRESS = re.compile(
    r"^(?:[0-9a-fA-F]{2}([:-]))(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}$"
    r"|^(?:[0-9a-fA-F]{4}\.){2}[0-9a-fA-F]{4}$"
)

_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
_UUID3 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
_UUID4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)
_UUID5 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])"
_IPV4 = re.compile(rf"^{_OCTET}(?:\.{_OCTET}){{3}}$")

_IMEI = re.compile(r"^[0-9a-fA-F]{14}$|^[0-9]{15}$|^[0-9]{18}$")
_HEX_COLOR = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_ISBN10 = re.compile(r"^[0-9]{9}[0-9Xx]$")
_ISBN13 = re.compile(r"^[0-9]{13}$")
_CARD_NUMBER = re.compile(r"^[0-9]{12,19}$")
_ISBN_SEPARATORS = re.compile(r"[\s-]")

_LATITUDE = re.compile(r"^[-+]?(?:[1-8]?[0-9](?:\.[0-9]+)?|90(?:\.0+)?)$")
_LONGITUDE = re.compile(r"^[-+]?(?:180(?:\.0+)?|(?:1[0-7][0-9]|[1-9]?[0-9])(?:\.[0-9]+)?)$")

_BYTE = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[0-9]{1,2})"
_PERCENT = r"(?:100|[0-9]{1,2}(?:\.[0-9]+)?)%"
_ALPHA_CHANNEL = rf"(?:0|1|0?\.[0-9]+|1\.0+|{_PERCENT})"
_HUE = r"[-+]?[0-9]+(?:\.[0-9]+)?(?:deg)?"
_CSS_COLOR = re.compile(
    r"^(?:#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
    rf"|rgb\(\s*{_BYTE}\s*,\s*{_BYTE}\s*,\s*{_BYTE}\s*\)"
    rf"|rgb\(\s*{_PERCENT}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*\)"
    rf"|rgba\(\s*{_BYTE}\s*,\s*{_BYTE}\s*,\s*{_BYTE}\s*,\s*{_ALPHA_CHANNEL}\s*\)"
    rf"|hsl\(\s*{_HUE}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*\)"
    rf"|hsla\(\s*{_HUE}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*,\s*{_ALPHA_CHANNEL}\s*\))$"
)

_DATE = re.compile(r"^[0-9]{4}([-/])[0-9]{2}\1[0-9]{2}$")
_DATE_DDMMYY = re.compile(r"^[0-9]{2}([-/])[0-9]{2}\1[0-9]{4}$")

# Indonesian mobile numbers: +62 / 62 / 0 prefix, then an 8xx operator code
_PHONE_ID = re.compile(r"^(?:\+62|62|0)8[1-9][0-9]{6,10}$")


def is_alpha(value: str) -> bool:
    return bool(_ALPHA.match(value))


def is_alpha_numeric(value: str) -> bool:
    return bool(_ALPHA_NUMERIC.match(value))


def is_alpha_dash(value: str) -> bool:
    """Letters, digits, underscore and dash."""
    return bool(_ALPHA_DASH.match(value))


def is_alpha_space(value: str) -> bool:
    """Letters, digits, underscore and space."""
    return bool(_ALPHA_SPACE.match(value))


def is_boolean(value: str) -> bool:
    """Check value is one of the accepted boolean literals."""
    return value in BOOLEAN_LITERALS


def is_numeric(value: str) -> bool:
    """Check value is a signed integer literal."""
    return bool(_NUMERIC.match(value))


def is_float(value: str) -> bool:
    return bool(_FLOAT.match(value))


def is_email(value: str) -> bool:
    return bool(_EMAIL.match(value))


def is_url(value: str) -> bool:
    return bool(_URL.match(value))


def is_mac_address(value: str) -> bool:
    return bool(_MAC_ADDRESS.match(value))


def is_uuid(value: str) -> bool:
    return bool(_UUID.match(value))


def is_uuid3(value: str) -> bool:
    return bool(_UUID3.match(value))


def is_uuid4(value: str) -> bool:
    return bool(_UUID4.match(value))


def is_uuid5(value: str) -> bool:
    return bool(_UUID5.match(value))


def is_ipv4(value: str) -> bool:
    """Dotted quad with every octet in 0-255."""
    return bool(_IPV4.match(value))


def is_ipv6(value: str) -> bool:
    """Full or compressed IPv6 address, without a scope id."""
    if "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_ip(value: str) -> bool:
    return is_ipv4(value) or is_ipv6(value)


def is_imei(value: str) -> bool:
    return bool(_IMEI.match(value))


def is_hex_color(value: str) -> bool:
    return bool(_HEX_COLOR.match(value))


def is_isbn10(value: str) -> bool:
    """ISBN-10 with a valid mod-11 check digit; dashes and spaces ignored."""
    digits = _ISBN_SEPARATORS.sub("", value)
    if not _ISBN10.match(digits):
        return False

    total = 0
    for position, char in enumerate(digits):
        digit = 10 if char in "Xx" else int(char)
        total += (10 - position) * digit
    return total % 11 == 0


def is_isbn13(value: str) -> bool:
    """ISBN-13 with a valid mod-10 check digit; dashes and spaces ignored."""
    digits = _ISBN_SEPARATORS.sub("", value)
    if not _ISBN13.match(digits):
        return False

    total = sum(int(char) * (3 if position % 2 else 1) for position, char in enumerate(digits))
    return total % 10 == 0


def is_credit_card(value: str) -> bool:
    """Card number of 12-19 digits passing the Luhn checksum."""
    digits = _ISBN_SEPARATORS.sub("", value)
    if not _CARD_NUMBER.match(digits):
        return False

    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_latitude(value: str) -> bool:
    return bool(_LATITUDE.match(value))


def is_longitude(value: str) -> bool:
    return bool(_LONGITUDE.match(value))


def is_coordinate(value: str) -> bool:
    """A ``latitude,longitude`` pair, optionally with a space after the comma."""
    latitude, sep, longitude = value.partition(",")
    if not sep:
        return False
    return is_latitude(latitude) and is_longitude(longitude.lstrip(" "))


def is_css_color(value: str) -> bool:
    """Hex, rgb(), rgba(), hsl() or hsla() color, e.g. ``#909`` or ``rgb(255,122,122)``."""
    return bool(_CSS_COLOR.match(value))


def _is_calendar_date(value: str, pattern: re.Pattern, layout: str) -> bool:
    match = pattern.match(value)
    if not match:
        return False
    try:
        datetime.strptime(value, layout.replace("-", match.group(1)))
    except ValueError:
        return False
    return True


def is_date(value: str) -> bool:
    """Calendar date as yyyy-mm-dd or yyyy/mm/dd."""
    return _is_calendar_date(value, _DATE, "%Y-%m-%d")


def is_date_ddmmyy(value: str) -> bool:
    """Calendar date as dd-mm-yyyy or dd/mm/yyyy."""
    return _is_calendar_date(value, _DATE_DDMMYY, "%d-%m-%Y")


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def is_json(value: str) -> bool:
    try:
        json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def is_id_phone_number(value: str) -> bool:
    """Indonesian mobile phone number."""
    return bool(_PHONE_ID.match(value))


def is_in(haystack: list[str], needle: str) -> bool:
    return needle in haystack
