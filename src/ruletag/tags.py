"""Rule tag parsing.

A rule tag is the declarative string attached to a field, for example
``required|min:3|in:red,green,blue``. Segments are separated by ``|`` and each
segment splits on its first ``:`` only, so parameters may contain further
colons and commas.
"""

import logging
import re
from dataclasses import dataclass

from .errors import RuleFormatError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"
DISABLE = "-"

_SIZE_PATTERN = re.compile(r"^\s*([0-9]+)\s*([kmgt]?b?)\s*$", re.IGNORECASE)
_SIZE_UNITS = {"": 1, "b": 1, "k": 1024, "m": 1024 ** 2, "g": 1024 ** 3, "t": 1024 ** 4}


@dataclass(frozen=True)
class RuleSpec:
    """One parsed segment of a rule tag."""
    name: str
    param: str | None = None
    raw: str = ""

    def __str__(self) -> str:
        return self.raw or self.name


def rule_name(text: str) -> str:
    """Return the rule name of a segment, dropping any ``:param`` suffix."""
    return text.split(PARAM_SEPARATOR, 1)[0].strip()


def parse_rule_spec(segment: str) -> RuleSpec:
    """Parse a single ``name[:param]`` segment."""
    segment = segment.strip()
    name, sep, param = segment.partition(PARAM_SEPARATOR)
    return RuleSpec(name=name.strip(), param=param if sep else None, raw=segment)


def is_disabled(tag: str | None) -> bool:
    """Check whether a tag turns rule checking off for its field."""
    return tag is None or tag.strip() in ("", DISABLE)


def parse_rule_tag(tag: str | None) -> list[RuleSpec]:
    """Split a rule tag into its ordered RuleSpecs.

    Args:
        tag: Rule tag text, e.g. ``required|email``

    Returns:
        RuleSpecs in declaration order; empty for an absent or disabled tag
    """
    if is_disabled(tag):
        return []

    specs = []
    for segment in tag.split(RULE_SEPARATOR):
        if not segment.strip():
            continue
        specs.append(parse_rule_spec(segment))

    logger.debug(f"Parsed rule tag {tag!r} into {len(specs)} specs")
    return specs


def parse_size(param: str) -> int:
    """Parse a size parameter such as ``2mb`` or ``512kb`` into bytes.

    Used by externally implemented ``size`` rules.

    Raises:
        RuleFormatError: If the parameter is not a size
    """
    match = _SIZE_PATTERN.match(param or "")
    if not match:
        raise RuleFormatError(f"invalid size parameter: {param!r}", rule="size")

    amount, unit = match.groups()
    return int(amount) * _SIZE_UNITS[unit.lower()[:1]]
