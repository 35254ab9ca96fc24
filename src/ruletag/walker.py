"""Recursive traversal of a record's fields."""

import logging
from typing import Any

from .bag import ErrorBag
from .evaluator import evaluate
from .fields import DEFAULT_TAG_FIELD, DEFAULT_TAG_RULE, describe_fields
from .registry import RuleRegistry
from .tags import DISABLE, parse_rule_tag
from .values import is_aggregate

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


def join_path(parent: str, name: str) -> str:
    """Join a parent path and a field name; top-level fields have no leading dot."""
    return f"{parent}{PATH_SEPARATOR}{name}" if parent else name


def walk_record(
    record: Any,
    registry: RuleRegistry,
    parent: str = "",
    tag_field: str = DEFAULT_TAG_FIELD,
    tag_rule: str = DEFAULT_TAG_RULE,
) -> ErrorBag:
    """Validate every field of record, descending into nested records.

    Fields are visited in declaration order. A field whose rule tag is ``-`` is
    skipped together with everything below it. A field with no rule tag has no
    rules of its own, but a record held in it is still walked. Lists and other
    sequences are never descended into.

    Args:
        record: Record instance
        registry: Registry used to resolve rule names
        parent: Path of the record itself, empty at the top level
        tag_field: Metadata key carrying display names
        tag_rule: Metadata key carrying rule tags

    Returns:
        ErrorBag for this record and everything below it
    """
    bag = ErrorBag()

    for descriptor in describe_fields(type(record), tag_field, tag_rule):
        tag = descriptor.rule_tag
        if tag is not None and tag.strip() == DISABLE:
            continue

        path = join_path(parent, descriptor.display_name)
        value = getattr(record, descriptor.name, None)

        specs = parse_rule_tag(tag)
        if specs:
            evaluate(value, path, specs, bag, registry)

        if descriptor.nested and is_aggregate(value):
            logger.debug(f"Descending into {path}")
            bag.merge(walk_record(value, registry, path, tag_field, tag_rule))

    return bag
