"""Field descriptors: what the walker needs to know about a record type.

Three kinds of record types are understood:

- dataclasses, with tags in ``dataclasses.field(metadata={...})``
- pydantic models, with tags in ``Field(json_schema_extra={...})``
- any class providing a ``__rule_fields__()`` classmethod that returns
  FieldDescriptors itself

Descriptors are computed once per (type, tag names) pair and cached.
"""

import dataclasses
import logging
from functools import lru_cache
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_TAG_FIELD = "json"
DEFAULT_TAG_RULE = "valid"

# Metadata key that stops the walker from descending into a field's value
NESTED_KEY = "nested"


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """How one field of a record type is validated.

    Attributes:
        name: Attribute name on the record
        display_name: Segment used in the field path
        rule_tag: Raw rule tag, None when the field has none
        nested: Whether the walker may descend into the value when it is a record
    """
    name: str
    display_name: str
    rule_tag: str | None = None
    nested: bool = True


def display_name_from_tag(tag: Any, default: str) -> str:
    """Take the name part of a display-name tag such as ``"email,omitempty"``."""
    if not isinstance(tag, str):
        return default
    name = tag.split(",", 1)[0].strip()
    return name or default


def _dataclass_fields(record_type: type, tag_field: str, tag_rule: str) -> tuple[FieldDescriptor, ...]:
    descriptors = []
    for f in dataclasses.fields(record_type):
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                display_name=display_name_from_tag(f.metadata.get(tag_field), f.name),
                rule_tag=f.metadata.get(tag_rule),
                nested=bool(f.metadata.get(NESTED_KEY, True)),
            )
        )
    return tuple(descriptors)


def _pydantic_fields(record_type: type[BaseModel], tag_field: str, tag_rule: str) -> tuple[FieldDescriptor, ...]:
    descriptors = []
    for name, info in record_type.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        descriptors.append(
            FieldDescriptor(
                name=name,
                display_name=display_name_from_tag(extra.get(tag_field), info.alias or name),
                rule_tag=extra.get(tag_rule),
                nested=bool(extra.get(NESTED_KEY, True)),
            )
        )
    return tuple(descriptors)


@lru_cache(maxsize=256)
def describe_fields(
    record_type: type,
    tag_field: str = DEFAULT_TAG_FIELD,
    tag_rule: str = DEFAULT_TAG_RULE,
) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptors of a record type in declaration order.

    Args:
        record_type: Dataclass, pydantic model, or class with ``__rule_fields__``
        tag_field: Metadata key carrying display names
        tag_rule: Metadata key carrying rule tags

    Returns:
        Tuple of FieldDescriptor

    Raises:
        TypeError: If record_type is none of the supported kinds
    """
    hook = getattr(record_type, "__rule_fields__", None)
    if hook is not None:
        descriptors = tuple(hook())
    elif isinstance(record_type, type) and issubclass(record_type, BaseModel):
        descriptors = _pydantic_fields(record_type, tag_field, tag_rule)
    elif dataclasses.is_dataclass(record_type):
        descriptors = _dataclass_fields(record_type, tag_field, tag_rule)
    else:
        raise TypeError(f"{record_type!r} is not a record type")

    logger.debug(f"Described {len(descriptors)} fields of {record_type.__name__}")
    return descriptors
