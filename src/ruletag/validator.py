"""Validator: the entry point for validating records."""

import logging
from typing import Any

from .bag import ERROR_KEY, ErrorBag
from .config import RuletagConfig
from .fields import DEFAULT_TAG_FIELD, DEFAULT_TAG_RULE
from .registry import RuleRegistry, get_default_registry
from .values import is_aggregate
from .walker import walk_record

logger = logging.getLogger(__name__)

MSG_INVALID_INPUT = "validator: invalid input type"


class Validator:
    """Validates records against the rule tags on their fields.

    Args:
        tag_field: Metadata key carrying display names (default ``json``)
        tag_rule: Metadata key carrying rule tags (default ``valid``)
        registry: Rule registry; the process-wide default when omitted
    """

    def __init__(
        self,
        tag_field: str | None = None,
        tag_rule: str | None = None,
        registry: RuleRegistry | None = None,
    ):
        self.tag_field = tag_field or DEFAULT_TAG_FIELD
        self.tag_rule = tag_rule or DEFAULT_TAG_RULE
        self.registry = registry if registry is not None else get_default_registry()

    @classmethod
    def from_config(cls, config: RuletagConfig, registry: RuleRegistry | None = None) -> "Validator":
        """Build a validator from loaded configuration."""
        return cls(tag_field=config.tags.field_tag, tag_rule=config.tags.rule_tag, registry=registry)

    def validate(self, record: Any) -> ErrorBag:
        """Validate a record.

        Args:
            record: Dataclass instance, pydantic model instance, or object whose
                class implements ``__rule_fields__``

        Returns:
            ErrorBag keyed by field path; empty when the record is valid. Input
            that is not a record yields a bag holding only the ``_error`` key.
        """
        if not is_aggregate(record):
            logger.debug(f"Rejecting non-record input of type {type(record).__name__}")
            bag = ErrorBag()
            bag.add(ERROR_KEY, MSG_INVALID_INPUT)
            return bag

        bag = walk_record(record, self.registry, "", self.tag_field, self.tag_rule)
        logger.debug(f"Validated {type(record).__name__}: {len(bag)} failing fields")
        return bag
