"""ruletag - declarative per-field validation for Python records.

Records declare a rule tag per field (``required|email``, ``min:18``,
``in:red,green,blue``). Validation walks the record, nested records included,
and collects every failure into an ErrorBag keyed by dotted field path instead
of raising on the first one.
"""

__version__ = "0.1.0"
__description__ = "Declarative per-field validation for dataclasses and pydantic models"

from ruletag.bag import ERROR_KEY, ErrorBag
from ruletag.config import RuletagConfig, load_config
from ruletag.errors import (
    DuplicateRuleError,
    InvalidRuleNameError,
    RuleFormatError,
    RuleRegistrationError,
    RuletagError,
    SignatureMismatchError,
)
from ruletag.fields import FieldDescriptor, describe_fields
from ruletag.registry import RuleRegistry, get_default_registry, reset_default_registry
from ruletag.rules import match
from ruletag.tags import RuleSpec, parse_rule_tag
from ruletag.validator import Validator

__all__ = [
    "__version__",
    "__description__",
    "ERROR_KEY",
    "ErrorBag",
    "RuletagConfig",
    "load_config",
    "RuletagError",
    "RuleRegistrationError",
    "DuplicateRuleError",
    "InvalidRuleNameError",
    "SignatureMismatchError",
    "RuleFormatError",
    "FieldDescriptor",
    "describe_fields",
    "RuleRegistry",
    "get_default_registry",
    "reset_default_registry",
    "match",
    "RuleSpec",
    "parse_rule_tag",
    "Validator",
]
