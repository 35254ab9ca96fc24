"""Rule registry: maps rule names to rule functions.

A registry starts out seeded with the built-in rules and can be extended with
custom ones. Rules are never removed individually; ``reset`` returns a registry
to its built-in state.

Registration is not synchronized. Register custom rules before validating
from several threads; concurrent validation against a registry that is no
longer changing is safe.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from .errors import DuplicateRuleError, InvalidRuleNameError, SignatureMismatchError
from .rules import BUILTIN_RULES, EXTERNAL_RULES, RuleFunction
from .tags import PARAM_SEPARATOR, RULE_SEPARATOR, rule_name

logger = logging.getLogger(__name__)

# Accepted positional shapes for add_rule_func, by parameter count
ACCEPTED_ARITIES = {
    2: "(value, field)",
    3: "(value, field, rule)",
    4: "(value, field, rule, is_required)",
}


class RuleRegistry:
    """Name to rule-function mapping."""

    def __init__(self):
        self._rules: dict[str, RuleFunction] = dict(BUILTIN_RULES)

    def __contains__(self, name: str) -> bool:
        name = rule_name(name)
        return name in self._rules or name in EXTERNAL_RULES

    def __len__(self) -> int:
        return len(self._rules)

    def names(self) -> list[str]:
        """Bound rule names in registration order."""
        return list(self._rules)

    def is_builtin(self, name: str) -> bool:
        name = rule_name(name)
        return name in BUILTIN_RULES and BUILTIN_RULES[name] is self._rules.get(name)

    def get(self, name: str) -> RuleFunction | None:
        """Look up a rule by name, ignoring any ``:param`` suffix."""
        return self._rules.get(rule_name(name))

    def add_rule(self, name: str, fn: RuleFunction) -> None:
        """Register a rule with the canonical ``(value, field, rule, is_required)`` signature.

        Args:
            name: Rule name as used in tags
            fn: Rule function returning a message or None

        Raises:
            InvalidRuleNameError: If name is empty, padded with whitespace,
                or contains a separator
            DuplicateRuleError: If name is already bound or reserved
            TypeError: If fn is not callable
        """
        self._check_name(name)
        if not callable(fn):
            raise TypeError(f"rule {name!r} must be callable, got {type(fn).__name__}")

        self._rules[name] = fn
        logger.info(f"Registered rule: {name}")

    def add_rule_func(self, name: str, fn: Callable[..., Any]) -> None:
        """Register a rule function of any accepted call shape.

        Functions taking ``(value, field)`` or ``(value, field, rule)`` are
        adapted to the canonical four-argument form.

        Raises:
            InvalidRuleNameError: If name is empty or contains a separator
            DuplicateRuleError: If name is already bound or reserved
            SignatureMismatchError: If fn matches none of ACCEPTED_ARITIES
        """
        self._check_name(name)
        arity = _positional_arity(fn)
        if arity not in ACCEPTED_ARITIES:
            shapes = ", ".join(ACCEPTED_ARITIES.values())
            raise SignatureMismatchError(
                f"rule {name!r} function signature is not accepted; expected one of {shapes}",
                rule=name,
            )

        self.add_rule(name, _adapt(fn, arity))

    def reset(self) -> None:
        """Drop every custom rule and restore the built-ins."""
        self._rules = dict(BUILTIN_RULES)
        logger.info("Rule registry reset to built-in rules")

    def _check_name(self, name: str) -> None:
        # tags are trimmed before lookup, so padded names could never match
        if not name or name != name.strip() or PARAM_SEPARATOR in name or RULE_SEPARATOR in name:
            raise InvalidRuleNameError(f"invalid rule name {name!r}", rule=name)
        if name in self:
            raise DuplicateRuleError(f"rule {name!r} is already defined", rule=name)


def _positional_arity(fn: Callable[..., Any]) -> int | None:
    """Count fn's positional parameters, or None when it cannot be called positionally."""
    if not callable(fn):
        return None
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
        elif param.kind == param.KEYWORD_ONLY and param.default is param.empty:
            return None
        elif param.kind == param.VAR_POSITIONAL:
            return None
    return count


def _adapt(fn: Callable[..., Any], arity: int) -> RuleFunction:
    if arity == 4:
        return fn

    def rule_fn(value: Any, field: str, rule: str, is_required: bool) -> Any:
        return fn(value, field, rule) if arity == 3 else fn(value, field)

    rule_fn.__name__ = getattr(fn, "__name__", "custom_rule")
    rule_fn.__doc__ = fn.__doc__
    return rule_fn


_default_registry: RuleRegistry | None = None


def get_default_registry() -> RuleRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = RuleRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Restore the process-wide registry to its built-in rules."""
    get_default_registry().reset()
