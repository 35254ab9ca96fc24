"""Applies one field's ordered rule list."""

import logging
from collections.abc import Iterable
from typing import Any

from .bag import ErrorBag
from .registry import RuleRegistry
from .rules import REQUIRED
from .tags import RuleSpec

logger = logging.getLogger(__name__)

MSG_RULE_FAILED = "The {field} field rule {rule} could not be evaluated: {error}"


def evaluate(
    value: Any,
    path: str,
    specs: Iterable[RuleSpec],
    bag: ErrorBag,
    registry: RuleRegistry,
) -> None:
    """Run every rule in specs against value and record failures in bag.

    Rules run in declaration order and all of them run; a failing rule does not
    stop the ones after it. Once ``required`` is seen, every later rule is called
    with ``is_required=True``. Unknown rule names are skipped.

    Args:
        value: Field value
        path: Field path, used both as bag key and in messages
        specs: Parsed rule tag
        bag: Error bag to append messages to
        registry: Registry to resolve rule names against
    """
    is_required = False

    for spec in specs:
        if spec.name == REQUIRED:
            is_required = True

        fn = registry.get(spec.name)
        if fn is None:
            logger.debug(f"Skipping unknown rule {spec.name!r} on {path}")
            continue

        try:
            result = fn(value, path, spec.raw, is_required)
        except Exception as e:
            logger.error(f"Rule {spec.name} failed on {path} with error: {e}")
            bag.add(path, MSG_RULE_FAILED.format(field=path, rule=spec.name, error=e))
            continue

        if result:
            bag.add(path, str(result))
