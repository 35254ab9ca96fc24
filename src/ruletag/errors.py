"""Setup-time errors raised by ruletag.

Field-level failures are never raised; they are collected in an ErrorBag.
The exceptions here cover mistakes made while configuring the engine:
registering rules and parsing rule parameters.
"""


class RuletagError(Exception):
    """Base class for all ruletag errors."""

    def __init__(self, message: str, rule: str = ""):
        self.rule = rule
        super().__init__(message)


class RuleRegistrationError(RuletagError):
    """Raised when a rule cannot be added to a registry."""


class DuplicateRuleError(RuleRegistrationError):
    """Rule name is already bound to a built-in, custom or reserved rule."""


class InvalidRuleNameError(RuleRegistrationError):
    """Rule name is empty or contains a tag separator."""


class SignatureMismatchError(RuleRegistrationError):
    """Rule function does not match any accepted call shape."""


class RuleFormatError(RuletagError):
    """Rule parameter text cannot be interpreted."""
