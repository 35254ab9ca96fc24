"""Shared fixtures for ruletag tests."""

import pytest
from records import Address, User

from ruletag.registry import RuleRegistry
from ruletag.validator import Validator


@pytest.fixture
def registry():
    """Fresh registry holding only the built-in rules."""
    return RuleRegistry()


@pytest.fixture
def validator(registry):
    """Validator using default tag names and an isolated registry."""
    return Validator(registry=registry)


@pytest.fixture
def valid_user():
    """A User that passes every rule."""
    return User(
        name="Jane Doe",
        email="jane@example.com",
        age=30,
        address=Address(street="Main Street 1", zip="12345"),
    )
