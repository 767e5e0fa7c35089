"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared fixtures for unit tests.
"""
import pytest

from fieldrules.core.rules import RuleRegistry, default_registry


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# REGISTRY FIXTURES
# =======================

@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh registry with only the built-in rules"""
    return RuleRegistry()


@pytest.fixture(autouse=True)
def restore_default_registry():
    """
    Restore the process-wide registry after each test

    Tests that register rules or load languages on the default registry
    must not leak into other tests.
    """
    saved = (
        dict(default_registry._rules),
        dict(default_registry._messages),
        dict(default_registry._language_messages),
        default_registry._language,
        default_registry._lang_dir,
    )
    yield
    (
        default_registry._rules,
        default_registry._messages,
        default_registry._language_messages,
        default_registry._language,
        default_registry._lang_dir,
    ) = saved


# =======================
# DATA FIXTURES
# =======================

@pytest.fixture
def signup_data() -> dict:
    """A valid signup form payload"""
    return {
        "username": "alice_01",
        "email": "alice@example.com",
        "password": "s3cret!",
        "password_confirm": "s3cret!",
        "age": "34",
        "country": "NZ",
        "terms": "yes",
        "birthday": "1990-04-12",
    }
