"""Shared fixtures for docmock tests."""

import pytest
from faker import Faker

from docmock.config.settings import reset_settings

SETTINGS_ENV_VARS = (
    "DOCMOCK_SEED",
    "DOCMOCK_LOCALE",
    "DOCMOCK_REQUIRED_ONLY",
    "DOCMOCK_FALLBACK",
    "DOCMOCK_MAX_DEPTH",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fake():
    """Seeded Faker instance."""
    fk = Faker("en_US")
    fk.seed_instance(1234)
    return fk
