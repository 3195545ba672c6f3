"""Root pytest configuration.

Test Structure:
    tests/
    ├── symcrypt/              # Library tests
    │   └── unit/              # Fast, isolated tests
    │       ├── domain/
    │       ├── infrastructure/
    │       └── presentation/
    ├── symcrypt_config/       # Settings tests
    └── shared/                # Shared fixtures and utilities

Every test runs with SYMCRYPT_* variables removed from the environment, a
fresh settings cache and a temporary working directory, so a developer's
own key or .env file never leaks into the tests.
"""

import os

import pytest

from symcrypt_config import clear_settings_cache


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Clear SYMCRYPT_* environment and the settings cache for each test."""
    for name in list(os.environ):
        if name.startswith("SYMCRYPT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()
