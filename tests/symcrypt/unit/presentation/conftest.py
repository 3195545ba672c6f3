"""Fixtures for CLI tests."""

import logging

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    symcrypt_level = logging.getLogger("symcrypt").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("symcrypt").setLevel(symcrypt_level)
