"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.random_sources import (
    DeterministicRandomSource,
    FailingRandomSource,
    ShortRandomSource,
)

__all__ = [
    "DeterministicRandomSource",
    "FailingRandomSource",
    "ShortRandomSource",
]
