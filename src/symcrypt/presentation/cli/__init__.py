"""Symcrypt command line interface."""

from symcrypt.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
