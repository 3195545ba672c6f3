"""Presentation layer for symcrypt."""
