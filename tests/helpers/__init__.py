"""Test helper utilities for licensetext tests."""

from .fixture_registry import (
    MIT_TEXT,
    CountingRegistry,
    fixture_context,
    fixture_registry,
)

__all__ = ["MIT_TEXT", "CountingRegistry", "fixture_context", "fixture_registry"]
