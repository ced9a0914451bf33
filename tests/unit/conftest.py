"""
Pytest configuration for unit tests.

Unit tests never reach a real database, so connection strings from the
developer's environment are removed before each test.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def no_configured_connection_strings(monkeypatch):
    """Drop CONNECTION_STRINGS* variables for the duration of a test."""
    for key in list(os.environ):
        if key.upper().startswith("CONNECTION_STRINGS"):
            monkeypatch.delenv(key)
