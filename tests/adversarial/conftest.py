"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent registration tests.
"""

from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def clean_attendees(clean_database: None) -> Generator[None, None, None]:
    """Clean attendees table before each adversarial test."""
    yield
