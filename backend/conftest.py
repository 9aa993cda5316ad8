"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest

from statuses.catalog import status_catalogs


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def reset_status_catalogs():
    """
    Drop the status catalog snapshot after each test.

    The catalogs are a process-wide singleton; a snapshot loaded inside one
    test's transaction holds rows that are rolled back when the test ends.
    """
    yield  # Run the test
    status_catalogs.invalidate()


# ============================================================================
# IMPORT ALL FIXTURES FROM core_backend/tests/fixtures.py
# ============================================================================

from core_backend.tests.fixtures import *  # noqa
