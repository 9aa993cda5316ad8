"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like users, menu items, tables and API clients.
"""
import pytest
from decimal import Decimal

from menu.models import MenuItem
from statuses.catalog import status_catalogs
from statuses.services import ensure_default_statuses
from statuses.states import TableState
from tables.models import RestaurantTable
from users.models import User


# ============================================================================
# STATUS FIXTURES
# ============================================================================

@pytest.fixture
def default_statuses(db):
    """Make sure every well-known status row exists and the catalogs see them"""
    ensure_default_statuses()
    status_catalogs.invalidate()
    return status_catalogs


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def staff_user(db):
    """Create a staff user who takes orders"""
    return User.objects.create_user(
        email='waiter@restaurant.com',
        password='password123',
        first_name='Wendy',
        last_name='Waiter',
        role=User.Role.STAFF,
    )


@pytest.fixture
def admin_user(db):
    """Create an admin user"""
    return User.objects.create_user(
        email='admin@restaurant.com',
        password='password123',
        role=User.Role.ADMIN,
        is_staff=True,
    )


# ============================================================================
# MENU FIXTURES
# ============================================================================

@pytest.fixture
def burger(db):
    """Create a burger menu item"""
    return MenuItem.objects.create(name='Burger', price=Decimal('12.50'))


@pytest.fixture
def soda(db):
    """Create a soda menu item"""
    return MenuItem.objects.create(name='Soda', price=Decimal('2.75'))


# ============================================================================
# TABLE FIXTURES
# ============================================================================

def _make_table(label, seats=4, state=TableState.AVAILABLE, is_active=True):
    return RestaurantTable.objects.create(
        label=label,
        seats=seats,
        is_active=is_active,
        status=status_catalogs.tables.lookup(state),
    )


@pytest.fixture
def table_factory(default_statuses):
    """
    Factory fixture for tables.

    Usage:
        def test_something(table_factory):
            table = table_factory('T9', seats=6, state=TableState.RESERVED)
    """
    return _make_table


@pytest.fixture
def table_t1(table_factory):
    """Create table T1, AVAILABLE"""
    return table_factory('T1')


@pytest.fixture
def table_t2(table_factory):
    """Create table T2, AVAILABLE"""
    return table_factory('T2', seats=2)


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Unauthenticated DRF API client.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/health/')
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, staff_user):
    """API client authenticated as the staff user"""
    api_client.force_authenticate(user=staff_user)
    return api_client
