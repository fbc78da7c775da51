"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os
import sys

import pytest

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Must be set before config.py is imported anywhere
os.environ["RUNTIME_ENVIRONMENT"] = "TEST"
os.environ.setdefault("COPY_LANGUAGE", "en")


# ============================================================================
# Order Snapshot Fixtures
# ============================================================================

@pytest.fixture
def store_order():
    """Store order that the merchant has marked ready, paid by card but not yet paid."""
    return {
        "status": "pending",
        "store_id": 5,
        "store_status": "ready",
        "payment_method": "card",
        "payment_status": "pending",
    }


@pytest.fixture
def system_no_driver_cancelled_order():
    """Order the platform cancelled after dispatch ran out of riders."""
    return {
        "status": "cancelled",
        "cancelled_by": "system",
        "cancel_reason": "no_drivers_available",
    }


@pytest.fixture
def user_cancelled_order():
    """Order cancelled by the customer."""
    return {
        "status": "cancelled",
        "cancelled_by": "customer",
        "cancel_reason": "changed_mind",
    }
