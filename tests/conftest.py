"""
Test configuration for the network directory server.
"""
import pytest

from tests.reference import REFERENCE_CONFIG, REFERENCE_DATE


@pytest.fixture
def loyalty_config():
    """The reference tier table, independent of Django settings."""
    return REFERENCE_CONFIG


@pytest.fixture
def now():
    return REFERENCE_DATE
