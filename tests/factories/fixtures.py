# tests/factories/fixtures.py
"""
Factory fixtures for pytest integration.

Usage:
    def test_create(tender_status_factory):
        record = tender_status_factory.build(name="Open")
"""

import pytest

from option_service.domain.entities import get_entity
from tests.factories.base import OptionPayloadFactory, option_factory_for


@pytest.fixture
def tender_status_factory():
    """Factory for unsaved TenderStatusOption rows (string ids)."""
    return option_factory_for(get_entity("tender_status_option"))


@pytest.fixture
def plan_status_factory():
    """Factory for unsaved PlanStatusOption rows (numeric ids)."""
    return option_factory_for(get_entity("plan_status_option"))


@pytest.fixture
def payload_factory():
    """Factory for create-endpoint JSON bodies."""
    return OptionPayloadFactory
