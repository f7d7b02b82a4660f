# tests/factories/__init__.py
"""
Factory Boy factories for creating test data.
"""

from tests.factories.base import OptionPayloadFactory, option_factory_for

__all__ = ["OptionPayloadFactory", "option_factory_for"]
