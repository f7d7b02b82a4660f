# tests/unit/__init__.py
"""
Unit tests for individual components.

Database-backed tests use the per-test in-memory SQLite engine from
conftest.py, so they stay fast and independent.
"""
