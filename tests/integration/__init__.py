# tests/integration/__init__.py
"""
Integration tests for the HTTP API.

Requests go through middleware, error handlers and dependencies, backed by
the per-test in-memory database.
"""
