# tests/__init__.py
"""
Test suite for Option Service.

- unit: service, repository, id generator, catalog and error handling tests
- integration: HTTP tests through the full FastAPI stack
- factories: Factory Boy factories for option rows and request bodies
"""
