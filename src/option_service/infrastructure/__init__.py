"""Infrastructure adapters: database, identifier generation, observability."""
