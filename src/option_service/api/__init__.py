"""HTTP transport layer: application factory, routes, schemas, middleware."""
