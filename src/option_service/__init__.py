"""Option service: CRUD and soft-delete API for e-procurement reference options."""
