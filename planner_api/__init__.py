"""Event planning REST API over PostgreSQL."""
