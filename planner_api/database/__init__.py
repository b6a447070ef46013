"""Database access layer: pooled connections, schema and per-table queries."""

from .connection import create_pool, get_cursor

__all__ = ["create_pool", "get_cursor"]
