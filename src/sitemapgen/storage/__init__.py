"""Storage layer: SQLite access for database-backed sources."""

from sitemapgen.storage.connection import get_connection

__all__ = ["get_connection"]
