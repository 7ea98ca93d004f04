"""SQLite source: streams rows of a query with a server-side cursor."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import ExitStack

from sitemapgen.sources.adapter import CursorBatchedSource
from sitemapgen.storage.connection import get_connection

logger = logging.getLogger(__name__)


class SQLiteQuerySource(CursorBatchedSource):
    """Cursor-batched source backed by a SQL query.

    Rows are fetched with ``fetchmany`` so the full result set is never held
    in memory. ``url_template`` is formatted with the row's columns when set,
    otherwise the ``url_column`` value is used as-is.
    """

    def __init__(
        self,
        name: str = "sqlite",
        database_path: str = "",
        query: str = "",
        *,
        url_column: str = "url",
        lastmod_column: str | None = "lastmod",
        url_template: str | None = None,
    ) -> None:
        self._name = name
        self._database_path = database_path
        self._query = query
        self._url_column = url_column
        self._lastmod_column = lastmod_column
        self._url_template = url_template
        self._stack: ExitStack | None = None
        self._cursor: sqlite3.Cursor | None = None

    @property
    def name(self) -> str:
        return self._name

    def configure(self, config: dict) -> None:
        self._name = config.get("name", self._name)
        self._database_path = config.get("database_path", self._database_path)
        self._query = config.get("query", self._query)
        self._url_column = config.get("url_column", self._url_column)
        self._lastmod_column = config.get("lastmod_column", self._lastmod_column)
        self._url_template = config.get("url_template", self._url_template)

    def open(self) -> None:
        if not self._database_path or not self._query:
            raise ValueError(f"SQLite source '{self._name}' needs database_path and query")
        self._stack = ExitStack()
        try:
            conn = self._stack.enter_context(
                get_connection(self._database_path, readonly=True)
            )
            self._cursor = conn.execute(self._query)
        except BaseException:
            self.close()
            raise
        logger.debug("Opened cursor for source '%s'", self._name)

    def close(self) -> None:
        self._cursor = None
        if self._stack is not None:
            stack, self._stack = self._stack, None
            stack.close()

    def next_batch(self, limit: int) -> list[sqlite3.Row]:
        if self._cursor is None:
            raise RuntimeError(f"SQLite source '{self._name}' is not open")
        return self._cursor.fetchmany(limit)

    def url_for(self, item: sqlite3.Row) -> str:
        if self._url_template:
            return self._url_template.format(**dict(item))
        return str(item[self._url_column])

    def last_modified_for(self, item: sqlite3.Row) -> str | None:
        if not self._lastmod_column:
            return None
        value = item[self._lastmod_column]
        return None if value is None else str(value)
