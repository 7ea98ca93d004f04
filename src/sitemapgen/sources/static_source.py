"""Static source: serves a fixed list of URL entries from config or a JSON file."""

from __future__ import annotations

import json
import logging

from sitemapgen.sources.adapter import OffsetPagedSource

logger = logging.getLogger(__name__)


class StaticSource(OffsetPagedSource):
    """Offset-paged source over a list of ``{"loc": ..., "lastmod": ...}`` dicts.

    Entries come either inline (``entries``) or from a JSON file (``path``)
    holding a list of the same dicts. The file is read lazily on first page.
    """

    def __init__(self, name: str = "static", entries: list[dict] | None = None) -> None:
        self._name = name
        self._entries = entries
        self._path: str | None = None

    @property
    def name(self) -> str:
        return self._name

    def configure(self, config: dict) -> None:
        self._name = config.get("name", self._name)
        if "entries" in config:
            self._entries = list(config["entries"])
        self._path = config.get("path")

    def items(self, offset: int, limit: int) -> list[dict]:
        return self._load()[offset : offset + limit]

    def url_for(self, item: dict) -> str:
        return item["loc"]

    def last_modified_for(self, item: dict) -> str | None:
        return item.get("lastmod")

    def _load(self) -> list[dict]:
        if self._entries is None:
            if self._path is None:
                raise ValueError(f"Static source '{self._name}' has neither entries nor path")
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"{self._path}: expected a JSON list of entries")
            self._entries = data
            logger.debug("Loaded %d entries from %s", len(data), self._path)
        return self._entries
