"""Sitemap index assembly, change detection, and search engine notification."""

from __future__ import annotations

import hashlib
import logging
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from sitemapgen.config import Config
from sitemapgen.dates import parse_date
from sitemapgen.ping import PingResult, ping_search_engines
from sitemapgen.renderer import render_index_urlset, render_sitemapindex
from sitemapgen.writer import GZIP_SUFFIX, read_file, write_file

logger = logging.getLogger(__name__)

Notifier = Callable[..., list[PingResult]]


@dataclass(frozen=True)
class IndexEntry:
    """One sitemap file produced during a run."""

    source_name: str
    date: str | None
    file_path: str


@dataclass(frozen=True)
class IndexResult:
    """Outcome of building the sitemap index.

    ``changed`` is None when change detection is disabled.
    """

    path: str
    entry_count: int
    changed: bool | None = None
    pings: list[PingResult] = field(default_factory=list)


def content_hash(content: str) -> str:
    """SHA-256 hex digest of the UTF-8 encoded content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def _sort_key(entry: IndexEntry) -> tuple[int, float]:
    dt: datetime | None = parse_date(entry.date)
    if dt is None:
        return (0, 0.0)
    return (1, dt.timestamp())


def sort_entries(entries: Sequence[IndexEntry]) -> list[IndexEntry]:
    """Order entries most recent first.

    Entries with an empty or unparsable date sort last. Ties keep their
    original relative order.
    """
    return sorted(entries, key=_sort_key, reverse=True)


def index_path(config: Config) -> str:
    """Logical path of the index file (without any ``.gz`` suffix)."""
    return os.path.join(config.output_path, f"{config.index_sitemap_name}.xml")


def index_url(config: Config) -> str:
    """Public URL of the index file as written to disk."""
    suffix = GZIP_SUFFIX if config.compress_with_gzip else ""
    return f"{config.domain}/{config.index_sitemap_name}.xml{suffix}"


def _stored_hash(path: str, compressed: bool) -> str:
    content = read_file(path, compressed_first=compressed)
    return "" if content is None else content_hash(content)


def render_index(entries: Sequence[IndexEntry], config: Config) -> str:
    """Render already-sorted entries in the configured index style."""
    if config.index_style == "sitemapindex":
        return render_sitemapindex(
            entries,
            domain=config.domain,
            compress=config.compress_with_gzip,
            include_schema_location=config.include_schema_location,
        )
    return render_index_urlset(
        entries,
        domain=config.domain,
        include_priority=config.include_priority,
        include_schema_location=config.include_schema_location,
    )


def create_index(
    entries: Sequence[IndexEntry],
    config: Config,
    *,
    notifier: Notifier = ping_search_engines,
) -> IndexResult:
    """Write the sitemap index and ping search engines if its content changed.

    Change detection compares the hash of the rendered content with that of
    the index already on disk, read from the variant matching the current
    compression setting first. A missing previous index counts as a change.
    """
    path = index_path(config)

    old_hash = ""
    if config.ping_search_engines:
        old_hash = _stored_hash(path, config.compress_with_gzip)

    ordered = sort_entries(entries)
    content = render_index(ordered, config)
    write_file(path, content, config.compress_with_gzip)
    logger.info(
        "Index written: %s (%d entries, style=%s)",
        path, len(ordered), config.index_style,
    )

    if not config.ping_search_engines:
        return IndexResult(path=path, entry_count=len(ordered))

    new_hash = content_hash(content)
    if new_hash == old_hash:
        logger.info("Index unchanged; skipping search engine ping")
        return IndexResult(path=path, entry_count=len(ordered), changed=False)

    logger.info("Index changed; pinging search engines")
    pings = notifier(index_url(config), timeout=config.ping_timeout_seconds)
    return IndexResult(path=path, entry_count=len(ordered), changed=True, pings=pings)
