"""Sitemap sources: adapter interface, registry, and bundled adapters."""

from sitemapgen.sources.registry import register_source
from sitemapgen.sources.sqlite_source import SQLiteQuerySource
from sitemapgen.sources.static_source import StaticSource

register_source("static", StaticSource)
register_source("sqlite", SQLiteQuerySource)
