"""XML rendering for sitemap files and the sitemap index."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any

from sitemapgen.dates import parse_date, to_day, to_w3c

if TYPE_CHECKING:
    from sitemapgen.index import IndexEntry
    from sitemapgen.sources.adapter import SourceAdapter

logger = logging.getLogger(__name__)

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
URLSET_XSD = "http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd"
SITEINDEX_XSD = "http://www.sitemaps.org/schemas/sitemap/0.9/siteindex.xsd"


def format_priority(value: float) -> str:
    """Format a priority with five decimals, dropping trailing zeros and point.

    ``1.0 -> "1"``, ``0.98 -> "0.98"``, ``0.5 -> "0.5"``.
    """
    return f"{value:.5f}".rstrip("0").rstrip(".")


def priorities(count: int) -> Iterator[str]:
    """Yield ``count`` formatted priorities from 1 down in steps of ``1/count``."""
    if count <= 0:
        return
    step = 1 / count
    priority = 1.0
    for _ in range(count):
        yield format_priority(priority)
        priority -= step


def _root_open(tag: str, include_schema_location: bool, xsd: str) -> str:
    if include_schema_location:
        return (
            f'<{tag} xmlns:xsi="{XSI_NS}" '
            f'xsi:schemaLocation="{SITEMAP_NS} {xsd}" '
            f'xmlns="{SITEMAP_NS}">'
        )
    return f'<{tag} xmlns="{SITEMAP_NS}">'


def render_urlset(
    items: Sequence[Any],
    source: SourceAdapter,
    *,
    domain: str,
    include_priority: bool = True,
    include_schema_location: bool = True,
) -> str:
    """Render one batch of items as a sitemap ``<urlset>`` document.

    ``<loc>`` is the domain followed by the source's URL path, unescaped.
    ``<lastmod>`` is emitted verbatim when the source supplies one.
    """
    if not items:
        raise ValueError("Cannot render a sitemap file with no items")

    lines = [XML_PROLOG, _root_open("urlset", include_schema_location, URLSET_XSD)]
    ranks = priorities(len(items)) if include_priority else None
    for item in items:
        parts = [f"<url><loc>{domain}{source.url_for(item)}</loc>"]
        lastmod = source.last_modified_for(item)
        if lastmod:
            parts.append(f"<lastmod>{lastmod}</lastmod>")
        if ranks is not None:
            parts.append(f"<priority>{next(ranks)}</priority>")
        parts.append("</url>")
        lines.append("".join(parts))
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_index_urlset(
    entries: Sequence[IndexEntry],
    *,
    domain: str,
    include_priority: bool = True,
    include_schema_location: bool = True,
) -> str:
    """Render the index in the flat style: one ``<url>`` per sitemap file.

    Dates are normalized to ``YYYY-MM-DD``; entries without a parsable date
    get no ``<lastmod>``. Priority decreases linearly across all entries.
    """
    lines = [XML_PROLOG, _root_open("urlset", include_schema_location, URLSET_XSD)]
    ranks = priorities(len(entries)) if include_priority else None
    for entry in entries:
        parts = [f"<url><loc>{domain}/{os.path.basename(entry.file_path)}</loc>"]
        dt = parse_date(entry.date)
        if dt is not None:
            parts.append(f"<lastmod>{to_day(dt)}</lastmod>")
        if ranks is not None:
            parts.append(f"<priority>{next(ranks)}</priority>")
        parts.append("</url>")
        lines.append("".join(parts))
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_sitemapindex(
    entries: Sequence[IndexEntry],
    *,
    domain: str,
    compress: bool = False,
    include_schema_location: bool = True,
) -> str:
    """Render the index as a standard ``<sitemapindex>`` document.

    ``<lastmod>`` is ISO-8601 with offset. ``.gz`` is appended to every
    ``<loc>`` when the sitemap files were compressed.
    """
    suffix = ".gz" if compress else ""
    lines = [XML_PROLOG, _root_open("sitemapindex", include_schema_location, SITEINDEX_XSD)]
    for entry in entries:
        parts = [f"<sitemap><loc>{domain}/{os.path.basename(entry.file_path)}{suffix}</loc>"]
        dt = parse_date(entry.date)
        if dt is not None:
            parts.append(f"<lastmod>{to_w3c(dt)}</lastmod>")
        parts.append("</sitemap>")
        lines.append("".join(parts))
    lines.append("</sitemapindex>")
    return "\n".join(lines) + "\n"
