"""Generation pass: turns one source into sitemap files and index entries."""

from __future__ import annotations

import logging
import os
from contextlib import closing

from sitemapgen.batching import iter_batches
from sitemapgen.config import Config
from sitemapgen.index import IndexEntry
from sitemapgen.renderer import render_urlset
from sitemapgen.sources.adapter import SourceAdapter, SourceError
from sitemapgen.writer import write_file

logger = logging.getLogger(__name__)


def sitemap_path(output_path: str, source_name: str, sequence: int) -> str:
    """Logical path of the ``sequence``-th file for a source.

    The first file has no numeric suffix: ``products.xml``, ``products-1.xml``, ...
    """
    suffix = f"-{sequence}" if sequence else ""
    return os.path.join(output_path, f"{source_name}{suffix}.xml")


def generate(source: SourceAdapter, config: Config) -> list[IndexEntry]:
    """Write every sitemap file for ``source`` and return their index entries.

    Each entry's date is the last-modified value of the first item in its
    file. Failures inside the adapter, including its ``url_for`` and
    ``last_modified_for``, surface as SourceError; files already written are
    left in place. OSError from the writer propagates unchanged.
    """
    entries: list[IndexEntry] = []
    total_urls = 0

    with closing(iter_batches(source, config.max_urls_per_file)) as batches:
        for sequence, batch in enumerate(batches):
            try:
                content = render_urlset(
                    batch,
                    source,
                    domain=config.domain,
                    include_priority=config.include_priority,
                    include_schema_location=config.include_schema_location,
                )
                first_lastmod = source.last_modified_for(batch[0])
            except Exception as exc:
                raise SourceError(source.name, f"failed to render items: {exc}") from exc
            path = write_file(
                sitemap_path(config.output_path, source.name, sequence),
                content,
                config.compress_with_gzip,
            )
            entries.append(
                IndexEntry(
                    source_name=source.name,
                    date=first_lastmod,
                    file_path=path,
                )
            )
            total_urls += len(batch)

    logger.info(
        "Source '%s': %d URLs in %d file(s)", source.name, total_urls, len(entries)
    )
    return entries
