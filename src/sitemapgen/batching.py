"""Batch reader: drives a source adapter page by page."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from sitemapgen.sources.adapter import SourceAdapter, SourceError

logger = logging.getLogger(__name__)


def iter_batches(source: SourceAdapter, max_urls_per_file: int) -> Iterator[list[Any]]:
    """Yield successive non-empty batches of at most ``max_urls_per_file`` items.

    Any exception raised by the adapter while producing a batch is re-raised
    as SourceError, chained to the original. Close the returned generator
    (or exhaust it) to release cursor-backed sources.
    """
    if max_urls_per_file <= 0:
        raise ValueError(f"max_urls_per_file must be positive, got {max_urls_per_file}")

    batches = source.batches(max_urls_per_file)
    try:
        while True:
            try:
                batch = next(batches)
            except StopIteration:
                return
            except SourceError:
                raise
            except Exception as exc:
                raise SourceError(source.name, f"failed to fetch items: {exc}") from exc

            if len(batch) > max_urls_per_file:
                raise SourceError(
                    source.name,
                    f"returned {len(batch)} items, limit is {max_urls_per_file}",
                )
            logger.debug("Source '%s' produced a batch of %d items", source.name, len(batch))
            yield list(batch)
    finally:
        batches.close()
