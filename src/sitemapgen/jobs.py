"""Run orchestration: generate every configured source, then the index."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sitemapgen.config import Config
from sitemapgen.generator import generate
from sitemapgen.index import IndexEntry, IndexResult, create_index
import sitemapgen.sources  # noqa: F401  (triggers source registration)
from sitemapgen.sources.adapter import SourceAdapter, SourceError
from sitemapgen.sources.registry import get_source_class

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """What one generation run produced."""

    entries: list[IndexEntry] = field(default_factory=list)
    failed_sources: list[str] = field(default_factory=list)
    index: IndexResult | None = None

    @property
    def files_written(self) -> int:
        return len(self.entries)


def load_sources(sources_config_path: str) -> list[SourceAdapter]:
    """Build source adapters from the JSON sources file.

    Expected format:
    {
        "sources": [
            {"type": "static", "name": "pages", "path": "./pages.json"},
            {"type": "sqlite", "name": "products", "database_path": "...", "query": "..."}
        ]
    }
    Unknown types and disabled entries are skipped.
    """
    with open(sources_config_path, encoding="utf-8") as f:
        data = json.load(f)

    sources: list[SourceAdapter] = []
    for source_config in data.get("sources", []):
        source_type = source_config.get("type", "")
        source_cls = get_source_class(source_type)
        if source_cls is None:
            logger.warning("Unknown source type '%s', skipping", source_type)
            continue
        if not source_config.get("enabled", True):
            continue
        source = source_cls()
        source.configure(source_config)
        sources.append(source)
    return sources


def run_generation(
    config: Config, sources: Sequence[SourceAdapter] | None = None
) -> RunSummary:
    """Generate sitemaps for each source in order, then build the index.

    A failing source is logged and skipped; its earlier files stay on disk but
    are not listed in the index. OSError is fatal and propagates.
    """
    if sources is None:
        sources = load_sources(config.sources_config_path)

    summary = RunSummary()
    for source in sources:
        try:
            summary.entries.extend(generate(source, config))
        except SourceError:
            logger.exception("Source '%s' generation failed", source.name)
            summary.failed_sources.append(source.name)

    summary.index = create_index(summary.entries, config)
    logger.info(
        "Generation complete: %d file(s), %d failed source(s)",
        summary.files_written, len(summary.failed_sources),
    )
    return summary
