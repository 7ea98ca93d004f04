"""Source adapter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any


class SourceError(Exception):
    """Raised when a source adapter fails to produce a batch of items."""

    def __init__(self, source_name: str, message: str) -> None:
        super().__init__(f"Source '{source_name}': {message}")
        self.source_name = source_name


class SourceAdapter(ABC):
    """Abstract base class for sitemap sources.

    Every adapter knows how to page through its own items and how to turn one
    item into a URL path and a last-modified value. Items are opaque to the
    rest of the system. Adapters subclass either ``OffsetPagedSource`` or
    ``CursorBatchedSource`` rather than this class directly.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name, used as the output filename stem."""

    @abstractmethod
    def url_for(self, item: Any) -> str:
        """URL path of an item, appended verbatim to the configured domain."""

    @abstractmethod
    def last_modified_for(self, item: Any) -> str | None:
        """Last-modified date string of an item, or None/empty when unknown."""

    @abstractmethod
    def batches(self, limit: int) -> Iterator[Sequence[Any]]:
        """Yield non-empty batches of at most ``limit`` items until exhausted."""

    def configure(self, config: dict) -> None:
        """Accept adapter-specific configuration. No-op by default."""


class OffsetPagedSource(SourceAdapter):
    """Source paged with offset/limit semantics."""

    @abstractmethod
    def items(self, offset: int, limit: int) -> Sequence[Any]:
        """Return up to ``limit`` items starting at ``offset``; empty when done."""

    def batches(self, limit: int) -> Iterator[Sequence[Any]]:
        # A short page does not end the loop, only an empty one does.
        offset = 0
        while True:
            page = self.items(offset, limit)
            if not page:
                return
            yield page
            offset += limit


class CursorBatchedSource(SourceAdapter):
    """Source that streams batches from an internal cursor.

    ``open`` and ``close`` bracket one pass; ``close`` is always called, also
    when the pass fails midway.
    """

    def open(self) -> None:
        """Acquire the cursor. No-op by default."""

    def close(self) -> None:
        """Release the cursor. No-op by default."""

    @abstractmethod
    def next_batch(self, limit: int) -> Sequence[Any]:
        """Return the next batch of items; empty when the cursor is exhausted."""

    def batches(self, limit: int) -> Iterator[Sequence[Any]]:
        self.open()
        try:
            while True:
                batch = self.next_batch(limit)
                if not batch:
                    return
                for start in range(0, len(batch), limit):
                    yield batch[start : start + limit]
        finally:
            self.close()
