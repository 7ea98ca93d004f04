"""File writer: persists rendered XML, optionally gzip-compressed."""

from __future__ import annotations

import gzip
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

GZIP_SUFFIX = ".gz"


def write_file(path: str | Path, content: str, compress: bool) -> str:
    """Write ``content`` to ``path``, or gzip it to ``path + ".gz"``.

    Returns the logical ``path`` in both cases; callers append ``.gz`` when
    they need the physical file name. Output goes to a temporary sibling first
    and is moved into place, so a failed write never leaves a truncated file.
    The gzip header carries no timestamp or filename, so identical content
    always yields identical bytes. OSError propagates.
    """
    logical = str(path)
    target = Path(logical + GZIP_SUFFIX if compress else logical)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_name(target.name + ".tmp")

    data = content.encode("utf-8")
    try:
        with open(tmp, "wb") as f:
            if compress:
                with gzip.GzipFile(filename="", mode="wb", fileobj=f, mtime=0) as gz:
                    gz.write(data)
            else:
                f.write(data)
        os.replace(tmp, target)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

    logger.debug("Wrote %s (%d bytes uncompressed)", target, len(data))
    return logical


def read_file(path: str | Path, *, compressed_first: bool = False) -> str | None:
    """Read back the logical file at ``path``.

    Looks at the plain file first and falls back to ``path + ".gz"``, or the
    other way round when ``compressed_first`` is set. Returns the
    uncompressed text, or None when neither file exists.
    """
    plain = Path(path)
    compressed = Path(str(path) + GZIP_SUFFIX)
    candidates = (compressed, plain) if compressed_first else (plain, compressed)
    for candidate in candidates:
        if not candidate.exists():
            continue
        if candidate is compressed:
            with gzip.open(candidate, "rt", encoding="utf-8") as f:
                return f.read()
        return candidate.read_text(encoding="utf-8")
    return None
