"""Lenient date parsing for last-modified values supplied by sources."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

logger = logging.getLogger(__name__)


def parse_date(value: str | None) -> datetime | None:
    """Parse an ISO-8601 or RFC-2822 date string into an aware datetime.

    Naive values are taken as UTC. Returns None for empty or unparsable
    input. Never raises.
    """
    if value is None:
        return None
    raw = str(value).strip()
    if not raw:
        return None

    dt: datetime | None = None
    iso = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    try:
        dt = datetime.fromisoformat(iso)
    except ValueError:
        try:
            dt = parsedate_to_datetime(raw)
        except (TypeError, ValueError, IndexError):
            dt = None

    if dt is None:
        logger.debug("Unparsable date %r", raw)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_day(dt: datetime) -> str:
    """Format as ``YYYY-MM-DD``."""
    return dt.strftime("%Y-%m-%d")


def to_w3c(dt: datetime) -> str:
    """Format as ISO-8601 with seconds precision and an explicit UTC offset."""
    return dt.replace(microsecond=0).isoformat()
