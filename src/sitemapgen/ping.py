"""Search engine ping: tells search engines the sitemap index changed."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

# Endpoint URL and the query parameter that carries the sitemap URL.
SEARCH_ENGINE_ENDPOINTS: tuple[tuple[str, str], ...] = (
    ("https://www.google.com/ping", "sitemap"),
    ("https://www.bing.com/webmaster/ping.aspx", "siteMap"),
)

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class PingResult:
    """Outcome of one ping request."""

    endpoint: str
    ok: bool
    status_code: int | None = None
    error: str | None = None


def ping_search_engines(
    index_url: str,
    *,
    endpoints: tuple[tuple[str, str], ...] = SEARCH_ENGINE_ENDPOINTS,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[PingResult]:
    """Send one GET per endpoint with ``index_url`` as its query parameter.

    Best effort: the response is not inspected beyond its status code, and
    failures are logged and recorded in the result list. Never raises.
    """
    results: list[PingResult] = []
    for endpoint, param in endpoints:
        try:
            response = httpx.get(endpoint, params={param: index_url}, timeout=timeout)
            logger.info("Pinged %s (status=%s)", endpoint, response.status_code)
            results.append(PingResult(endpoint=endpoint, ok=True, status_code=response.status_code))
        except Exception as exc:
            logger.warning("Ping to %s failed: %s", endpoint, exc)
            results.append(PingResult(endpoint=endpoint, ok=False, error=str(exc)))
    return results
