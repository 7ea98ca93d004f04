"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Sitemap protocol limit on URLs per file.
MAX_URLS_PER_FILE_LIMIT = 50000

INDEX_STYLES = frozenset({"urlset", "sitemapindex"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Generator configuration. All values sourced from environment variables."""

    # Required
    domain: str

    # Optional: Output
    output_path: str = "./public"
    max_urls_per_file: int = 50000
    compress_with_gzip: bool = True
    index_sitemap_name: str = "sitemap"

    # Optional: Rendering
    index_style: str = "urlset"
    include_priority: bool = True
    include_schema_location: bool = True

    # Optional: Search engine ping
    ping_search_engines: bool = True
    ping_timeout_seconds: float = 5.0

    # Optional: Sources & scheduling
    sources_config_path: str = "./config/sources.json"
    schedule_cron: str = ""

    # Optional: Application
    log_level: str = "INFO"
    log_format: str = "json"


def _parse_bool(name: str, default: bool, errors: list[str]) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    errors.append(f"{name} must be a boolean, got '{raw}'")
    return default


def _parse_int(name: str, default: int, errors: list[str]) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        errors.append(f"{name} must be an integer, got '{raw}'")
        return default


def _parse_float(name: str, default: float, errors: list[str]) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        errors.append(f"{name} must be a number, got '{raw}'")
        return default


def load_config(env_path: str | Path | None = None) -> Config:
    """Load configuration from environment variables.

    Loads a .env file if present (for local development), then validates
    every value. Raises ValueError listing all problems at once.
    """
    load_dotenv(dotenv_path=env_path)

    errors: list[str] = []
    domain = os.environ.get("SITEMAP_DOMAIN", "").strip().rstrip("/")
    if not domain:
        errors.append("Missing required environment variable: SITEMAP_DOMAIN")

    max_urls = _parse_int("MAX_URLS_PER_FILE", 50000, errors)
    if max_urls <= 0:
        errors.append(f"MAX_URLS_PER_FILE must be positive, got {max_urls}")
    elif max_urls > MAX_URLS_PER_FILE_LIMIT:
        errors.append(
            f"MAX_URLS_PER_FILE must not exceed {MAX_URLS_PER_FILE_LIMIT}, got {max_urls}"
        )

    schedule_cron = os.environ.get("SCHEDULE_CRON", "").strip()
    if schedule_cron and len(schedule_cron.split()) != 5:
        errors.append(f"SCHEDULE_CRON must have five fields, got '{schedule_cron}'")

    index_style = os.environ.get("INDEX_STYLE", "urlset").strip().lower()
    if index_style not in INDEX_STYLES:
        errors.append(
            f"INDEX_STYLE must be one of {', '.join(sorted(INDEX_STYLES))}, "
            f"got '{index_style}'"
        )

    config = Config(
        # Required
        domain=domain,
        # Optional: Output
        output_path=os.environ.get("OUTPUT_PATH", "./public"),
        max_urls_per_file=max_urls,
        compress_with_gzip=_parse_bool("COMPRESS_WITH_GZIP", True, errors),
        index_sitemap_name=os.environ.get("INDEX_SITEMAP_NAME", "sitemap"),
        # Optional: Rendering
        index_style=index_style,
        include_priority=_parse_bool("INCLUDE_PRIORITY", True, errors),
        include_schema_location=_parse_bool("INCLUDE_SCHEMA_LOCATION", True, errors),
        # Optional: Search engine ping
        ping_search_engines=_parse_bool("PING_SEARCH_ENGINES", True, errors),
        ping_timeout_seconds=_parse_float("PING_TIMEOUT_SECONDS", 5.0, errors),
        # Optional: Sources & scheduling
        sources_config_path=os.environ.get("SOURCES_CONFIG_PATH", "./config/sources.json"),
        schedule_cron=schedule_cron,
        # Optional: Application
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_format=os.environ.get("LOG_FORMAT", "json"),
    )

    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))

    if config.index_style == "urlset" and config.compress_with_gzip:
        logger.warning(
            "INDEX_STYLE=urlset lists sitemap files without the .gz suffix while "
            "COMPRESS_WITH_GZIP is on; use INDEX_STYLE=sitemapindex for links "
            "that resolve"
        )
    return config
