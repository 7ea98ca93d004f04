"""Tests for sitemapgen.config."""

import logging

import pytest

from sitemapgen.config import load_config

CONFIG_VARS = (
    "SITEMAP_DOMAIN", "OUTPUT_PATH", "MAX_URLS_PER_FILE", "COMPRESS_WITH_GZIP",
    "INDEX_SITEMAP_NAME", "INDEX_STYLE", "INCLUDE_PRIORITY", "INCLUDE_SCHEMA_LOCATION",
    "PING_SEARCH_ENGINES", "PING_TIMEOUT_SECONDS", "SOURCES_CONFIG_PATH",
    "SCHEDULE_CRON", "LOG_LEVEL", "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove all config-related env vars before each test."""
    for key in CONFIG_VARS:
        monkeypatch.delenv(key, raising=False)
    # Prevent .env file from re-setting variables during tests
    monkeypatch.setattr("sitemapgen.config.load_dotenv", lambda *a, **kw: None)


def test_missing_domain_raises():
    """load_config raises ValueError when SITEMAP_DOMAIN is unset."""
    with pytest.raises(ValueError, match="SITEMAP_DOMAIN"):
        load_config()


def test_load_config_defaults(monkeypatch):
    """Config loads with only the domain set, with correct defaults."""
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")

    config = load_config()

    assert config.domain == "https://example.com"
    assert config.output_path == "./public"
    assert config.max_urls_per_file == 50000
    assert config.compress_with_gzip is True
    assert config.index_sitemap_name == "sitemap"
    assert config.index_style == "urlset"
    assert config.include_priority is True
    assert config.include_schema_location is True
    assert config.ping_search_engines is True
    assert config.ping_timeout_seconds == 5.0
    assert config.sources_config_path == "./config/sources.json"
    assert config.schedule_cron == ""
    assert config.log_level == "INFO"
    assert config.log_format == "json"


def test_trailing_slash_stripped_from_domain(monkeypatch):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com/")
    assert load_config().domain == "https://example.com"


def test_overrides_parsed(monkeypatch):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")
    monkeypatch.setenv("MAX_URLS_PER_FILE", "1000")
    monkeypatch.setenv("COMPRESS_WITH_GZIP", "no")
    monkeypatch.setenv("PING_SEARCH_ENGINES", "OFF")
    monkeypatch.setenv("INDEX_STYLE", "SitemapIndex")
    monkeypatch.setenv("PING_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SCHEDULE_CRON", "0 4 * * *")

    config = load_config()

    assert config.max_urls_per_file == 1000
    assert config.compress_with_gzip is False
    assert config.ping_search_engines is False
    assert config.index_style == "sitemapindex"
    assert config.ping_timeout_seconds == 2.5
    assert config.schedule_cron == "0 4 * * *"


def test_invalid_values_all_listed(monkeypatch):
    """Every invalid value is reported in one error."""
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")
    monkeypatch.setenv("MAX_URLS_PER_FILE", "many")
    monkeypatch.setenv("COMPRESS_WITH_GZIP", "maybe")
    monkeypatch.setenv("INDEX_STYLE", "atom")
    monkeypatch.setenv("SCHEDULE_CRON", "hourly")

    with pytest.raises(ValueError) as exc_info:
        load_config()

    msg = str(exc_info.value)
    assert "MAX_URLS_PER_FILE" in msg
    assert "COMPRESS_WITH_GZIP" in msg
    assert "INDEX_STYLE" in msg
    assert "SCHEDULE_CRON" in msg


def test_non_positive_max_urls_rejected(monkeypatch):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")
    monkeypatch.setenv("MAX_URLS_PER_FILE", "0")
    with pytest.raises(ValueError, match="MAX_URLS_PER_FILE must be positive"):
        load_config()


def test_config_is_frozen(monkeypatch):
    """Config is immutable after creation."""
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")

    config = load_config()

    with pytest.raises(AttributeError):
        config.domain = "https://other.example"


def test_max_urls_above_protocol_limit_rejected(monkeypatch):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")
    monkeypatch.setenv("MAX_URLS_PER_FILE", "50001")
    with pytest.raises(ValueError, match="must not exceed 50000"):
        load_config()


def test_max_urls_at_protocol_limit_accepted(monkeypatch):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")
    monkeypatch.setenv("MAX_URLS_PER_FILE", "50000")
    assert load_config().max_urls_per_file == 50000


def test_flat_index_with_gzip_warns(monkeypatch, caplog):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")

    with caplog.at_level(logging.WARNING, logger="sitemapgen.config"):
        load_config()

    assert "INDEX_STYLE=urlset" in caplog.text


def test_sitemapindex_with_gzip_does_not_warn(monkeypatch, caplog):
    monkeypatch.setenv("SITEMAP_DOMAIN", "https://example.com")
    monkeypatch.setenv("INDEX_STYLE", "sitemapindex")

    with caplog.at_level(logging.WARNING, logger="sitemapgen.config"):
        load_config()

    assert "INDEX_STYLE=urlset" not in caplog.text
