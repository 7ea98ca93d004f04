"""Tests for sitemapgen.sources.registry: source registry."""

from __future__ import annotations

import pytest

from sitemapgen.sources.adapter import OffsetPagedSource
from sitemapgen.sources.registry import (
    _REGISTRY,
    get_source_class,
    register_source,
    registered_types,
    source_type,
)


class _DummySource(OffsetPagedSource):
    @property
    def name(self) -> str:
        return "dummy"

    def items(self, offset, limit):
        return []

    def url_for(self, item):
        return "/"

    def last_modified_for(self, item):
        return None


class TestRegistry:
    def setup_method(self):
        self._original = dict(_REGISTRY)

    def teardown_method(self):
        _REGISTRY.clear()
        _REGISTRY.update(self._original)

    def test_register_and_lookup(self):
        register_source("dummy", _DummySource)
        assert get_source_class("dummy") is _DummySource

    def test_lookup_unknown_returns_none(self):
        assert get_source_class("nonexistent") is None

    def test_registered_types_sorted(self):
        register_source("zzz", _DummySource)
        register_source("aaa", _DummySource)
        types = registered_types()
        assert types[0] == "aaa"
        assert "zzz" in types

    def test_reregistering_same_class_is_allowed(self):
        register_source("dummy", _DummySource)
        register_source("dummy", _DummySource)
        assert get_source_class("dummy") is _DummySource

    def test_name_clash_with_other_class_rejected(self):
        register_source("dummy", _DummySource)

        class _Other(_DummySource):
            pass

        with pytest.raises(ValueError, match="already registered"):
            register_source("dummy", _Other)
        assert get_source_class("dummy") is _DummySource

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            register_source("  ", _DummySource)

    def test_decorator_registers_class(self):
        @source_type("decorated")
        class _Decorated(_DummySource):
            pass

        assert get_source_class("decorated") is _Decorated

    def test_bundled_sources_registered_by_default(self):
        import sitemapgen.sources  # noqa: F401

        assert get_source_class("static") is not None
        assert get_source_class("sqlite") is not None
