"""Source registry: maps type strings used in the sources file to adapter classes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from sitemapgen.sources.adapter import SourceAdapter

_REGISTRY: dict[str, type[SourceAdapter]] = {}

_S = TypeVar("_S", bound="type[SourceAdapter]")


def register_source(type_name: str, cls: type[SourceAdapter]) -> None:
    """Register a source class under ``type_name``.

    Registering the same class twice is a no-op. Raises ValueError when the
    name is blank or already taken by a different class.
    """
    if not type_name or not type_name.strip():
        raise ValueError("Source type name must be non-empty")
    existing = _REGISTRY.get(type_name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Source type '{type_name}' is already registered to {existing.__name__}"
        )
    _REGISTRY[type_name] = cls


def source_type(type_name: str) -> Callable[[_S], _S]:
    """Class decorator form of ``register_source``."""

    def decorator(cls: _S) -> _S:
        register_source(type_name, cls)
        return cls

    return decorator


def get_source_class(type_name: str) -> type[SourceAdapter] | None:
    """Look up a source class by type name. Returns None if not found."""
    return _REGISTRY.get(type_name)


def registered_types() -> list[str]:
    """Return a sorted list of all registered source type names."""
    return sorted(_REGISTRY)
