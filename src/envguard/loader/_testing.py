"""Test utilities for the loader."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from ._resolver import ConfigResolver, get_resolver, set_resolver
from ._source import MappingSource


@contextmanager
def override_source(values: dict[str, Any] | None = None) -> Iterator[MappingSource]:
    """Temporarily back the module-level resolver with a ``MappingSource``.

    Usage::

        with override_source({"PORT": "8080"}) as source:
            assert load(spec)["PORT"] == 8080
            source.set("PORT", "9090")  # mutate inside context
    """
    previous = get_resolver()
    fake = MappingSource(dict(values or {}))
    set_resolver(ConfigResolver(fake))
    try:
        yield fake
    finally:
        set_resolver(previous)
