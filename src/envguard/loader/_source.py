"""Value source protocol and its two implementations."""

from __future__ import annotations

import os
from typing import Any, Mapping, MutableMapping, Protocol, runtime_checkable


@runtime_checkable
class Source(Protocol):
    """Abstraction over where raw values come from.

    ``lookup`` returns ``None`` when the name is absent.
    """

    def lookup(self, name: str) -> str | None:
        ...


class EnvironSource:
    """Reads from ``os.environ`` at lookup time (no snapshot)."""

    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "EnvironSource()"


class MappingSource:
    """Mapping-backed source, mostly for tests.

    The mapping is held by reference and is only written through the
    explicit ``set`` / ``unset`` helpers.

    >>> src = MappingSource({"PORT": 8080})
    >>> src.lookup("PORT")
    '8080'
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = values if values is not None else {}

    # -- Protocol methods ---------------------------------------------------

    def lookup(self, name: str) -> str | None:
        value = self._values.get(name)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    # -- Mutation helpers for test setup ------------------------------------

    def set(self, name: str, value: Any) -> None:
        self._writable()[name] = value

    def unset(self, name: str) -> None:
        self._writable().pop(name, None)

    def _writable(self) -> MutableMapping[str, Any]:
        if not isinstance(self._values, MutableMapping):
            raise TypeError(f"{type(self._values).__name__} source is read-only")
        return self._values

    def __repr__(self) -> str:
        return f"MappingSource({len(self._values)} keys)"


class ItemSource:
    """Reads ``obj[name]`` from any subscriptable object that is not a ``Mapping``."""

    def __init__(self, values: Any) -> None:
        self._values = values

    def lookup(self, name: str) -> str | None:
        try:
            value = self._values[name]
        except (KeyError, IndexError, TypeError):
            return None
        return None if value is None else str(value)

    def __repr__(self) -> str:
        return f"ItemSource({type(self._values).__name__})"


class AttributeSource:
    """Reads ``getattr(obj, name)`` from a plain object."""

    def __init__(self, values: Any) -> None:
        self._values = values

    def lookup(self, name: str) -> str | None:
        value = getattr(self._values, name, None)
        return None if value is None else str(value)

    def __repr__(self) -> str:
        return f"AttributeSource({type(self._values).__name__})"


def as_source(candidate: Any) -> Source:
    """Turn whatever ``init`` was given into a ``Source``. Never raises.

    Mappings are wrapped by reference, even when empty, so an empty test
    mapping never falls through to the real environment. Anything with
    ``lookup`` is used as-is. ``None`` and other falsy values select the
    process environment. Other subscriptable objects are read by item,
    everything else by attribute.
    """
    if isinstance(candidate, Mapping):
        return MappingSource(candidate)
    if isinstance(candidate, Source):
        return candidate
    if not candidate:
        return EnvironSource()
    if hasattr(candidate, "__getitem__"):
        return ItemSource(candidate)
    return AttributeSource(candidate)
