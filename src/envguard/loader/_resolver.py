"""Core resolver — turns a declarative spec plus a value source into a typed mapping.

Per-entry pipeline:
1. Normalize the name (trim; skip the entry if it is not a non-empty string)
2. Read the raw value from the source (absent / ``None`` reads as ``""``)
3. Substitute the default when the raw value is empty
4. Fail if the entry is required and the value is still empty
5. Keep empty values as ``""`` without casting
6. Cast ``int`` / ``enum`` entries; anything else stays a string

The first failing entry aborts the whole call.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ._casters import Choices, Integer
from ._source import Source, as_source
from ._spec import ENUM, INT, EntrySpec, parse_entry, parse_spec
from ._types import ConfigError, LoadResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Cast resolution
# ---------------------------------------------------------------------------


def _resolve_cast(entry: EntrySpec) -> Callable[[str, str], Any] | None:
    """Return the caster for *entry*'s declared type, or ``None`` for plain strings."""
    if entry.type == INT:
        return Integer(minimum=entry.min, maximum=entry.max)
    if entry.type == ENUM:
        return Choices(entry.allowed)
    return None


def _stringify(value: Any) -> str:
    # booleans read as "true" / "false", like their JSON spelling
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class ConfigResolver:
    """Resolves specs against one value source.

    >>> resolver = ConfigResolver({"PORT": "8080"})
    >>> resolver.load({"global": [{"name": "PORT", "type": "int"}]})
    {'PORT': 8080}
    """

    def __init__(self, source: Any = None) -> None:
        self._source: Source = as_source(source)

    @property
    def source(self) -> Source:
        return self._source

    def init(self, source: Any = None) -> None:
        """Replace the value source. ``None`` selects the process environment."""
        self._source = as_source(source)

    def load(self, spec: Any) -> dict[str, Any]:
        """Resolve every entry of *spec* into a new mapping.

        Raises ``ConfigError`` on a malformed spec or on the first entry
        whose value is missing or invalid.
        """
        parsed = parse_spec(spec)
        resolved: dict[str, Any] = {}

        for raw_entry in parsed.entries:
            entry = parse_entry(raw_entry)
            name = entry.normalized_name if entry is not None else ""
            if not name:
                logger.debug("Skipping declaration without a usable name: %r", raw_entry)
                continue
            resolved[name] = self._resolve_value(entry, name)

        logger.debug(
            "Resolved %d of %d declared entries from %r",
            len(resolved),
            len(parsed.entries),
            self._source,
        )
        return resolved

    def try_load(self, spec: Any) -> LoadResult:
        """Like ``load``, but return the outcome instead of raising ``ConfigError``."""
        try:
            return LoadResult(value=self.load(spec))
        except ConfigError as exc:
            return LoadResult(error=exc)

    # -- pipeline -----------------------------------------------------------

    def _resolve_raw(self, name: str) -> str:
        value = self._source.lookup(name)
        if value is None:
            return ""
        return str(value).strip()

    def _resolve_value(self, entry: EntrySpec, name: str) -> Any:
        value = self._resolve_raw(name)
        if value == "" and entry.default is not None:
            value = _stringify(entry.default).strip()

        if entry.required and value == "":
            raise ConfigError.missing_required(name)
        if value == "":
            return value

        caster = _resolve_cast(entry)
        if caster is None:
            return value
        if isinstance(caster, Choices):
            caster.warn_shadowed(name)
        return caster(name, value)


# ---------------------------------------------------------------------------
# Module-level resolver management
# ---------------------------------------------------------------------------

_active_resolver: ConfigResolver | None = None


def set_resolver(resolver: ConfigResolver | None) -> None:
    """Set the module-level resolver."""
    global _active_resolver
    _active_resolver = resolver


def get_resolver() -> ConfigResolver | None:
    """Return the current module-level resolver (may be ``None``)."""
    return _active_resolver


def _auto_resolver() -> ConfigResolver:
    """Lazily create an environment-backed resolver if none is set."""
    global _active_resolver
    if _active_resolver is None:
        _active_resolver = ConfigResolver()
    return _active_resolver


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def init(source: Any = None) -> None:
    """Point the module-level resolver at *source* (``None`` = ``os.environ``)."""
    _auto_resolver().init(source)


def load(spec: Any) -> dict[str, Any]:
    """Resolve *spec* with the module-level resolver.

    Parameters
    ----------
    spec:
        A mapping ``{"global": [entry, ...]}`` or a ``Spec``. Each entry is a
        mapping or an ``EntrySpec`` with ``name`` and optionally ``type``
        (``"string"``, ``"int"``, ``"enum"``), ``default``, ``required``,
        ``min``, ``max`` and ``allowed``.
    """
    return _auto_resolver().load(spec)


def try_load(spec: Any) -> LoadResult:
    """Resolve *spec* with the module-level resolver without raising ``ConfigError``."""
    return _auto_resolver().try_load(spec)
