"""Foundation types for the loader.

Provides the error taxonomy and the ``LoadResult`` wrapper returned by
``try_load``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ErrorKind(str, Enum):
    """What went wrong while resolving a spec."""

    INVALID_SPEC = "invalid_spec"
    MISSING_REQUIRED = "missing_required"
    NOT_AN_INTEGER = "not_an_integer"
    BELOW_MIN = "below_min"
    ABOVE_MAX = "above_max"
    ENUM_MISMATCH = "enum_mismatch"


class ConfigError(Exception):
    """Raised when a spec is malformed or a declared value is invalid.

    ``kind`` tells callers which rule was violated without parsing the
    message. ``name`` is the normalized entry name (``None`` for
    ``INVALID_SPEC``). ``detail`` holds the violated bound for
    ``BELOW_MIN`` / ``ABOVE_MAX`` and the allowed options for
    ``ENUM_MISMATCH``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        name: str | None = None,
        detail: Any = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.detail = detail
        super().__init__(message)

    # -- constructors -------------------------------------------------------

    @classmethod
    def invalid_spec(cls, message: str) -> ConfigError:
        return cls(ErrorKind.INVALID_SPEC, message)

    @classmethod
    def missing_required(cls, name: str) -> ConfigError:
        return cls(ErrorKind.MISSING_REQUIRED, f'missing required env "{name}"', name=name)

    @classmethod
    def not_an_integer(cls, name: str) -> ConfigError:
        return cls(ErrorKind.NOT_AN_INTEGER, f'"{name}" must be an integer', name=name)

    @classmethod
    def below_min(cls, name: str, bound: int | float) -> ConfigError:
        return cls(
            ErrorKind.BELOW_MIN,
            f'"{name}" must be >= {_format_bound(bound)}',
            name=name,
            detail=bound,
        )

    @classmethod
    def above_max(cls, name: str, bound: int | float) -> ConfigError:
        return cls(
            ErrorKind.ABOVE_MAX,
            f'"{name}" must be <= {_format_bound(bound)}',
            name=name,
            detail=bound,
        )

    @classmethod
    def enum_mismatch(cls, name: str, allowed: Sequence[Any]) -> ConfigError:
        options = ", ".join(str(option) for option in allowed)
        return cls(
            ErrorKind.ENUM_MISMATCH,
            f'"{name}" must be one of: {options}',
            name=name,
            detail=tuple(allowed),
        )

    def __repr__(self) -> str:
        return f"ConfigError({self.kind.name}, {str(self)!r})"


def _format_bound(bound: int | float) -> str:
    # 10.0 prints as 10
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadResult:
    """Outcome of ``try_load``: either a resolved mapping or the first error."""

    value: dict[str, Any] | None = None
    error: ConfigError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> dict[str, Any]:
        """Return the resolved mapping, or raise the captured error."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("LoadResult holds neither a value nor an error")
        return self.value
