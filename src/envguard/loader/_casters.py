"""Cast helpers for declared values.

These callables turn a trimmed, non-empty raw string into the declared
type, raising ``ConfigError`` that names the offending entry.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Sequence

from ._types import ConfigError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Integer caster
# ---------------------------------------------------------------------------

_PREFIXES = ("0x", "0o", "0b")


def _parse_integer(text: str) -> int | None:
    """Parse *text* as a whole number, or return ``None``.

    Accepts decimal integers, exponent and fractional notation that denote a
    whole number (``"1e3"``, ``"8080.0"``) and unsigned ``0x``/``0o``/``0b``
    literals. Infinities and NaN are rejected.
    """
    text = text.strip()
    if not text or "_" in text:
        return None
    if text[:2].lower() in _PREFIXES:
        try:
            return int(text, 0)
        except ValueError:
            return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


class Integer:
    """Parse an integer and enforce optional inclusive bounds.

    >>> Integer(minimum=1, maximum=65535)("PORT", "8080")
    8080
    """

    def __init__(
        self,
        minimum: int | float | None = None,
        maximum: int | float | None = None,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def __call__(self, name: str, value: str) -> int:
        parsed = _parse_integer(value)
        if parsed is None:
            raise ConfigError.not_an_integer(name)
        if self.minimum is not None and parsed < self.minimum:
            raise ConfigError.below_min(name, self.minimum)
        if self.maximum is not None and parsed > self.maximum:
            raise ConfigError.above_max(name, self.maximum)
        return parsed


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------


class Choices:
    """Match a value case-insensitively against a fixed, ordered set of options.

    The first matching option is returned in its declared casing. Options
    that are not strings never match.

    >>> Choices(["Dev", "Prod"])("MODE", "prod")
    'Prod'
    """

    def __init__(self, allowed: Sequence[Any]) -> None:
        self.allowed = tuple(allowed)

    def __call__(self, name: str, value: str) -> str:
        wanted = value.lower()
        for option in self.allowed:
            if isinstance(option, str) and option.lower() == wanted:
                return option
        raise ConfigError.enum_mismatch(name, self.allowed)

    def shadowed(self) -> list[str]:
        """Options that can never be returned because an earlier one matches first."""
        seen: set[str] = set()
        shadowed: list[str] = []
        for option in self.allowed:
            if not isinstance(option, str):
                continue
            folded = option.lower()
            if folded in seen:
                shadowed.append(option)
            seen.add(folded)
        return shadowed

    def warn_shadowed(self, name: str) -> None:
        shadowed = self.shadowed()
        if shadowed:
            logger.warning(
                "Entry %r lists options that differ only by case; "
                "the first declared casing wins over %s",
                name,
                shadowed,
            )
