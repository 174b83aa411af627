"""Declarations using Pydantic BaseModel.

An entry declares one variable; a spec holds the ordered entries under
``global``::

    spec = {
        "global": [
            {"name": "PORT", "type": "int", "min": 1, "max": 65535, "default": 8000},
            {"name": "MODE", "type": "enum", "allowed": ["Dev", "Prod"]},
            {"name": "TOKEN", "required": True},
        ]
    }

Entry parsing is deliberately lenient: a malformed declaration turns into an
entry with an empty name (skipped by the resolver) or with its bad
constraint dropped, never into an error. Only the outer shape of the spec
is enforced.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._types import ConfigError

STRING = "string"
INT = "int"
ENUM = "enum"


class EntrySpec(BaseModel):
    """One declared variable."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    type: str = STRING
    default: Any = None
    required: bool = False
    min: int | float | None = None
    max: int | float | None = None
    allowed: tuple[Any, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def _name_must_be_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type_is_string(cls, value: Any) -> str:
        return value if isinstance(value, str) else STRING

    @field_validator("required", mode="before")
    @classmethod
    def _required_is_truthiness(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("min", "max", mode="before")
    @classmethod
    def _bounds_must_be_numbers(cls, value: Any) -> int | float | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value

    @field_validator("allowed", mode="before")
    @classmethod
    def _allowed_must_be_sequence(cls, value: Any) -> tuple[Any, ...]:
        if isinstance(value, (list, tuple)):
            return tuple(value)
        return ()

    @property
    def normalized_name(self) -> str:
        """The trimmed lookup key; empty means the entry is skipped."""
        return self.name.strip()


class Spec(BaseModel):
    """Ordered entry declarations, keyed ``global`` on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    entries: tuple[Any, ...] = Field(alias="global")

    @field_validator("entries", mode="before")
    @classmethod
    def _entries_must_be_list(cls, value: Any) -> tuple[Any, ...]:
        if not isinstance(value, (list, tuple)):
            raise ValueError("'global' must be a list")
        return tuple(value)


def parse_spec(spec: Any) -> Spec:
    """Validate the outer shape of *spec*.

    Raises ``ConfigError`` with kind ``INVALID_SPEC`` if *spec* is not a
    mapping (or ``Spec``) or if its ``global`` member is not a list.
    """
    if isinstance(spec, Spec):
        return spec
    if not isinstance(spec, Mapping):
        raise ConfigError.invalid_spec("load requires a configuration mapping")
    if "global" not in spec:
        raise ConfigError.invalid_spec("load requires a 'global' list of entry specs")
    try:
        return Spec.model_validate(dict(spec))
    except ValidationError as exc:
        raise ConfigError.invalid_spec(
            "load requires a 'global' list of entry specs"
        ) from exc


def parse_entry(raw: Any) -> EntrySpec | None:
    """Return the entry for *raw*, or ``None`` when it is not a declaration at all."""
    if isinstance(raw, EntrySpec):
        return raw
    if isinstance(raw, Mapping):
        return EntrySpec.model_validate(dict(raw))
    return None
