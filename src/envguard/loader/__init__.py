"""Declarative, fail-fast loader for environment configuration.

Resolves a list of declared variables (name, type, default, required flag,
bounds, allowed values) against a value source, normally ``os.environ``.
"""

from ._casters import Choices, Integer
from ._resolver import ConfigResolver, get_resolver, init, load, set_resolver, try_load
from ._source import EnvironSource, MappingSource, Source
from ._spec import EntrySpec, Spec
from ._testing import override_source
from ._types import ConfigError, ErrorKind, LoadResult

__all__ = [
    # Core
    "init",
    "load",
    "try_load",
    "ConfigResolver",
    "get_resolver",
    "set_resolver",
    # Declarations
    "EntrySpec",
    "Spec",
    # Errors and results
    "ConfigError",
    "ErrorKind",
    "LoadResult",
    # Sources
    "Source",
    "EnvironSource",
    "MappingSource",
    # Casters
    "Integer",
    "Choices",
    # Testing
    "override_source",
]
