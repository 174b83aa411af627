from ._version import __version__
from .loader import ConfigError, ConfigResolver, ErrorKind, init, load, try_load

__all__ = ["__version__", "init", "load", "try_load", "ConfigResolver", "ConfigError", "ErrorKind"]
