"""
tomloper: path addressing for parsed TOML trees.

Read with defaults, write without walking the tree by hand::

    tree = tomloper.parse(text)
    port = tomloper.path(tree) / "host" / "port" | 0
    tomloper.path_mut(tree) / "host" / "port" << 8888

This package uses a src-layout. Import the package as `tomloper`.
"""

from importlib.metadata import version

__version__ = version("tomloper")

from .config import TOMLOPER_CONFIG, TomloperConfig
from .document import parse, serialize
from .errors import (
    HandleMovedError,
    TomloperError,
    TomlParseError,
    UnsupportedValueError,
)
from .mutate import (
    TomlOptMut,
    append,
    extend,
    force_reassign,
    navigate_mut,
    path_mut,
    pathto_mut,
    replace_if_matching,
    upsert,
)
from .navigate import TomlOpt, extract, navigate, navigate_path, path, pathto
from .runtime import configure_logging, get_logger
from .segments import SEPARATORS, resolve, tokenize
from .tree import TomlScalar, TomlValue, into_value, kind_of

__all__ = [
    "__version__",
    "HandleMovedError",
    "SEPARATORS",
    "TOMLOPER_CONFIG",
    "TomlOpt",
    "TomlOptMut",
    "TomlParseError",
    "TomlScalar",
    "TomlValue",
    "TomloperConfig",
    "TomloperError",
    "UnsupportedValueError",
    "append",
    "configure_logging",
    "extend",
    "extract",
    "force_reassign",
    "get_logger",
    "into_value",
    "kind_of",
    "navigate",
    "navigate_mut",
    "navigate_path",
    "parse",
    "path",
    "path_mut",
    "pathto",
    "pathto_mut",
    "replace_if_matching",
    "resolve",
    "serialize",
    "tokenize",
    "upsert",
]
