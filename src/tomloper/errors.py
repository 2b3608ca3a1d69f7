"""Exceptions raised by tomloper.

Navigation and mutation never raise for missing or mistyped nodes; these
errors only cover parsing, unsupported caller input and misuse of handles.
"""

from __future__ import annotations


class TomloperError(Exception):
    """Base class for tomloper errors."""


class TomlParseError(TomloperError, ValueError):
    """Raised when document text is not valid TOML."""


class UnsupportedValueError(TomloperError, TypeError):
    """Raised when a Python object cannot be stored in or read from a tree."""


class HandleMovedError(TomloperError, RuntimeError):
    """Raised when a write handle is used after a child was derived from it."""


__all__ = [
    "HandleMovedError",
    "TomlParseError",
    "TomloperError",
    "UnsupportedValueError",
]
