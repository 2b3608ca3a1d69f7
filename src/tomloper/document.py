"""TOML text <-> tree conversion."""

from __future__ import annotations

import tomllib

import tomli_w

from .errors import TomlParseError, UnsupportedValueError
from .tree import TomlValue


def parse(text: str) -> dict[str, TomlValue]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise TomlParseError(f"invalid TOML document: {exc}") from exc


def serialize(tree: dict[str, TomlValue]) -> str:
    if not isinstance(tree, dict):
        raise UnsupportedValueError(
            f"only a table can be serialized as a document, got {type(tree).__name__}"
        )
    try:
        return tomli_w.dumps(tree)
    except TypeError as exc:
        raise UnsupportedValueError(f"tree holds a value TOML cannot store: {exc}") from exc


__all__ = ["parse", "serialize"]
