"""Path tokenizing and single-segment resolution.

A textual path is split on ``/`` and ``.`` interchangeably. Numeric segments
index arrays, every other segment is a table key, and empty segments (from
leading, trailing or doubled separators) leave the current node unchanged.
"""

from __future__ import annotations

import re

from .tree import TomlValue

SEPARATORS = "/."

_SPLIT_RE = re.compile(r"[/.]")
_INDEX_RE = re.compile(r"[0-9]+")

Step = str | int


def tokenize(text: str) -> list[str]:
    """Split ``text`` into raw segments, keeping empty ones.

    ``""`` gives ``[""]``, ``"/"`` gives ``["", ""]`` and ``"a/b.c/"`` gives
    ``["a", "b", "c", ""]``.
    """

    return _SPLIT_RE.split(text)


def is_index_segment(segment: str) -> bool:
    return _INDEX_RE.fullmatch(segment) is not None


def resolve_step(node: TomlValue | None, step: Step) -> TomlValue | None:
    """Look up one typed step: ``str`` keys in tables, ``int`` indices in arrays."""

    if node is None or isinstance(step, bool):
        return None
    if isinstance(step, int):
        if not isinstance(node, list) or step < 0 or step >= len(node):
            return None
        return node[step]
    if isinstance(step, str) and isinstance(node, dict):
        return node.get(step)
    return None


def resolve(node: TomlValue | None, segment: str) -> TomlValue | None:
    """Apply one textual segment to ``node``."""

    if node is None:
        return None
    if not segment:
        return node
    if is_index_segment(segment):
        return resolve_step(node, int(segment))
    return resolve_step(node, segment)


def resolve_all(node: TomlValue | None, segments: list[str]) -> TomlValue | None:
    current = node
    for segment in segments:
        current = resolve(current, segment)
        if current is None:
            return None
    return current


__all__ = [
    "SEPARATORS",
    "Step",
    "is_index_segment",
    "resolve",
    "resolve_all",
    "resolve_step",
    "tokenize",
]
