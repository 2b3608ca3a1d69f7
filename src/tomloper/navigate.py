"""Read-only navigation and the default pipe.

``navigate`` and ``extract`` work on plain tree values with ``None`` standing
for "absent"; :class:`TomlOpt` wraps them in operator form::

    port = path(tree) / "host" / "port" | 0
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnsupportedValueError
from .runtime.logging import trace
from .segments import Step, resolve_all, resolve_step, tokenize
from .tree import TomlScalar, TomlValue, kind_of, scalar_kind


def navigate(node: TomlValue | None, step: Step) -> TomlValue | None:
    """Resolve one step below ``node``.

    The step is first tried as a literal key or index. A string that is not a
    direct key and splits into several segments is then walked segment by
    segment, so ``navigate(tree, "host/port")`` works as well.
    """

    if node is None:
        return None

    child = resolve_step(node, step)
    if child is not None:
        return child

    if isinstance(step, str):
        segments = tokenize(step)
        if len(segments) > 1:
            child = resolve_all(node, segments)
            if child is not None:
                return child

    trace("navigate miss %r below %s", step, kind_of(node))
    return None


def navigate_path(node: TomlValue | None, text: str) -> TomlValue | None:
    """Walk every segment of ``text``; empty segments are skipped."""

    found = resolve_all(node, tokenize(text))
    if found is None and node is not None:
        trace("navigate miss path %r", text)
    return found


def extract(node: TomlValue | None, default: TomlScalar) -> TomlScalar:
    """Return the scalar at ``node`` if it has the same kind as ``default``.

    Absent nodes, containers and scalars of another kind all give ``default``
    back; there is no conversion between kinds.
    """

    wanted = scalar_kind(default)
    if wanted is None:
        raise UnsupportedValueError(
            f"default must be str, int, float or bool, got {type(default).__name__}"
        )
    if node is None or kind_of(node) != wanted:
        return default
    return node  # type: ignore[return-value]


@dataclass(frozen=True)
class TomlOpt:
    """Copyable read handle to a node that may be absent."""

    valop: TomlValue | None

    @classmethod
    def path(cls, node: TomlValue) -> TomlOpt:
        return cls(node)

    def unpath(self) -> TomlValue | None:
        return self.valop

    def is_none(self) -> bool:
        return self.valop is None

    def pathto(self, text: str) -> TomlOpt:
        return TomlOpt(navigate_path(self.valop, text))

    def get(self, default: TomlScalar) -> TomlScalar:
        return extract(self.valop, default)

    def __truediv__(self, step: Step) -> TomlOpt:
        return TomlOpt(navigate(self.valop, step))

    def __or__(self, default: TomlScalar) -> TomlScalar:
        return extract(self.valop, default)


def path(node: TomlValue) -> TomlOpt:
    return TomlOpt.path(node)


def pathto(node: TomlValue, text: str) -> TomlOpt:
    return TomlOpt(navigate_path(node, text))


__all__ = ["TomlOpt", "extract", "navigate", "navigate_path", "path", "pathto"]
