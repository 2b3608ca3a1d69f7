"""Exclusive write handles and the mutators that act through them.

A :class:`TomlOptMut` remembers the container slot (parent table or array
plus key or index) its node lives in, so writes go back through the parent
instead of through a second reference to the node. Deriving a child handle
moves the parent: the parent handle refuses further use afterwards.

Every descent probes the child read-only first and only then takes its slot,
so a path that fails part way leaves the tree untouched::

    node = path_mut(tree) / "host"
    node << ("newkey", 1) << ("other", "2")
    node = node / "port"
    node << 8888
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import HandleMovedError, UnsupportedValueError
from .runtime.logging import trace
from .segments import Step, is_index_segment, resolve, resolve_step, tokenize
from .tree import TomlValue, into_value, kind_of, scalar_kind

_Container = dict[str, TomlValue] | list[TomlValue]
_Slot = tuple[_Container, str | int]
_Position = tuple[TomlValue, _Slot | None]


class TomlOptMut:
    """Exclusive handle to a node that may be absent."""

    def __init__(self, node: TomlValue | None, slot: _Slot | None = None) -> None:
        self._node = node
        self._slot = slot
        self._moved = False

    @classmethod
    def path(cls, node: TomlValue) -> TomlOptMut:
        return cls(node)

    def _current(self) -> tuple[TomlValue | None, _Slot | None]:
        if self._moved:
            raise HandleMovedError("write handle was moved into a child handle")
        return self._node, self._slot

    def _take(self) -> tuple[TomlValue | None, _Slot | None]:
        current = self._current()
        self._moved = True
        return current

    def _store(self, value: TomlValue) -> None:
        assert self._slot is not None
        container, key = self._slot
        container[key] = value  # type: ignore[index]
        self._node = value

    def unpath(self) -> TomlValue | None:
        return self._current()[0]

    def is_none(self) -> bool:
        return self.unpath() is None

    def pathto(self, text: str) -> TomlOptMut:
        return pathto_mut(self, text)

    def replace(self, value: object) -> TomlOptMut:
        return replace_if_matching(self, value)

    def assign(self, value: object) -> TomlOptMut:
        return force_reassign(self, value)

    def append(self, value: object) -> TomlOptMut:
        return append(self, value)

    def extend(self, values: Iterable[object]) -> TomlOptMut:
        return extend(self, values)

    def upsert(self, key: str, value: object) -> TomlOptMut:
        return upsert(self, key, value)

    def __truediv__(self, step: Step) -> TomlOptMut:
        return navigate_mut(self, step)

    def __lshift__(self, value: object) -> TomlOptMut:
        # (v,) appends to an array, (key, v) upserts into a table.
        if isinstance(value, tuple):
            if len(value) == 1:
                return append(self, value[0])
            if len(value) == 2 and isinstance(value[0], str):
                return upsert(self, value[0], value[1])
        return replace_if_matching(self, value)

    def __ilshift__(self, value: object) -> TomlOptMut:
        return force_reassign(self, value)

    def __repr__(self) -> str:
        if self._moved:
            return "TomlOptMut(<moved>)"
        return f"TomlOptMut({self._node!r})"


def _acquire(node: TomlValue, step: Step) -> _Position | None:
    if resolve_step(node, step) is None:
        return None
    child = node[step]  # type: ignore[index]
    return child, (node, step)  # type: ignore[return-value]


def _acquire_all(
    node: TomlValue, slot: _Slot | None, segments: list[str]
) -> _Position | None:
    for segment in segments:
        if resolve(node, segment) is None:
            return None
        if not segment:
            continue
        step: Step = int(segment) if is_index_segment(segment) else segment
        node, slot = node[step], (node, step)  # type: ignore[index,assignment]
    return node, slot


def _start(target: TomlOptMut | TomlValue | None) -> tuple[TomlValue | None, _Slot | None]:
    if isinstance(target, TomlOptMut):
        return target._take()
    return target, None


def navigate_mut(target: TomlOptMut | TomlValue | None, step: Step) -> TomlOptMut:
    """Exclusive counterpart of :func:`tomloper.navigate.navigate`.

    ``target`` is either a tree root or a write handle; a handle is moved.
    """

    node, slot = _start(target)
    if node is None:
        return TomlOptMut(None)

    found = _acquire(node, step)
    if found is None and isinstance(step, str):
        segments = tokenize(step)
        if len(segments) > 1:
            found = _acquire_all(node, slot, segments)
    if found is None:
        trace("navigate miss %r below %s", step, kind_of(node))
        return TomlOptMut(None)
    return TomlOptMut(*found)


def pathto_mut(target: TomlOptMut | TomlValue | None, text: str) -> TomlOptMut:
    node, slot = _start(target)
    if node is None:
        return TomlOptMut(None)

    found = _acquire_all(node, slot, tokenize(text))
    if found is None:
        trace("navigate miss path %r", text)
        return TomlOptMut(None)
    return TomlOptMut(*found)


def path_mut(node: TomlValue) -> TomlOptMut:
    return TomlOptMut.path(node)


def replace_if_matching(handle: TomlOptMut, value: object) -> TomlOptMut:
    """Overwrite a scalar with ``value`` only when both have the same kind."""

    node, slot = handle._current()
    if node is None:
        return handle
    wanted = scalar_kind(value)
    if wanted is None or kind_of(node) != wanted:
        trace("replace skipped: %s node, %s value", kind_of(node), type(value).__name__)
        return handle
    if slot is None:
        trace("replace skipped: root node has no parent slot")
        return handle
    handle._store(value)  # type: ignore[arg-type]
    return handle


def force_reassign(handle: TomlOptMut, value: object) -> TomlOptMut:
    """Overwrite the node with ``value`` whatever either kind is."""

    new = into_value(value)
    node, slot = handle._current()
    if node is None:
        return handle
    if slot is not None:
        handle._store(new)
        return handle
    if isinstance(node, dict) and isinstance(new, dict):
        node.clear()
        node.update(new)
    else:
        trace("assign skipped: root %s cannot become %s", kind_of(node), kind_of(new))
    return handle


def append(handle: TomlOptMut, value: object) -> TomlOptMut:
    """Append one value when the node is an array."""

    return extend(handle, (value,))


def extend(handle: TomlOptMut, values: Iterable[object]) -> TomlOptMut:
    """Append ``values`` in order when the node is an array."""

    if isinstance(values, (str, bytes, dict)):
        raise UnsupportedValueError(
            f"extend expects a sequence of values, got {type(values).__name__}"
        )
    items = [into_value(value) for value in values]
    node, _ = handle._current()
    if node is None:
        return handle
    if not isinstance(node, list):
        trace("append skipped: %s node is not an array", kind_of(node))
        return handle
    node.extend(items)
    return handle


def upsert(handle: TomlOptMut, key: str, value: object) -> TomlOptMut:
    """Insert or overwrite ``key`` when the node is a table."""

    if not isinstance(key, str):
        raise UnsupportedValueError(f"table keys must be str, got {type(key).__name__}")
    new = into_value(value)
    node, _ = handle._current()
    if node is None:
        return handle
    if not isinstance(node, dict):
        trace("upsert skipped: %s node is not a table", kind_of(node))
        return handle
    node[key] = new
    return handle


__all__ = [
    "TomlOptMut",
    "append",
    "extend",
    "force_reassign",
    "navigate_mut",
    "path_mut",
    "pathto_mut",
    "replace_if_matching",
    "upsert",
]
