"""Tests for path tokenizing and single-segment resolution."""

from tomloper.segments import (
    is_index_segment,
    resolve,
    resolve_all,
    resolve_step,
    tokenize,
)


def test_tokenize_keeps_empty_segments() -> None:
    """Leading, trailing and doubled separators produce empty segments."""

    assert tokenize("") == [""]
    assert tokenize("/") == ["", ""]
    assert tokenize("//") == ["", "", ""]
    assert tokenize("/path/to/leaf") == ["", "path", "to", "leaf"]
    assert tokenize("path/to//leaf") == ["path", "to", "", "leaf"]
    assert tokenize("a/b.c/") == ["a", "b", "c", ""]


def test_tokenize_treats_slash_and_dot_alike() -> None:
    """Both separators split the path the same way."""

    assert tokenize("path/to/leaf") == ["path", "to", "leaf"]
    assert tokenize("path.to.leaf") == ["path", "to", "leaf"]
    assert tokenize("path/to.leaf") == ["path", "to", "leaf"]
    assert tokenize("a/b.c") == ["a", "b", "c"]


def test_index_segments_are_plain_decimal_digits() -> None:
    """Only non-empty ASCII digit strings are indices."""

    assert is_index_segment("0")
    assert is_index_segment("12")
    assert not is_index_segment("")
    assert not is_index_segment("-1")
    assert not is_index_segment("1a")
    assert not is_index_segment("1.0")


def test_resolve_uses_keys_and_indices(tree) -> None:
    """Segments look up table keys and array indices."""

    host = tree["host"]

    assert resolve(host, "port") == 8080
    assert resolve(host["protocol"], "1") == "udp"
    assert resolve(host["protocol"], "3") is None
    assert resolve(host, "missing") is None
    assert resolve(host["port"], "anything") is None


def test_resolve_empty_segment_is_a_no_op(tree) -> None:
    """An empty segment returns the node itself."""

    host = tree["host"]

    assert resolve(host, "") is host
    assert resolve(None, "") is None


def test_numeric_segment_never_reads_a_table_key() -> None:
    """Textual segments classify "0" as an index; typed steps do not."""

    table = {"0": "zero"}

    assert resolve(table, "0") is None
    assert resolve_step(table, "0") == "zero"


def test_resolve_step_rejects_foreign_indices() -> None:
    """Negative, boolean and mistyped steps resolve to None."""

    items = ["a", "b"]

    assert resolve_step(items, 1) == "b"
    assert resolve_step(items, -1) is None
    assert resolve_step(items, 2) is None
    assert resolve_step(items, True) is None
    assert resolve_step(items, "1") is None
    assert resolve_step({"a": 1}, 0) is None


def test_resolve_all_short_circuits(tree) -> None:
    """Resolution stops at the first missing segment."""

    assert resolve_all(tree, ["host", "protocol", "2"]) == "mmp"
    assert resolve_all(tree, ["host", "nope", "2"]) is None
    assert resolve_all(tree, ["", ""]) is tree
