"""Tests for the TOML parse/serialize boundary."""

import pytest

from tomloper import (
    TomlParseError,
    UnsupportedValueError,
    append,
    navigate_mut,
    parse,
    path,
    path_mut,
    serialize,
)
from tomloper.testing import SAMPLE_TOML


def test_parse_builds_plain_tree() -> None:
    """Parsing yields plain dicts and lists."""

    tree = parse(SAMPLE_TOML)

    assert tree["ip"] == "127.0.0.1"
    assert tree["host"]["protocol"] == ["tcp", "udp", "mmp"]
    assert [service["name"] for service in tree["service"]] == ["serv_1", "serv_2"]


def test_parse_rejects_malformed_text() -> None:
    """Malformed documents raise TomlParseError, a ValueError."""

    with pytest.raises(TomlParseError, match="invalid TOML document"):
        parse("port = \n")
    with pytest.raises(ValueError):
        parse("[host\n")


def test_serialize_round_trips_after_writes(tree) -> None:
    """Documents written back after mutation parse to the same tree."""

    node = path_mut(tree) / "host"
    node << ("timeout", 30)
    node = node / "port"
    node << 8888

    text = serialize(tree)
    reparsed = parse(text)

    assert reparsed == tree
    assert path(reparsed) / "host" / "port" | 0 == 8888
    assert path(reparsed) / "service" / 1 / "desc" | "" == "another server"


def test_serialize_requires_a_table() -> None:
    """Only a table can be the root of a document."""

    with pytest.raises(UnsupportedValueError):
        serialize(["not", "a", "table"])  # type: ignore[arg-type]


def test_serialize_mixed_array_holding_a_table() -> None:
    """Arrays mixing scalars and tables are written as inline tables."""

    tree = {"p": ["tcp"]}
    append(navigate_mut(tree, "p"), {"a": 1})

    assert parse(serialize(tree)) == {"p": ["tcp", {"a": 1}]}


@pytest.mark.parametrize("text", ["del\x7fx", "\x01", "tab\tnew\nline", 'quote"back\\'])
def test_serialize_escapes_control_characters(text: str) -> None:
    """Strings with control characters survive a write/read cycle unchanged."""

    assert parse(serialize({"s": text})) == {"s": text}
