from __future__ import annotations

from pathlib import Path

import tomloper

SAMPLE_TOML = (Path(__file__).parent / "sample.toml").read_text(encoding="utf-8")


def main() -> None:
    tree = tomloper.parse(SAMPLE_TOML)

    print("original toml content:")
    print(SAMPLE_TOML)
    print("modify by path:")

    node = tomloper.path_mut(tree) / "ip"
    node << "127.0.0.2"

    # key/value pairs go into a table
    node = tomloper.path_mut(tree) / "host"
    node << ("newkey1", 1) << ("newkey2", "2")

    # a scalar replaces a leaf of the same kind
    node = node / "port"
    node << 8888

    # one-element tuples are appended to an array
    node = tomloper.path_mut(tree) / "host" / "protocol"
    node << (8989,) << ("xyz",)

    # <<= may change the node kind, << may not
    node = tomloper.path_mut(tree) / "misc" / "bool"
    node <<= "false"

    print(tomloper.serialize(tree))


if __name__ == "__main__":
    main()
