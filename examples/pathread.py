from __future__ import annotations

from pathlib import Path

import tomloper

SAMPLE_TOML = (Path(__file__).parent / "sample.toml").read_text(encoding="utf-8")


def main() -> None:
    tree = tomloper.parse(SAMPLE_TOML)

    print("original toml content:")
    print(SAMPLE_TOML)
    print("read by path:")

    root = tomloper.path(tree)
    print("/ip =", root / "ip" | "")

    host = root / "host"
    print("/host/ip =", host / "ip" | "")
    print("/host/port =", host / "port" | 0)

    print("/service/0/name =", root / "service" / 0 / "name" | "")
    print("/service/0/desc =", root / "service" / 0 / "desc" | "")
    print("/service/1/name =", tomloper.pathto(tree, "service/1/name") | "")
    print("/service/1/desc =", tomloper.pathto(tree, "service.1.desc") | "")

    print("/misc/int =", root / "misc" / "int" | 0)
    print("/misc/float =", root / "misc" / "float" | 0.0)
    print("/misc/bool =", root / "misc" / "bool" | False)


if __name__ == "__main__":
    main()
