#!/usr/bin/env python3
"""Example: Quickstart — respath

Minimal working example: register a few aliases, then resolve action
results that use alias markers, back markers and absolute paths.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install respath
"""
from __future__ import annotations

import respath

ACTION_PATH = "/book/view"

RESULT_VALUES = [
    None,
    "ok",
    "#edit",
    "#.jsp",
    "##",
    "<home>",
    "<home>..jsp",
    "/error/404",
]


def main() -> None:
    print(f"respath version: {respath.__version__}")

    aliases = respath.AliasRegistry("aliases")
    aliases.register("home", "/index")
    resolver = respath.PathResolver(aliases, respath.StaticPrefix("/app"))

    print(f"\nAction path: {ACTION_PATH}")
    for value in RESULT_VALUES:
        result = resolver.resolve_result_path(ACTION_PATH, value)
        print(f"  {value!r:14} -> path={result.path!r:22} value={result.value!r}")

    full = resolver.resolve_result_path_string(ACTION_PATH, "#.jsp")
    print(f"\nAs a single string: {full}")


if __name__ == "__main__":
    main()
