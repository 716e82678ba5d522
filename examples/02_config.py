#!/usr/bin/env python3
"""Example: YAML configuration — respath

Load the prefix, path aliases and action paths from a YAML document
and build a resolver from it. Action paths act as fallback aliases.

Usage:
    python examples/02_config.py

Requirements:
    pip install respath
"""
from __future__ import annotations

import respath

CONFIG = """
prefix: /app
aliases:
  home: /index
  login: /auth/login
actions:
  user.list: /user/list
"""


def main() -> None:
    config = respath.parse_config(CONFIG)
    resolver = config.build_resolver()

    print("Configuration:")
    print(config.to_yaml())

    for value in ["<login>", "<user.list>..html", "user.list", "#save", "<unknown>x"]:
        print(f"{value!r:22} -> {resolver.resolve_result_path_string('/user/edit', value)}")


if __name__ == "__main__":
    main()
