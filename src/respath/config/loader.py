"""YAML configuration for the path resolver.

A configuration document declares the result-path prefix, the path
aliases and the action paths that act as fallback aliases::

    prefix: /app
    aliases:
      home: /index.html
      login: /auth/login
    actions:
      user.list: /user/list

Every key is optional. ``ResolverConfig.build_resolver`` wires the
document into a ready-to-use ``PathResolver``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from respath.lookup.registry import AliasRegistry, ChainedAliasLookup, StaticPrefix
from respath.resolver.resolver import PathResolver

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"prefix", "aliases", "actions"})


class ConfigError(Exception):
    """Raised when a configuration document cannot be loaded.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    source:
        Path of the offending file, when the document came from disk.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        self.message = message
        self.source = source
        location = f"{source}: " if source else ""
        super().__init__(f"{location}{message}")


@dataclass
class ResolverConfig:
    """Parsed resolver configuration.

    Parameters
    ----------
    prefix:
        Prefix prepended to relatively resolved paths, or ``None``.
    aliases:
        Path aliases, consulted first.
    actions:
        Action name to action path mapping, consulted when no path
        alias matches.
    """

    prefix: str | None = None
    aliases: dict[str, str] = field(default_factory=dict)
    actions: dict[str, str] = field(default_factory=dict)

    def build_resolver(self) -> PathResolver:
        """Return a ``PathResolver`` backed by this configuration."""
        lookup = ChainedAliasLookup(
            AliasRegistry.from_mapping(self.aliases, name="aliases"),
            AliasRegistry.from_mapping(self.actions, name="actions"),
        )
        return PathResolver(lookup, StaticPrefix(self.prefix))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.prefix is not None:
            data["prefix"] = self.prefix
        if self.aliases:
            data["aliases"] = dict(self.aliases)
        if self.actions:
            data["actions"] = dict(self.actions)
        return data

    def to_yaml(self) -> str:
        """Serialize the configuration to a YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, allow_unicode=True)


def _string_mapping(data: object, key: str, source: str | None) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{key!r} must be a mapping, got {type(data).__name__}", source
        )
    result: dict[str, str] = {}
    for name, target in data.items():
        if not isinstance(name, str) or not isinstance(target, str):
            raise ConfigError(
                f"{key!r} entries must map strings to strings, got {name!r}: {target!r}",
                source,
            )
        result[name] = target
    return result


def parse_config(text: str, source: str | None = None) -> ResolverConfig:
    """Parse a YAML configuration document.

    Parameters
    ----------
    text:
        YAML source text. An empty document yields the default config.
    source:
        Optional origin of ``text``, used in error messages.

    Raises
    ------
    ConfigError
        If the text is not valid YAML or has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", source) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"top-level document must be a mapping, got {type(data).__name__}", source
        )

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown key(s): {', '.join(unknown)}", source)

    prefix = data.get("prefix")
    if prefix is not None and not isinstance(prefix, str):
        raise ConfigError(
            f"'prefix' must be a string, got {type(prefix).__name__}", source
        )

    config = ResolverConfig(
        prefix=prefix,
        aliases=_string_mapping(data.get("aliases"), "aliases", source),
        actions=_string_mapping(data.get("actions"), "actions", source),
    )
    logger.debug(
        "Loaded config%s: prefix=%r, %d alias(es), %d action(s)",
        f" from {source}" if source else "",
        config.prefix,
        len(config.aliases),
        len(config.actions),
    )
    return config


def load_config(path: str | Path) -> ResolverConfig:
    """Read and parse a YAML configuration file.

    Raises
    ------
    ConfigError
        If the file cannot be read or its content is invalid.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read file: {exc}", source) from exc
    return parse_config(text, source)
