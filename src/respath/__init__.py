"""respath — result path resolution: alias macros and back markers.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import respath

    resolver = respath.PathResolver(
        respath.AliasRegistry.from_mapping({"home": "/index"}),
        respath.StaticPrefix("/app"),
    )

    resolver.resolve_result_path("/book/view", "<home>")
    # ResultPath(path='/index', value=None)

    # Or with aliases passed as a plain mapping
    respath.resolve_result_path("/book/view", "#edit", prefix="/app")
    # ResultPath(path='/app/book.edit', value=None)

    respath.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Mapping

from respath.config import ConfigError, ResolverConfig, load_config, parse_config
from respath.lookup import (
    AliasAlreadyRegisteredError,
    AliasLookup,
    AliasNotFoundError,
    AliasRegistry,
    ChainedAliasLookup,
    PrefixProvider,
    StaticPrefix,
)
from respath.resolver import PathResolver, ResultPath

__version__: str = "0.1.0"


def _resolver(aliases: Mapping[str, str] | None, prefix: str | None) -> PathResolver:
    return PathResolver(AliasRegistry.from_mapping(aliases or {}), StaticPrefix(prefix))


def resolve_alias(value: str, aliases: Mapping[str, str] | None = None) -> str:
    """Expand alias references in ``value`` using a plain mapping.

    Parameters
    ----------
    value:
        An alias name, or text containing ``<name>`` markers.
    aliases:
        Alias name to target mapping.

    Returns
    -------
    str
        The expanded text.
    """
    return _resolver(aliases, None).resolve_alias(value)


def resolve_result_path(
    path: str,
    value: str | None,
    aliases: Mapping[str, str] | None = None,
    prefix: str | None = None,
) -> ResultPath:
    """Resolve ``path`` and ``value`` into a ``ResultPath``.

    Parameters
    ----------
    path:
        The base path.
    value:
        Optional result value with alias and ``#`` macros.
    aliases:
        Alias name to target mapping.
    prefix:
        Prefix prepended to relatively resolved paths.
    """
    return _resolver(aliases, prefix).resolve_result_path(path, value)


def resolve_result_path_string(
    path: str,
    value: str | None,
    aliases: Mapping[str, str] | None = None,
    prefix: str | None = None,
) -> str:
    """Resolve ``path`` and ``value`` into one string, with a final alias pass."""
    return _resolver(aliases, prefix).resolve_result_path_string(path, value)


__all__ = [
    "__version__",
    "resolve_alias",
    "resolve_result_path",
    "resolve_result_path_string",
    "load_config",
    "parse_config",
    "ConfigError",
    "ResolverConfig",
    "PathResolver",
    "ResultPath",
    "AliasLookup",
    "PrefixProvider",
    "AliasRegistry",
    "ChainedAliasLookup",
    "StaticPrefix",
    "AliasNotFoundError",
    "AliasAlreadyRegisteredError",
]
