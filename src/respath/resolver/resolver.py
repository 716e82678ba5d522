"""Result path resolver: expands alias macros and "go back" markers.

An action result names where to forward or redirect to. That target is
given as a base ``path`` plus an optional ``value`` which may contain
macros:

``<alias>``
    Replaced by the alias target. A value without any ``<`` is tried as
    an alias name in full.
``#``
    Each leading ``#`` strips the last ``/``- or ``.``-delimited segment
    from the base path (goes "back" one level).

A value starting with ``/`` (after alias expansion) is absolute: it
replaces the base path and bypasses the configured prefix. A ``..``
marker inside the value separates the new path from the new value.

Example
-------
::

    from respath.lookup import AliasRegistry, StaticPrefix
    from respath.resolver import PathResolver

    aliases = AliasRegistry.from_mapping({"home": "/index"})
    resolver = PathResolver(aliases, StaticPrefix("/app"))

    resolver.resolve_result_path("/book/view", "<home>")
    # ResultPath(path='/index', value=None)
    resolver.resolve_result_path("/book/view", "#edit")
    # ResultPath(path='/app/book.edit', value=None)

Every operation is total: unknown aliases expand to nothing, an
unterminated ``<`` runs to the end of the string, and no input string
makes the resolver raise.
"""
from __future__ import annotations

import logging
from typing import Final

from respath.lookup.contracts import AliasLookup, PrefixProvider
from respath.lookup.registry import StaticPrefix
from respath.resolver.result import ResultPath

logger = logging.getLogger(__name__)

_ALIAS_OPEN: Final[str] = "<"
_ALIAS_CLOSE: Final[str] = ">"
_BACK: Final[str] = "#"
_SPLIT: Final[str] = ".."


def _collapse_leading_slashes(text: str) -> str:
    """Reduce a leading run of two or more ``/`` to a single one."""
    count = len(text) - len(text.lstrip("/"))
    if count > 1:
        return text[count - 1 :]
    return text


def _last_slash_dot(path: str) -> int:
    """Return the index of the last ``/`` or ``.`` in ``path``, or -1."""
    return max(path.rfind("/"), path.rfind("."))


class PathResolver:
    """Resolve action result descriptors into final result paths.

    Parameters
    ----------
    aliases:
        Lookup used to expand alias names.
    prefix:
        Provider of the prefix prepended to relatively resolved paths.
        When omitted, no prefix is applied.
    """

    def __init__(
        self, aliases: AliasLookup, prefix: PrefixProvider | None = None
    ) -> None:
        self._aliases = aliases
        self._prefix: PrefixProvider = prefix if prefix is not None else StaticPrefix()

    @property
    def aliases(self) -> AliasLookup:
        return self._aliases

    @property
    def prefix(self) -> PrefixProvider:
        return self._prefix

    # ------------------------------------------------------------------
    # Alias expansion
    # ------------------------------------------------------------------

    def resolve_alias(self, value: str) -> str:
        """Expand alias references in ``value``.

        Parameters
        ----------
        value:
            Text that is either an alias name in full, or contains
            ``<name>`` markers mixed with literal text.

        Returns
        -------
        str
            The expanded text. A whole-string value that is not a known
            alias is returned unchanged; an unknown ``<name>`` marker is
            dropped.
        """
        if not value:
            return value

        if _ALIAS_OPEN not in value:
            target = self._aliases.resolve(value)
            return target if target is not None else value

        parts: list[str] = []
        pos = 0
        length = len(value)
        while pos < length:
            start = value.find(_ALIAS_OPEN, pos)
            if start == -1:
                parts.append(value[pos:])
                break

            parts.append(value[pos:start])
            start += 1
            end = value.find(_ALIAS_CLOSE, start)
            if end == -1:
                end = length
            name = value[start:end]

            target = self._aliases.resolve(name)
            if target is not None:
                parts.append(target)
            else:
                logger.debug("Alias %r in %r not found; dropping marker", name, value)
            pos = end + 1

        return _collapse_leading_slashes("".join(parts))

    # ------------------------------------------------------------------
    # Result path resolution
    # ------------------------------------------------------------------

    def resolve_result_path(self, path: str, value: str | None) -> ResultPath:
        """Resolve a base ``path`` and optional ``value`` into a ``ResultPath``.

        Parameters
        ----------
        path:
            The base path, usually the path of the action that produced
            the result.
        value:
            The result value, possibly holding alias and ``#`` macros.
            ``None`` leaves ``path`` as is (apart from the prefix).

        Returns
        -------
        ResultPath
            The resolved path and the remaining value.
        """
        absolute = False

        if value is not None:
            value = self.resolve_alias(value)

            if value.startswith("/"):
                absolute = True
                split = value.find(_SPLIT)
                if split != -1:
                    path, value = value[:split], value[split + len(_SPLIT) :]
                else:
                    path, value = value, None
            else:
                path, value = self._resolve_relative(path, value)

        if not absolute:
            prefix = self._prefix.current_prefix()
            if prefix is not None:
                path = prefix + path

        logger.debug("Resolved result path %r (value=%r)", path, value)
        return ResultPath(path, value)

    def resolve_result_path_string(self, path: str, value: str | None) -> str:
        """Resolve to a single string and run one more alias pass over it.

        Joining path and value may form a marker that neither part held
        on its own, hence the extra expansion.
        """
        result_path = self.resolve_result_path(path, value)
        return self.resolve_alias(result_path.path_value)

    @staticmethod
    def _resolve_relative(path: str, value: str) -> tuple[str, str | None]:
        backs = len(value) - len(value.lstrip(_BACK))
        if backs == 0:
            return path, value

        for _ in range(backs):
            ndx = _last_slash_dot(path)
            if ndx != -1:
                path = path[:ndx]
        value = value[backs:]

        if value.startswith("."):
            return path, value[1:]

        split = value.find(_SPLIT)
        if split != -1:
            return f"{path}.{value[:split]}", value[split + len(_SPLIT) :]

        if value:
            path = path + value if path.endswith("/") else f"{path}.{value}"
        return path, None
