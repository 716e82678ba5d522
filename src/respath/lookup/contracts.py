"""Capability contracts consumed by the path resolver.

The resolver never owns its aliases or its prefix. It asks two small
collaborators for them, each described here as a ``typing.Protocol`` so
that any object with the right method can be plugged in without
subclassing.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AliasLookup(Protocol):
    """Resolve an alias name to its configured target.

    Implementations must be pure lookups: calling ``resolve`` has no
    side effects visible to the resolver.
    """

    def resolve(self, name: str) -> str | None:
        """Return the target for ``name``, or ``None`` if it is unknown."""
        ...


@runtime_checkable
class PrefixProvider(Protocol):
    """Supply the globally configured result-path prefix."""

    def current_prefix(self) -> str | None:
        """Return the prefix, or ``None`` when no prefix is set."""
        ...
