"""Alias and prefix lookups for the path resolver.

Exports the two capability protocols and their in-memory implementations.
"""
from __future__ import annotations

from respath.lookup.contracts import AliasLookup, PrefixProvider
from respath.lookup.registry import (
    AliasAlreadyRegisteredError,
    AliasNotFoundError,
    AliasRegistry,
    ChainedAliasLookup,
    StaticPrefix,
)

__all__ = [
    "AliasLookup",
    "PrefixProvider",
    "AliasRegistry",
    "ChainedAliasLookup",
    "StaticPrefix",
    "AliasNotFoundError",
    "AliasAlreadyRegisteredError",
]
