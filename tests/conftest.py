"""Shared test fixtures for respath.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from respath.lookup import AliasRegistry, StaticPrefix
from respath.resolver import PathResolver


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def aliases() -> AliasRegistry:
    """A small alias registry used across resolver tests."""
    return AliasRegistry.from_mapping(
        {
            "home": "/index",
            "user": "user/view",
            "root": "/",
            "slashed": "/slashed",
            "empty": "",
            "ext": "html",
        }
    )


@pytest.fixture()
def resolver(aliases: AliasRegistry) -> PathResolver:
    """Resolver without a prefix."""
    return PathResolver(aliases)


@pytest.fixture()
def prefixed_resolver(aliases: AliasRegistry) -> PathResolver:
    """Resolver with the ``/app`` prefix."""
    return PathResolver(aliases, StaticPrefix("/app"))
