"""In-memory alias registry and prefix provider.

``AliasRegistry`` maps alias names to path fragments and satisfies the
``AliasLookup`` protocol. ``ChainedAliasLookup`` consults several lookups
in order, which is how path aliases and action paths are combined: an
alias is first searched among the explicit aliases, and only then among
the registered action paths.

Example
-------
::

    from respath.lookup import AliasRegistry, ChainedAliasLookup

    aliases = AliasRegistry("aliases")
    aliases.register("home", "/index.html")

    actions = AliasRegistry.from_mapping(
        {"user.list": "/user/list"}, name="actions"
    )

    lookup = ChainedAliasLookup(aliases, actions)
    lookup.resolve("home")       # '/index.html'
    lookup.resolve("user.list")  # '/user/list'
    lookup.resolve("missing")    # None
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from respath.lookup.contracts import AliasLookup

logger = logging.getLogger(__name__)


class AliasNotFoundError(KeyError):
    """Raised when a requested alias name is not in the registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.alias_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Alias {name!r} is not registered in the {registry_name!r} registry."
        )


class AliasAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.alias_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Alias {name!r} is already registered in the {registry_name!r} registry. "
            "Pass replace=True or deregister the existing entry first."
        )


class AliasRegistry:
    """Mutable mapping of alias names to their targets.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages
        and log records).
    """

    def __init__(self, name: str = "aliases") -> None:
        self._name = name
        self._aliases: dict[str, str] = {}

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, str], name: str = "aliases"
    ) -> AliasRegistry:
        """Build a registry pre-populated from ``mapping``.

        Raises
        ------
        TypeError
            If any key or value in ``mapping`` is not a string.
        """
        registry = cls(name)
        for alias, target in mapping.items():
            registry.register(alias, target)
        return registry

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str, target: str, replace: bool = False) -> None:
        """Register ``target`` under the alias ``name``.

        Parameters
        ----------
        name:
            The alias name, as it appears between ``<`` and ``>``.
        target:
            The path fragment the alias expands to. An empty string is a
            valid target.
        replace:
            When ``True``, an existing entry is overwritten silently.

        Raises
        ------
        AliasAlreadyRegisteredError
            If ``name`` is already in use and ``replace`` is ``False``.
        TypeError
            If ``name`` or ``target`` is not a string.
        """
        if not isinstance(name, str) or not isinstance(target, str):
            raise TypeError(
                f"Cannot register {name!r} -> {target!r} in {self._name!r}: "
                "alias names and targets must be strings."
            )
        if name in self._aliases and not replace:
            raise AliasAlreadyRegisteredError(name, self._name)
        self._aliases[name] = target
        logger.debug("Registered alias %r -> %r in registry %r", name, target, self._name)

    def deregister(self, name: str) -> None:
        """Remove an alias from the registry.

        Raises
        ------
        AliasNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._aliases:
            raise AliasNotFoundError(name, self._name)
        del self._aliases[name]
        logger.debug("Deregistered alias %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, name: str) -> str | None:
        """Return the target registered under ``name``, or ``None``."""
        return self._aliases.get(name)

    def get(self, name: str) -> str:
        """Return the target registered under ``name``.

        Raises
        ------
        AliasNotFoundError
            If no alias is registered under ``name``.
        """
        try:
            return self._aliases[name]
        except KeyError:
            raise AliasNotFoundError(name, self._name) from None

    def list_aliases(self) -> list[str]:
        """Return all registered alias names in alphabetical order."""
        return sorted(self._aliases)

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the registered aliases."""
        return dict(self._aliases)

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_aliases())

    def __repr__(self) -> str:
        return f"AliasRegistry(name={self._name!r}, aliases={self.list_aliases()})"


class ChainedAliasLookup:
    """Consult several alias lookups in order.

    The first lookup returning a non-``None`` target wins, so an empty
    string from an earlier lookup still shadows later ones.
    """

    def __init__(self, *lookups: AliasLookup) -> None:
        self._lookups: tuple[AliasLookup, ...] = lookups

    @property
    def lookups(self) -> tuple[AliasLookup, ...]:
        return self._lookups

    def resolve(self, name: str) -> str | None:
        for lookup in self._lookups:
            target = lookup.resolve(name)
            if target is not None:
                return target
        return None

    def __repr__(self) -> str:
        return f"ChainedAliasLookup({', '.join(repr(lk) for lk in self._lookups)})"


class StaticPrefix:
    """Prefix provider returning a fixed value (``None`` means no prefix)."""

    def __init__(self, prefix: str | None = None) -> None:
        self._prefix = prefix

    def current_prefix(self) -> str | None:
        return self._prefix

    def __repr__(self) -> str:
        return f"StaticPrefix({self._prefix!r})"
