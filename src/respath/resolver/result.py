"""Resolved result path value object."""
from __future__ import annotations

from dataclasses import dataclass

# Separator between path and value when both are rendered as one string.
PATH_VALUE_SEPARATOR = "."


@dataclass(frozen=True)
class ResultPath:
    """A fully resolved forward/redirect target.

    Parameters
    ----------
    path:
        The resolved base path.
    value:
        Optional trailing value, kept apart from ``path`` so that the
        dispatch layer can treat it separately (e.g. as an extension).
    """

    path: str
    value: str | None = None

    @property
    def path_value(self) -> str:
        """Return ``path`` alone, or ``path`` and ``value`` joined by a dot."""
        if self.value is None:
            return self.path
        return f"{self.path}{PATH_VALUE_SEPARATOR}{self.value}"

    def __str__(self) -> str:
        return self.path_value
