"""Result-path resolution.

Exports the ``PathResolver`` engine and the ``ResultPath`` value object.
"""
from __future__ import annotations

from respath.resolver.resolver import PathResolver
from respath.resolver.result import ResultPath

__all__ = ["PathResolver", "ResultPath"]
