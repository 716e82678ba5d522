"""CLI package.

The ``cli`` sub-package contains the Click application and its
commands. It builds resolvers only through ``respath.config``.
"""
from __future__ import annotations
