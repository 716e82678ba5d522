"""Resolver configuration module.

Exports ``ResolverConfig`` and the YAML loading helpers.
"""
from __future__ import annotations

from respath.config.loader import ConfigError, ResolverConfig, load_config, parse_config

__all__ = ["ConfigError", "ResolverConfig", "load_config", "parse_config"]
