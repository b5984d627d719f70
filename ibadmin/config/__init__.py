"""
Configuration management for the Infoblox administration toolkit.

This module provides centralized configuration handling with support for
INI-style config files, environment variables, .env files, and CLI
overrides, validated through a Pydantic schema.
"""

from ..exceptions import ConfigError
from .conf_file import read_config
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["ConfigError", "ConfigSchema", "ConfigLoader", "read_config"]
