"""Configuration management: database.yml lookup, parsing, and models.

Usage:
    >>> from db_dumper.config import resolve, select_environment, EnvironmentConfig
"""

from db_dumper.config.loader import (
    load_config_set,
    normalize_environment_name,
    resolve,
    resolve_config_path,
    select_environment,
)
from db_dumper.config.models import ConfigSet, EnvironmentConfig

__all__ = [
    "resolve",
    "resolve_config_path",
    "load_config_set",
    "select_environment",
    "normalize_environment_name",
    "ConfigSet",
    "EnvironmentConfig",
]
