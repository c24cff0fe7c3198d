"""db-dumper: print database dump/restore commands from database.yml.

Resolves a deployment environment's connection settings from a
Rails-style ``config/database.yml`` and renders the ``pg_dump``,
``mysqldump`` or ``sqlite3`` command lines (plus their restore
counterparts) for an operator to run. Nothing is executed.

Usage:
    from db_dumper import resolve, select_environment, classify
    from db_dumper import build_command_spec, derive_artifact_name
"""

__version__ = "0.1.0"

# Adapters
from db_dumper.adapters.base import AdapterKind, classify, matching_kinds

# Config
from db_dumper.config.loader import (
    load_config_set,
    normalize_environment_name,
    resolve,
    resolve_config_path,
    select_environment,
)
from db_dumper.config.models import ConfigSet, EnvironmentConfig

# Commands
from db_dumper.backup.commands import build_command_spec, build_dump, build_restore
from db_dumper.backup.models import CommandSpec
from db_dumper.backup.naming import derive_artifact_name

# Errors
from db_dumper.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    DumperError,
    UnknownEnvironmentError,
)

__all__ = [
    # Adapters
    "AdapterKind",
    "classify",
    "matching_kinds",
    # Config
    "resolve",
    "resolve_config_path",
    "load_config_set",
    "select_environment",
    "normalize_environment_name",
    "ConfigSet",
    "EnvironmentConfig",
    # Commands
    "build_dump",
    "build_restore",
    "build_command_spec",
    "CommandSpec",
    "derive_artifact_name",
    # Errors
    "DumperError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "UnknownEnvironmentError",
]
