"""Locate and load the environment-keyed database configuration.

The conventional layout is ``<project root>/config/database.yml``. A caller
may point at the YAML file itself or at a project directory.
"""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import yaml
from pydantic import ValidationError

from db_dumper.config.models import ConfigSet, EnvironmentConfig
from db_dumper.errors import ConfigNotFoundError, ConfigParseError, UnknownEnvironmentError

logger = logging.getLogger(__name__)

CONFIG_SUBPATH = Path("config") / "database.yml"
CONFIG_EXTENSIONS = (".yml", ".yaml")
DEFAULT_ENVIRONMENT = "development"

# Implicit YAML types that would rewrite settings text (`0123` -> 83, `yes` -> True)
_LOSSY_TAGS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:timestamp",
    }
)


class _SettingsLoader(yaml.SafeLoader):
    """SafeLoader that leaves plain scalars as written, apart from null."""


_SettingsLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _LOSSY_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _program_dir() -> Path:
    return Path(sys.argv[0]).resolve().parent


def resolve_config_path(
    explicit_path: str | Path | None = None,
    *,
    program_dir: Path | None = None,
    exists: Callable[[Path], bool] | None = None,
) -> Path:
    """Compute the configuration file location.

    Args:
        explicit_path: File or project directory given by the operator.
            Empty or None means the directory of the running program.
        program_dir: Directory used when no explicit path is given
            (default: directory containing ``sys.argv[0]``).
        exists: Existence check (default: ``Path.is_file``).

    Returns:
        Path to the YAML file.

    Raises:
        ConfigNotFoundError: If no file exists at the computed location.
    """
    exists = exists or Path.is_file

    if explicit_path:
        path = Path(explicit_path)
    else:
        path = program_dir if program_dir is not None else _program_dir()

    if not explicit_path or path.suffix not in CONFIG_EXTENSIONS:
        path = path / CONFIG_SUBPATH

    logger.debug(f"Resolved configuration path: {path}")
    if not exists(path):
        raise ConfigNotFoundError(path)
    return path


def load_config_set(path: Path) -> ConfigSet:
    """Parse a YAML file into a ConfigSet.

    Raises:
        ConfigParseError: If the file can't be read, isn't valid YAML, or is
            not a mapping of environment name to settings mapping.
    """
    try:
        raw_text = path.read_text()
    except OSError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    try:
        data = yaml.load(raw_text, Loader=_SettingsLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(path, "top level must be a mapping of environments")

    environments: dict[str, EnvironmentConfig] = {}
    for name, settings in data.items():
        if not isinstance(settings, dict):
            raise ConfigParseError(path, f"environment '{name}' must be a mapping")
        try:
            environments[str(name)] = EnvironmentConfig(**{str(k): v for k, v in settings.items()})
        except ValidationError as exc:
            raise ConfigParseError(path, f"environment '{name}': {exc}") from exc

    logger.debug(f"Loaded {len(environments)} environment(s) from {path}")
    return ConfigSet(source=path, environments=environments)


def resolve(
    explicit_path: str | Path | None = None,
    *,
    program_dir: Path | None = None,
    exists: Callable[[Path], bool] | None = None,
) -> tuple[ConfigSet, Path]:
    """Locate and load configuration in one step.

    Returns:
        Tuple of (ConfigSet, resolved file path)
    """
    path = resolve_config_path(explicit_path, program_dir=program_dir, exists=exists)
    return load_config_set(path), path


def normalize_environment_name(argument: str | None) -> str:
    """Strip the positional argument, falling back to ``development``."""
    if argument is None or not argument.strip():
        return DEFAULT_ENVIRONMENT
    return argument.strip()


def select_environment(config_set: ConfigSet, name: str) -> EnvironmentConfig:
    """Pick one environment and apply defaults.

    Raises:
        UnknownEnvironmentError: If ``name`` is not defined; carries the
            sorted list of available names.
    """
    if name not in config_set.environments:
        raise UnknownEnvironmentError(name, config_set.names())
    return config_set.environments[name].with_defaults()
