"""Exceptions raised while resolving dump configuration.

Every fatal condition is detected before any command text is rendered, so
callers only need to catch ``DumperError``.
"""

from pathlib import Path


class DumperError(Exception):
    """Base class for all db-dumper errors."""

    pass


class ConfigNotFoundError(DumperError):
    """Raised when no configuration file exists at the resolved location."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No YAML file found: {path}")


class ConfigParseError(DumperError):
    """Raised when the configuration is not a mapping of environment mappings."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error parsing YAML {path}: {reason}")


class UnknownEnvironmentError(DumperError):
    """Raised when the requested environment is not defined in the config."""

    def __init__(self, environment: str, available: list[str]) -> None:
        self.environment = environment
        self.available = sorted(available)
        super().__init__(
            f"No such environment found: '{environment}'. "
            f"Use one of: {', '.join(self.available) or '(none)'}"
        )
