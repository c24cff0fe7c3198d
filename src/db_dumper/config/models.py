"""Pydantic models for environment-keyed database configuration."""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "localhost"


class EnvironmentConfig(BaseModel):
    """Database access settings for one environment in database.yml.

    A missing ``database`` decodes as empty, like the shared ``default:``
    block Rails files merge into real environments. Keys other than the
    five below (``pool``, ``encoding``, ``port``...) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    adapter: str = ""
    host: str = ""
    database: str = ""
    username: str = ""
    password: str = ""

    @field_validator("adapter", "host", "database", "username", "password", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        # `host:` with no value loads as None
        if value is None:
            return ""
        return value

    def with_defaults(self) -> "EnvironmentConfig":
        """Return a copy with implicit defaults applied (only ``host``)."""
        if self.host:
            return self
        return self.model_copy(update={"host": DEFAULT_HOST})


class ConfigSet(BaseModel):
    """All environments parsed from one configuration file.

    ``environments`` is a read-only mapping view.
    """

    model_config = ConfigDict(frozen=True)

    source: Path
    environments: Mapping[str, EnvironmentConfig] = Field(default_factory=dict, validate_default=True)

    @field_validator("environments", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, EnvironmentConfig]) -> Mapping[str, EnvironmentConfig]:
        return MappingProxyType(dict(value))

    def names(self) -> list[str]:
        """Sorted environment names."""
        return sorted(self.environments)
