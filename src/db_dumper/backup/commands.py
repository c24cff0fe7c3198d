"""Dump/restore command synthesis.

Pure functions: nothing here touches the filesystem or spawns processes.
The output is text for an operator to paste into a shell.

Usage:
    from db_dumper.backup.commands import build_command_spec

    spec = build_command_spec(config, AdapterKind.POSTGRES, "shop_pro_20240309",
                              include_restore=True)
    print(spec.dump)
    print(spec.restore)
"""

from db_dumper.adapters import mysql, postgres, sqlite
from db_dumper.adapters.base import AdapterKind
from db_dumper.backup.models import CommandSpec
from db_dumper.config.models import EnvironmentConfig


def build_dump(config: EnvironmentConfig, kind: AdapterKind, name: str) -> str:
    """Render the dump command for ``kind``.

    Args:
        config: Selected environment with defaults applied.
        kind: Adapter kind to render for.
        name: Artifact base name (no suffix).

    Returns:
        Command text, possibly multi-line (MySQL password preamble).

    Raises:
        ValueError: If ``kind`` is ``AdapterKind.UNKNOWN``.
    """
    if kind is AdapterKind.POSTGRES:
        return postgres.dump_command(config, name)
    if kind is AdapterKind.MYSQL:
        return mysql.dump_command(config, name)
    if kind is AdapterKind.SQLITE:
        return sqlite.dump_command()
    raise ValueError(f"Cannot render a dump command for adapter kind {kind.name}")


def build_restore(config: EnvironmentConfig, kind: AdapterKind, name: str) -> str:
    """Render the restore command mirroring :func:`build_dump`.

    Raises:
        ValueError: If ``kind`` is ``AdapterKind.UNKNOWN``.
    """
    if kind is AdapterKind.POSTGRES:
        return postgres.restore_command(config, name)
    if kind is AdapterKind.MYSQL:
        return mysql.restore_command(config, name)
    if kind is AdapterKind.SQLITE:
        return sqlite.restore_command()
    raise ValueError(f"Cannot render a restore command for adapter kind {kind.name}")


def build_command_spec(
    config: EnvironmentConfig,
    kind: AdapterKind,
    name: str,
    *,
    include_restore: bool = False,
) -> CommandSpec:
    """Render dump text, plus restore text when ``include_restore`` is set."""
    return CommandSpec(
        kind=kind,
        dump=build_dump(config, kind, name),
        restore=build_restore(config, kind, name) if include_restore else None,
    )
