"""Dump/restore command synthesis and artifact naming.

Usage:
    from db_dumper.backup import build_command_spec, derive_artifact_name
"""

from db_dumper.backup.commands import build_command_spec, build_dump, build_restore
from db_dumper.backup.models import CommandSpec
from db_dumper.backup.naming import derive_artifact_name

__all__ = [
    "CommandSpec",
    "build_dump",
    "build_restore",
    "build_command_spec",
    "derive_artifact_name",
]
