"""pg_dump / pg_restore command rendering.

Dumps use the custom archive format (``-Fc``) so they can be fed to
``pg_restore``. A configured password is passed inline through
``PGPASSWORD`` for the operator to copy; it ends up in shell history.
"""

from db_dumper.config.models import EnvironmentConfig

DUMP_SUFFIX = ".dump"


def _with_password(config: EnvironmentConfig, command: str) -> str:
    if config.password:
        return f"PGPASSWORD={config.password} {command}"
    return command


def _user_flag(config: EnvironmentConfig) -> str:
    return f" -U {config.username}" if config.username else ""


def dump_command(config: EnvironmentConfig, name: str) -> str:
    """Render the pg_dump invocation writing ``<name>.dump``."""
    command = (
        f"pg_dump -Fc --no-acl --no-owner --clean{_user_flag(config)} "
        f"-h {config.host} {config.database} > {name}{DUMP_SUFFIX}"
    )
    return _with_password(config, command)


def restore_command(config: EnvironmentConfig, name: str) -> str:
    """Render the pg_restore invocation reading ``<name>.dump``."""
    command = (
        f"pg_restore --verbose --clean --no-acl --no-owner -h {config.host}"
        f"{_user_flag(config)} -d {config.database} {name}{DUMP_SUFFIX}"
    )
    return _with_password(config, command)
