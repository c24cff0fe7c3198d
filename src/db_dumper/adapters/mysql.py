"""mysqldump / mysql command rendering.

The mysql client prompts for the password itself (``-p``), so a configured
password is shown on its own line above the command instead of inline.
"""

from db_dumper.config.models import EnvironmentConfig

DUMP_SUFFIX = ".sql"


def _with_password(config: EnvironmentConfig, command: str) -> str:
    if config.password:
        return f"Password: {config.password}\n\n{command}"
    return command


def _user_flag(config: EnvironmentConfig) -> str:
    return f"-u {config.username} " if config.username else ""


def dump_command(config: EnvironmentConfig, name: str) -> str:
    """Render the mysqldump invocation writing ``<name>.sql``."""
    command = (
        f"mysqldump {_user_flag(config)}-p -h {config.host} "
        f"{config.database} > {name}{DUMP_SUFFIX}"
    )
    return _with_password(config, command)


def restore_command(config: EnvironmentConfig, name: str) -> str:
    """Render the mysql client invocation reading ``<name>.sql``."""
    command = (
        f"mysql {_user_flag(config)}-p -h {config.host} "
        f"{config.database} < {name}{DUMP_SUFFIX}"
    )
    return _with_password(config, command)
