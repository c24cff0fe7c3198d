"""CLI for printing database dump and restore commands.

Reads ``config/database.yml`` and prints the commands an operator would
run to dump (and optionally restore) one environment's database. Nothing
is executed.

Usage:
    db-dumper                      # development, ./config/database.yml next to the program
    db-dumper production
    db-dumper production -p ~/src/shop
    db-dumper production -p ~/src/shop/config/database.yml -F
    DB_DUMPER_CONFIG=~/src/shop db-dumper staging

Exit codes:
    0  commands printed (or adapter not recognised, nothing printed)
    1  environment not found in the configuration
    2  usage error, configuration missing or unparseable
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from db_dumper.adapters.base import AdapterKind, matching_kinds
from db_dumper.backup.commands import build_command_spec
from db_dumper.backup.models import CommandSpec
from db_dumper.backup.naming import derive_artifact_name
from db_dumper.config.loader import normalize_environment_name, resolve, select_environment
from db_dumper.errors import ConfigNotFoundError, ConfigParseError, UnknownEnvironmentError

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

CONFIG_ENV_VAR = "DB_DUMPER_CONFIG"


def _print_command(text: str, style: str | None = None) -> None:
    # Command text may contain brackets (passwords); never treat it as markup
    console.print(text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _print_error(error: Exception) -> None:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]", emoji=False, highlight=False, soft_wrap=True)


def _print_spec(spec: CommandSpec) -> None:
    """Print one adapter's commands under the Dump:/Restore: labels."""
    style = "green" if spec.kind is AdapterKind.POSTGRES else None
    _print_command(spec.dump, style=style)
    if spec.restore is not None:
        console.print()
        console.print("[yellow]Restore:[/yellow]")
        console.print()
        _print_command(spec.restore)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_dump(args: argparse.Namespace) -> int:
    """Resolve the environment and print its dump (and restore) commands.

    Args:
        args: Parsed arguments with environment, path, restore.

    Returns:
        0 on success, 1 for an unknown environment, 2 for config errors.
    """
    environment = normalize_environment_name(args.environment)
    explicit_path = args.path or os.environ.get(CONFIG_ENV_VAR) or None

    try:
        config_set, source = resolve(explicit_path)
        config = select_environment(config_set, environment)
    except (ConfigNotFoundError, ConfigParseError) as e:
        _print_error(e)
        return 2
    except UnknownEnvironmentError as e:
        _print_error(e)
        return 1

    name = derive_artifact_name(source, environment, datetime.now())
    kinds = matching_kinds(config.adapter)
    logger.debug(f"Environment '{environment}' adapter '{config.adapter}' -> {[k.name for k in kinds]}")

    console.print("[green]Dump:[/green]")
    console.print()

    if not kinds:
        logger.info(f"Adapter '{config.adapter}' not recognised; no commands generated")
        return 0

    for kind in kinds:
        _print_spec(build_command_spec(config, kind, name, include_restore=args.restore))

    return 0


def main() -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        prog="db-dumper",
        description="Print the commands to dump (and restore) a database from config/database.yml",
    )
    parser.add_argument(
        "environment",
        nargs="?",
        default="",
        help="Environment name from database.yml (default: development)",
    )
    parser.add_argument(
        "-p",
        dest="path",
        default="",
        help=(
            "Path to the YAML file or project directory "
            f"(otherwise config/database.yml, or ${CONFIG_ENV_VAR})"
        ),
    )
    parser.add_argument(
        "-F",
        dest="restore",
        action="store_true",
        help="Show restore operation",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    args = parser.parse_args()
    _configure_logging(args.verbose)
    return cmd_dump(args)


if __name__ == "__main__":
    sys.exit(main())
