"""Artifact base names for dump files."""

from datetime import date
from pathlib import Path

DATE_FORMAT = "%Y%m%d"


def derive_artifact_name(source: Path, environment: str, now: date) -> str:
    """Build ``<project>_<env prefix>_<YYYYMMDD>``.

    The project name is the grandparent directory of the config file
    (``<project>/config/database.yml``). The environment is truncated to its
    first three characters. Running twice on the same day yields the same
    name, so an earlier dump of that day gets overwritten.

    Args:
        source: Resolved path of the configuration file.
        environment: Selected environment name.
        now: Current date or datetime; only the date portion is used.

    Example:
        >>> derive_artifact_name(Path("/srv/shop/config/database.yml"), "production", date(2024, 3, 9))
        'shop_pro_20240309'
    """
    project = source.parent.parent.name
    return f"{project}_{environment[:3]}_{now.strftime(DATE_FORMAT)}"
