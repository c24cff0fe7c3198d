"""Adapter classification.

Matching is case-sensitive substring containment on the ``adapter`` value
from database.yml, so ``postgresql``, ``postgis`` and ``mysql2`` all work.
"""

from enum import Enum


class AdapterKind(Enum):
    """Database engine families we know how to dump."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    UNKNOWN = "unknown"


def classify(adapter: str) -> AdapterKind:
    """Classify an adapter string by priority: postgres, mysql, sqlite."""
    if "postgres" in adapter:
        return AdapterKind.POSTGRES
    if "mysql" in adapter:
        return AdapterKind.MYSQL
    if "sqlite" in adapter:
        return AdapterKind.SQLITE
    return AdapterKind.UNKNOWN


def matching_kinds(adapter: str) -> list[AdapterKind]:
    """Evaluate the postgres and mysql checks independently.

    A string naming both engines yields both kinds (postgres first). SQLite
    is only considered when neither matched. An empty list means the adapter
    is unknown and nothing should be rendered.
    """
    kinds = []
    if "postgres" in adapter:
        kinds.append(AdapterKind.POSTGRES)
    if "mysql" in adapter:
        kinds.append(AdapterKind.MYSQL)
    if not kinds and "sqlite" in adapter:
        kinds.append(AdapterKind.SQLITE)
    return kinds
