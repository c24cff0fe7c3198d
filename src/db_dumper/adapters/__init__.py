"""Database adapters package.

Provides adapter classification and per-engine command renderers for
PostgreSQL, MySQL and SQLite.

Usage:
    from db_dumper.adapters import AdapterKind, classify, matching_kinds
"""

from db_dumper.adapters.base import AdapterKind, classify, matching_kinds

__all__ = [
    "AdapterKind",
    "classify",
    "matching_kinds",
]
