"""sqlite3 command rendering.

SQLite projects keep their development database at a fixed location, so
these commands ignore the environment settings entirely.
"""

DATABASE_PATH = "db/development.sqlite3"
DUMP_FILE = "dump"


def dump_command() -> str:
    return f"sqlite3 {DATABASE_PATH} .dump > {DUMP_FILE}"


def restore_command() -> str:
    return f"sqlite3 {DATABASE_PATH} < {DUMP_FILE}"
