"""Shared fixtures: a project tree with config/database.yml."""

import textwrap
from pathlib import Path

import pytest

DATABASE_YML = textwrap.dedent("""\
    development:
      adapter: postgresql
      database: app_dev
      username: app
    production:
      adapter: mysql2
      host: db.internal
      database: app_prod
      username: app
      password: secret
""")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A ``shop/config/database.yml`` project with two environments."""
    root = tmp_path / "shop"
    (root / "config").mkdir(parents=True)
    (root / "config" / "database.yml").write_text(DATABASE_YML)
    return root


@pytest.fixture
def config_file(project_dir: Path) -> Path:
    return project_dir / "config" / "database.yml"
