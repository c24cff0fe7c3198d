"""Tests for the db-dumper command line."""

from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from db_dumper.cli import main

TODAY = date.today().strftime("%Y%m%d")


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DB_DUMPER_CONFIG", raising=False)


def _run(*argv: str) -> int:
    with patch("sys.argv", ["db-dumper", *argv]):
        return main()


class TestDumpOutput:
    def test_default_environment_postgres(self, project_dir: Path, capsys) -> None:
        """Blank environment means development."""
        assert _run("-p", str(project_dir)) == 0

        out = capsys.readouterr().out
        assert out == (
            "Dump:\n\n"
            "pg_dump -Fc --no-acl --no-owner --clean -U app -h localhost app_dev "
            f"> shop_dev_{TODAY}.dump\n"
        )

    def test_mysql_with_password(self, config_file: Path, capsys) -> None:
        assert _run("production", "-p", str(config_file)) == 0

        out = capsys.readouterr().out
        assert out == (
            "Dump:\n\n"
            "Password: secret\n\n"
            f"mysqldump -u app -p -h db.internal app_prod > shop_pro_{TODAY}.sql\n"
        )

    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_no_restore_without_flag(self, project_dir: Path, environment: str, capsys) -> None:
        _run(environment, "-p", str(project_dir))
        out = capsys.readouterr().out
        assert "Restore:" not in out
        assert "pg_restore" not in out
        assert "mysql -u" not in out

    def test_postgres_restore_flag(self, project_dir: Path, capsys) -> None:
        assert _run("development", "-p", str(project_dir), "-F") == 0

        out = capsys.readouterr().out
        assert "\nRestore:\n\n" in out
        assert out.rstrip().endswith(f"-d app_dev shop_dev_{TODAY}.dump")
        assert out.index("pg_dump") < out.index("Restore:") < out.index("pg_restore")

    def test_mysql_restore_flag(self, project_dir: Path, capsys) -> None:
        assert _run("production", "-p", str(project_dir), "-F") == 0

        out = capsys.readouterr().out
        assert "Restore:" in out
        assert f"mysql -u app -p -h db.internal app_prod < shop_pro_{TODAY}.sql" in out

    def test_unknown_adapter_prints_no_commands(self, tmp_path: Path, capsys) -> None:
        config = tmp_path / "app" / "config" / "database.yml"
        config.parent.mkdir(parents=True)
        config.write_text("development:\n  adapter: oracle_enhanced\n  database: app\n")

        assert _run("-p", str(config), "-F") == 0

        out = capsys.readouterr().out
        assert out == "Dump:\n\n"

    def test_adapter_naming_both_engines(self, tmp_path: Path, capsys) -> None:
        config = tmp_path / "app" / "config" / "database.yml"
        config.parent.mkdir(parents=True)
        config.write_text("development:\n  adapter: mysql_postgres\n  database: app\n")

        assert _run("-p", str(config)) == 0

        out = capsys.readouterr().out
        assert "pg_dump" in out
        assert "mysqldump" in out
        assert out.index("pg_dump") < out.index("mysqldump")

    def test_password_with_brackets_printed_verbatim(self, tmp_path: Path, capsys) -> None:
        config = tmp_path / "app" / "config" / "database.yml"
        config.parent.mkdir(parents=True)
        config.write_text(
            "development:\n  adapter: postgresql\n  database: app\n  password: '[red]x[/red]'\n"
        )

        assert _run("-p", str(config)) == 0
        assert "PGPASSWORD=[red]x[/red] pg_dump" in capsys.readouterr().out

    @pytest.mark.parametrize("password", ["0123", "1.10", "yes", "2024-01-01"])
    def test_password_printed_exactly_as_written(self, tmp_path: Path, password: str, capsys) -> None:
        config = tmp_path / "app" / "config" / "database.yml"
        config.parent.mkdir(parents=True)
        config.write_text(
            "development:\n  adapter: postgresql\n  database: app\n"
            f"  password: {password}\n"
            "production:\n  adapter: mysql2\n  database: app\n"
            f"  password: {password}\n"
        )

        assert _run("development", "-p", str(config)) == 0
        assert f"PGPASSWORD={password} pg_dump " in capsys.readouterr().out

        assert _run("production", "-p", str(config)) == 0
        assert f"\nPassword: {password}\n\nmysqldump " in capsys.readouterr().out


class TestConfigLocation:
    def test_env_var_used_when_no_flag(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        monkeypatch.setenv("DB_DUMPER_CONFIG", str(project_dir))
        assert _run("production") == 0
        assert "mysqldump" in capsys.readouterr().out

    def test_program_directory_default(self, project_dir: Path, capsys) -> None:
        """Without -p the config is looked up next to the program."""
        with patch("sys.argv", [str(project_dir / "db-dumper")]):
            assert main() == 0
        assert "pg_dump" in capsys.readouterr().out


class TestErrors:
    def test_missing_config_exits_2(self, tmp_path: Path, capsys) -> None:
        assert _run("-p", str(tmp_path)) == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: No YAML file found" in captured.err
        assert "Traceback" not in captured.err

    def test_yml_path_that_is_directory_exits_2(self, tmp_path: Path, capsys) -> None:
        fake = tmp_path / "database.yml"
        fake.mkdir()

        assert _run("-p", str(fake)) == 2
        assert "Error: No YAML file found" in capsys.readouterr().err

    def test_unparseable_config_exits_2(self, tmp_path: Path, capsys) -> None:
        config = tmp_path / "broken.yml"
        config.write_text("development: [unclosed\n")

        assert _run("-p", str(config)) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error parsing YAML" in captured.err

    def test_unknown_environment_exits_1(self, project_dir: Path, capsys) -> None:
        assert _run("staging", "-p", str(project_dir)) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "staging" in captured.err
        assert "development, production" in captured.err

    def test_unknown_option_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run("-x")
        assert exc_info.value.code == 2
