"""
Tests for cli/cli.py

Runs main() with patched argv against a temporary project root.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from enumgen.cli import cli
from enumgen.engine.config import DB_ENV_VAR


@pytest.fixture(autouse=True)
def no_db_env(monkeypatch):
    monkeypatch.delenv(DB_ENV_VAR, raising=False)


@pytest.fixture
def project(make_db, tmp_path):
    """Project root with a config file and a master data database."""
    (tmp_path / ".enumgen").mkdir()
    (tmp_path / ".enumgen" / "config.yaml").write_text(
        "output:\n  directory: java\n  package: com.acme\n", encoding="utf-8"
    )
    make_db(
        "CREATE TABLE status_stammdaten (code TEXT PRIMARY KEY, label TEXT)",
        "INSERT INTO status_stammdaten VALUES ('open', 'Open')",
        "CREATE TABLE region_stammdaten (a TEXT, b TEXT, PRIMARY KEY (a, b))",
        "CREATE TABLE orders (id INTEGER PRIMARY KEY)",
    )
    return tmp_path


def run_cli(monkeypatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["enumgen", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    return exc_info.value.code


def test_generate_writes_enums(monkeypatch, project, capsys):
    code = run_cli(monkeypatch, "--project-root", str(project), "generate")

    assert code == 0
    assert (project / "java" / "com" / "acme" / "StatusStammdatenEnum.java").exists()
    out = capsys.readouterr().out
    assert "Generated 1 enum(s)" in out
    assert "region_stammdaten" in out


def test_check_only_exit_code(monkeypatch, project):
    assert run_cli(monkeypatch, "--project-root", str(project), "generate", "--check-only") == 1
    assert run_cli(monkeypatch, "--project-root", str(project), "generate") == 0
    assert run_cli(monkeypatch, "--project-root", str(project), "generate", "--check-only") == 0


def test_missing_database(monkeypatch, project, capsys):
    code = run_cli(
        monkeypatch, "--project-root", str(project), "--db", str(project / "missing.db"), "generate"
    )
    assert code == 1
    assert "Database does not exist" in capsys.readouterr().err


def test_tables_lists_verdicts(monkeypatch, project, capsys):
    code = run_cli(monkeypatch, "--project-root", str(project), "tables")

    assert code == 0
    lines = {line.split()[0]: line for line in capsys.readouterr().out.splitlines()[2:]}
    assert "not master data" in lines["orders"]
    assert "rejected" in lines["region_stammdaten"]
    assert "StatusStammdatenEnum" in lines["status_stammdaten"]


def test_generate_reports_corrupt_database(monkeypatch, project, capsys):
    (project / "master_data.db").write_bytes(b"this is not an sqlite database" * 10)

    code = run_cli(monkeypatch, "--project-root", str(project), "generate")

    assert code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_tables_reports_unknown_schema(monkeypatch, project, capsys):
    (project / ".enumgen" / "config.yaml").write_text(
        "database:\n  schema: nowhere\n", encoding="utf-8"
    )

    code = run_cli(monkeypatch, "--project-root", str(project), "tables")

    assert code == 1
    assert "Error: " in capsys.readouterr().err
