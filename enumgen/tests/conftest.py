"""
pytest configuration for enum generator tests.

Adds the repository root to sys.path so that
'from enumgen.engine.xxx import ...' works without installing the package,
and provides a factory for throwaway SQLite master data databases.
"""

import sqlite3
import sys
from pathlib import Path

import pytest

# Ensure the repo root is on the path (enumgen package lives at <root>/enumgen/)
repo_root = Path(__file__).parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def make_db(tmp_path):
    """
    Return a factory that creates an SQLite file from SQL statements.

    Usage:
        db_path = make_db(
            "CREATE TABLE t (id TEXT PRIMARY KEY)",
            "INSERT INTO t VALUES ('a')",
        )
    """
    def _make(*statements: str, name: str = "master_data.db") -> Path:
        db_path = tmp_path / name
        conn = sqlite3.connect(str(db_path))
        try:
            for statement in statements:
                conn.execute(statement)
            conn.commit()
        finally:
            conn.close()
        return db_path

    return _make
