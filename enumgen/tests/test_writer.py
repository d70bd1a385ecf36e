"""
Tests for engine/writer.py

Validates:
- Artifact paths with and without a Java package
- Atomic writes leave no temporary files behind
- check_artifact compares content exactly
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from enumgen.engine.writer import artifact_path, check_artifact, write_artifact


def test_artifact_path_without_package(tmp_path):
    assert artifact_path(tmp_path, "StatusEnum") == tmp_path / "StatusEnum.java"


def test_artifact_path_with_package(tmp_path):
    path = artifact_path(tmp_path, "StatusEnum", "com.acme.md")
    assert path == tmp_path / "com" / "acme" / "md" / "StatusEnum.java"


def test_write_artifact_creates_directories(tmp_path):
    path = artifact_path(tmp_path / "out", "StatusEnum", "com.acme")
    write_artifact(path, "public enum StatusEnum {\n}\n")

    assert path.read_text(encoding="utf-8") == "public enum StatusEnum {\n}\n"
    assert [p.name for p in path.parent.iterdir()] == ["StatusEnum.java"]


def test_write_artifact_replaces_existing(tmp_path):
    path = tmp_path / "StatusEnum.java"
    path.write_text("old", encoding="utf-8")
    write_artifact(path, "new")
    assert path.read_text(encoding="utf-8") == "new"


def test_check_artifact(tmp_path):
    path = tmp_path / "StatusEnum.java"
    assert not check_artifact(path, "x")
    path.write_text("x", encoding="utf-8")
    assert check_artifact(path, "x")
    assert not check_artifact(path, "y")
