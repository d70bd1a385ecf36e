#!/usr/bin/env python3
# Design: DESIGN.md
"""
Enum Artifact Writer

Places generated enums under the output directory, one <TypeName>.java per
table, in the sub-directory matching the Java package when one is configured.

Writes are atomic: content goes to a temporary sibling first and is moved over
the target with os.replace(), so an interrupted run never leaves a truncated
.java file behind. check_artifact() supports --check-only runs, which compare
instead of write.
"""

import os
from pathlib import Path


def artifact_path(output_dir: str | Path, type_name: str, package: str | None = None) -> Path:
    """Return the .java path for type_name."""
    directory = Path(output_dir)
    if package:
        directory = directory.joinpath(*package.split("."))
    return directory / f"{type_name}.java"


def write_artifact(path: Path, content: str) -> Path:
    """Atomically write content to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    return path


def check_artifact(path: Path, content: str) -> bool:
    """Return True if path exists and holds exactly content."""
    if not path.exists():
        return False
    return path.read_text(encoding="utf-8") == content
